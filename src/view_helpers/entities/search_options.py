"""Search options domain entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SearchOptionsEntity:
    """Static configuration of one search backend.

    Attributes:
        backend_id: Backend identifier (e.g. "Solr")
        default_limit: Results per page when none is requested
        limit_options: Page sizes offered to the user
        sort_options: Sort key -> translation key of its label
        default_sort: Sort key used when none is requested
        highlighting: Whether result highlighting is enabled
    """

    backend_id: str
    default_limit: int = 20
    limit_options: tuple[int, ...] = (10, 20, 40, 60, 80, 100)
    sort_options: dict[str, str] = field(
        default_factory=lambda: {
            "relevance": "sort_relevance",
            "year": "sort_year",
            "year asc": "sort_year_asc",
            "callnumber-sort": "sort_callnumber",
            "author": "sort_author",
            "title": "sort_title",
        }
    )
    default_sort: str = "relevance"
    highlighting: bool = True

    def is_valid_limit(self, limit: int) -> bool:
        return limit in self.limit_options

    def is_valid_sort(self, sort: str) -> bool:
        return sort in self.sort_options
