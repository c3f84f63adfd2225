"""Search params domain entity."""

from dataclasses import dataclass, field

from .search_options import SearchOptionsEntity


@dataclass
class SearchParamsEntity:
    """Per-search state of one backend, created fresh for every lookup."""

    options: SearchOptionsEntity
    query: str = ""
    page: int = 1
    limit: int | None = None
    sort: str | None = None
    filters: dict[str, list[str]] = field(default_factory=dict)

    @property
    def backend_id(self) -> str:
        return self.options.backend_id

    def get_limit(self) -> int:
        if self.limit is not None and self.options.is_valid_limit(self.limit):
            return self.limit
        return self.options.default_limit

    def get_sort(self) -> str:
        if self.sort is not None and self.options.is_valid_sort(self.sort):
            return self.sort
        return self.options.default_sort

    def add_filter(self, field_name: str, value: str) -> None:
        self.filters.setdefault(field_name, []).append(value)
