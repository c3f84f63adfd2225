"""Content loader protocol (author notes, summaries, reviews...)."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContentLoader(Protocol):
    """Loads supplementary record content keyed by ISBN."""

    def load_by_isbn(self, isbn: str) -> Any:
        """Load content for an ISBN.

        Args:
            isbn: The ISBN to look up

        Returns:
            Provider-specific content (usually a list of entries)
        """
        ...
