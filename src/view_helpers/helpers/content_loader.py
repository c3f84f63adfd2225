"""Content loader helper, registered once per content type
(``authorNotes``, ``summaries``)."""

from typing import Any

from view_helpers import protocols


class ContentLoader:
    def __init__(self, loader: protocols.ContentLoader) -> None:
        self._loader = loader

    def __call__(self, isbn: str) -> Any:
        """Load content for ``isbn`` through the configured loader."""
        return self._loader.load_by_isbn(isbn)
