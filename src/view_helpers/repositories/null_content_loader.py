"""Content loader used when no content provider is configured."""

from typing import Any


class NullContentLoader:
    """Satisfies the ContentLoader protocol and never finds anything."""

    def __init__(self, content_type: str = "") -> None:
        self._content_type = content_type

    @property
    def content_type(self) -> str:
        return self._content_type

    def load_by_isbn(self, isbn: str) -> list[Any]:
        return []
