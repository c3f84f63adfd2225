"""URL shortener protocol.

Implementations can include:
- none (URL returned unchanged, default)
- Redis-backed short links
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class UrlShortener(Protocol):
    def shorten(self, url: str) -> str:
        """Return a short form of ``url``."""
        ...

    def resolve(self, short_id: str) -> str:
        """Return the full URL for a short id.

        Raises:
            ShortUrlNotFoundError: If the id is unknown
        """
        ...
