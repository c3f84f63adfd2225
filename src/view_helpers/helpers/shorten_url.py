"""URL shortening helper."""

from view_helpers.protocols import UrlShortener


class ShortenUrl:
    """Shorten URLs (e.g. permalinks in share dialogs) for templates."""

    def __init__(self, shortener: UrlShortener) -> None:
        self._shortener = shortener

    def __call__(self, url: str) -> str:
        return self._shortener.shorten(url)
