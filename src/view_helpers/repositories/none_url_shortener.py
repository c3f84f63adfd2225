"""Pass-through URL shortener."""

from view_helpers.exceptions import ShortUrlNotFoundError


class NoneUrlShortener:
    """URL shortener for the ``none`` mode: URLs are returned unchanged.

    Satisfies the UrlShortener protocol. There are no short ids, so
    ``resolve`` always fails.
    """

    def shorten(self, url: str) -> str:
        return url

    def resolve(self, short_id: str) -> str:
        raise ShortUrlNotFoundError(short_id)
