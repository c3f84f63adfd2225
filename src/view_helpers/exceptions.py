"""Exceptions raised by registries and default collaborators.

Helpers themselves never raise or wrap: whatever a collaborator raises
reaches the template unchanged.
"""


class ViewHelperError(Exception):
    """Base class for errors raised inside this package."""


class ServiceNotFoundError(ViewHelperError, KeyError):
    """Raised when a plugin manager has no entry for the requested name."""

    def __init__(self, name: str, manager: str = "plugin manager") -> None:
        self.name = name
        self.manager = manager
        super().__init__(f"Unable to resolve {name!r} in {manager}")

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes
        return self.args[0]


class ShortUrlNotFoundError(ViewHelperError, LookupError):
    """Raised when a short link id cannot be resolved to a URL."""

    def __init__(self, short_id: str) -> None:
        self.short_id = short_id
        super().__init__(f"Short link not found: {short_id}")


class ForeignUrlError(ViewHelperError, ValueError):
    """Raised when asked to shorten a URL outside the site's base URL."""

    def __init__(self, url: str, base_url: str) -> None:
        self.url = url
        self.base_url = base_url
        super().__init__(f"Only URLs under {base_url} can be shortened, got {url}")
