"""Cookie manager protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CookieManager(Protocol):
    """Reads request cookies and records cookies to send back.

    Example:
        ```python
        manager: CookieManager = RequestCookieManager(request.cookies)
        manager.set("ui", "standard")
        ```
    """

    def get(self, key: str) -> str | None:
        """Return a cookie value, or None if the cookie is not set."""
        ...

    def set(self, key: str, value: str, expire: int = 0) -> None:
        """Set a cookie.

        Args:
            key: Cookie name
            value: Cookie value
            expire: Expiration as a Unix timestamp (0 = session cookie)
        """
        ...

    def clear(self, key: str) -> None:
        """Expire a cookie."""
        ...

    def get_cookies(self) -> dict[str, str]:
        """Return all cookies as seen by this manager."""
        ...

    def get_path(self) -> str:
        ...

    def get_domain(self) -> str | None:
        ...

    def is_secure(self) -> bool:
        ...

    def get_session_name(self) -> str | None:
        ...
