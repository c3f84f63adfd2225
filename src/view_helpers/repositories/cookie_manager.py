"""Request-scoped cookie manager."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping

from fastapi import Response

from view_helpers.config import settings


@dataclass
class _PendingCookie:
    value: str | None
    expire: int


class RequestCookieManager:
    """CookieManager over one request's cookies.

    Satisfies the CookieManager protocol. Changes made with ``set`` and
    ``clear`` are visible through ``get`` right away and are written to
    the outgoing response by ``apply``.
    """

    def __init__(
        self,
        cookies: Mapping[str, str],
        path: str | None = None,
        domain: str | None = None,
        secure: bool | None = None,
        session_name: str | None = None,
    ) -> None:
        self._cookies = dict(cookies)
        self._path = path or settings.cookie_path
        self._domain = domain if domain is not None else settings.cookie_domain
        self._secure = settings.cookie_secure if secure is None else secure
        self._session_name = session_name if session_name is not None else settings.session_name
        self._pending: dict[str, _PendingCookie] = {}

    def get(self, key: str) -> str | None:
        return self._cookies.get(key)

    def set(self, key: str, value: str, expire: int = 0) -> None:
        self._cookies[key] = value
        self._pending[key] = _PendingCookie(value=value, expire=expire)

    def clear(self, key: str) -> None:
        self._cookies.pop(key, None)
        self._pending[key] = _PendingCookie(value=None, expire=0)

    def get_cookies(self) -> dict[str, str]:
        return dict(self._cookies)

    def get_path(self) -> str:
        return self._path

    def get_domain(self) -> str | None:
        return self._domain

    def is_secure(self) -> bool:
        return self._secure

    def get_session_name(self) -> str | None:
        return self._session_name

    def apply(self, response: Response) -> None:
        """Write queued cookie changes to ``response``."""
        for key, pending in self._pending.items():
            if pending.value is None:
                response.delete_cookie(
                    key,
                    path=self._path,
                    domain=self._domain,
                    secure=self._secure,
                )
                continue
            response.set_cookie(
                key,
                pending.value,
                expires=datetime.fromtimestamp(pending.expire, tz=timezone.utc) if pending.expire else None,
                path=self._path,
                domain=self._domain,
                secure=self._secure,
                samesite="lax",
            )
        self._pending.clear()
