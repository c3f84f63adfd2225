"""Helpers that give templates direct access to a shared collaborator."""

from view_helpers.protocols import CookieManager, IlsConnection


class Ils:
    """Expose the ILS connection to templates."""

    def __init__(self, connection: IlsConnection) -> None:
        self._connection = connection

    def __call__(self) -> IlsConnection:
        return self._connection


class Cookie:
    """Expose the cookie manager to templates."""

    def __init__(self, cookie_manager: CookieManager) -> None:
        self._cookie_manager = cookie_manager

    def __call__(self) -> CookieManager:
        return self._cookie_manager
