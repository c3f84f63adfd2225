"""Helpers that hand a configured value to templates.

Each value is fixed at construction; calling the helper returns it as is,
including falsy values ("" / 0 / False) that templates use to switch a
feature off.
"""


class AddThis:
    """Expose the AddThis API key (False when sharing buttons are disabled)."""

    def __init__(self, key: str | bool) -> None:
        self._key = key

    def __call__(self) -> str | bool:
        return self._key


class Feedback:
    """Expose whether the feedback tab is enabled."""

    def __init__(self, enabled: bool) -> None:
        self._enabled = enabled

    def __call__(self) -> bool:
        return self._enabled


class KeepAlive:
    """Expose the session keep-alive interval in seconds (0 = disabled)."""

    def __init__(self, interval: int) -> None:
        self._interval = interval

    def __call__(self) -> int:
        return self._interval


class SystemEmail:
    def __init__(self, email: str) -> None:
        self._email = email

    def __call__(self) -> str:
        return self._email


class GeoCoords:
    """Expose the default coordinates for the map selection widget."""

    def __init__(self, coords: str | bool) -> None:
        self._coords = coords

    def __call__(self) -> str | bool:
        return self._coords


class GoogleAnalytics:
    """Expose the Google Analytics tracking key.

    Templates call the helper for the key and ``is_universal()`` to pick
    the tracking snippet flavour.
    """

    def __init__(self, key: str | bool, universal: bool = False) -> None:
        self._key = key
        self._universal = universal

    def __call__(self) -> str | bool:
        return self._key

    def is_universal(self) -> bool:
        return self._universal
