"""ILS connection used when no circulation system is configured."""

from typing import Any


class NoIlsConnection:
    """Stand-in connection for installations without an ILS.

    This class satisfies the IlsConnection protocol through structural
    typing. Every capability check reports "unsupported" so templates hide
    holds, renewals and account links.
    """

    DRIVER_NAME = "NoILS"
    OFFLINE_MODE = "ils-none"

    def get_driver_name(self) -> str:
        return self.DRIVER_NAME

    def check_function(self, function: str, params: dict[str, Any] | None = None) -> Any:
        return False

    def get_offline_mode(self) -> str | bool:
        return self.OFFLINE_MODE
