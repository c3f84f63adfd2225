"""ILS (integrated library system) connection protocol.

Implementations can include:
- NoILS (no system configured, default)
- Any driver talking to a real circulation system
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IlsConnection(Protocol):
    """Protocol for the connection to the library's circulation system."""

    def get_driver_name(self) -> str:
        """Return the name of the active driver."""
        ...

    def check_function(self, function: str, params: dict[str, Any] | None = None) -> Any:
        """Check whether the driver supports a function.

        Args:
            function: Capability name (e.g. "Holds", "Renewals")
            params: Optional driver-specific context

        Returns:
            Driver configuration for the capability, or False if unsupported
        """
        ...

    def get_offline_mode(self) -> str | bool:
        """Return the offline mode identifier, or False when online."""
        ...
