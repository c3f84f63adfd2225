"""Keyed lookup protocol satisfied by PluginManager."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ServiceLocator(Protocol):
    """A keyed collection of pre-registered instances."""

    def get(self, name: str) -> Any:
        """Return the instance registered under ``name``.

        Raises:
            ServiceNotFoundError: If nothing is registered under ``name``
        """
        ...

    def has(self, name: str) -> bool:
        ...
