"""Keyed registry of lazily built instances.

Used for the view helpers themselves and for the per-backend search
options and params objects the searchOptions/searchParams helpers hand
out.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from view_helpers.exceptions import ServiceNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Registration:
    factory: Callable[[], Any]
    shared: bool


class PluginManager:
    """Build-on-demand registry with aliases.

    Satisfies the ServiceLocator protocol.

    Shared registrations are built on first ``get`` and cached; non-shared
    ones are built again on every ``get``.

    Example:
        ```python
        manager = PluginManager("view helpers")
        manager.register("KeepAlive", lambda: KeepAlive(60), aliases=["keepAlive"])
        manager.get("keepAlive")()  # 60
        ```
    """

    def __init__(self, label: str = "plugin manager") -> None:
        self._label = label
        self._registrations: dict[str, _Registration] = {}
        self._aliases: dict[str, str] = {}
        self._instances: dict[str, Any] = {}

    @property
    def label(self) -> str:
        return self._label

    def register(
        self,
        name: str,
        factory: Callable[[], Any],
        shared: bool = True,
        aliases: Iterable[str] = (),
    ) -> None:
        """Register a factory under ``name`` and any number of aliases.

        Re-registering a name replaces the factory and drops a cached
        instance.
        """
        self._registrations[name] = _Registration(factory=factory, shared=shared)
        self._instances.pop(name, None)
        for alias in aliases:
            self._aliases[alias] = name

    def register_instance(self, name: str, instance: Any, aliases: Iterable[str] = ()) -> None:
        """Register an already built object."""
        self.register(name, lambda: instance, shared=True, aliases=aliases)

    def _resolve(self, name: str) -> str:
        return self._aliases.get(name, name)

    def has(self, name: str) -> bool:
        return self._resolve(name) in self._registrations

    def get(self, name: str) -> Any:
        """Return the instance registered under ``name``.

        Raises:
            ServiceNotFoundError: If ``name`` is neither a registered name nor an alias
        """
        canonical = self._resolve(name)
        registration = self._registrations.get(canonical)
        if registration is None:
            raise ServiceNotFoundError(name, self._label)

        if not registration.shared:
            return registration.factory()

        if canonical not in self._instances:
            logger.debug("Building %s from %s", canonical, self._label)
            self._instances[canonical] = registration.factory()
        return self._instances[canonical]

    def names(self) -> list[str]:
        """Registered canonical names, sorted."""
        return sorted(self._registrations)

    def aliases(self) -> dict[str, str]:
        """Alias -> canonical name mapping."""
        return dict(self._aliases)
