"""Helpers that fetch search backend objects by backend name.

A template asks for the options or params of a backend by its identifier;
without an argument it gets the default ``Solr`` backend. Unknown names
raise ServiceNotFoundError from the underlying plugin manager.
"""

from typing import Any

from view_helpers.protocols import ServiceLocator

DEFAULT_SEARCH_TYPE = "Solr"


class SearchOptions:
    """Look up the options object of a search backend."""

    def __init__(self, manager: ServiceLocator) -> None:
        self._manager = manager

    def __call__(self, type: str = DEFAULT_SEARCH_TYPE) -> Any:
        return self._manager.get(type)


class SearchParams:
    """Look up a fresh params object for a search backend."""

    def __init__(self, manager: ServiceLocator) -> None:
        self._manager = manager

    def __call__(self, type: str = DEFAULT_SEARCH_TYPE) -> Any:
        return self._manager.get(type)
