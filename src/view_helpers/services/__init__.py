"""Service layer: registries and the factories that populate them.

Architecture:
    Template -> HelperProxy -> PluginManager -> helper -> collaborator

Usage:
    ```python
    from view_helpers.services import HelperContainer, build_helper_manager

    helpers = build_helper_manager(container)
    helpers.get("localizedNumber")(1234.5, 2)
    ```
"""

from .helper_factories import HelperContainer, build_helper_manager
from .plugin_manager import PluginManager
from .search_managers import build_search_options_manager, build_search_params_manager

__all__ = [
    "HelperContainer",
    "PluginManager",
    "build_helper_manager",
    "build_search_options_manager",
    "build_search_params_manager",
]
