"""Plugin managers for search backend objects."""

from view_helpers.config import Settings, settings as default_settings
from view_helpers.entities import SearchOptionsEntity, SearchParamsEntity
from view_helpers.protocols import ServiceLocator

from .plugin_manager import PluginManager


def build_search_options_manager(settings: Settings | None = None) -> PluginManager:
    """Register one shared SearchOptionsEntity per configured backend.

    Args:
        settings: Settings naming the backends. Defaults to the global settings.

    Returns:
        PluginManager keyed by backend id
    """
    settings = settings or default_settings
    manager = PluginManager("search options manager")
    for backend_id in settings.search_backend_names:
        manager.register(backend_id, lambda backend_id=backend_id: SearchOptionsEntity(backend_id=backend_id))
    return manager


def build_search_params_manager(options_manager: ServiceLocator, backend_ids: list[str]) -> PluginManager:
    """Register a non-shared SearchParamsEntity factory per backend.

    Every lookup gets a fresh params object bound to the backend's shared
    options.
    """
    manager = PluginManager("search params manager")
    for backend_id in backend_ids:
        manager.register(
            backend_id,
            lambda backend_id=backend_id: SearchParamsEntity(options=options_manager.get(backend_id)),
            shared=False,
        )
    return manager
