"""View Helpers - template helpers for a library discovery interface.

Each helper exposes one configured value or collaborator to templates
through a single call. The package is layered like this:

Layers:
    - protocols: Interface contracts for collaborators (IlsConnection,
      UrlShortener, Translator, ...)
    - helpers: The helper classes templates call
    - repositories: Default collaborator implementations
    - services: PluginManager registries and helper factories
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Search options/params objects handed to templates

Usage:
    ```python
    from view_helpers.helpers import LocalizedNumber
    from view_helpers.repositories import DictTranslator

    helper = LocalizedNumber(DictTranslator())
    helper(1234.5, 2)  # "1,234.50"
    ```

For HTTP API:
    ```python
    from view_helpers.api.app import app
    ```
"""

from view_helpers.config import get_redis_client, settings
from view_helpers.entities import SearchOptionsEntity, SearchParamsEntity
from view_helpers.exceptions import ForeignUrlError, ServiceNotFoundError, ShortUrlNotFoundError, ViewHelperError
from view_helpers.helpers import (
    AddThis,
    ContentLoader,
    Cookie,
    CspNonce,
    Feedback,
    GeoCoords,
    GoogleAnalytics,
    Ils,
    KeepAlive,
    LocalizedNumber,
    SearchOptions,
    SearchParams,
    ShortenUrl,
    SystemEmail,
)
from view_helpers.services import HelperContainer, PluginManager, build_helper_manager

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Errors
    "ViewHelperError",
    "ServiceNotFoundError",
    "ShortUrlNotFoundError",
    "ForeignUrlError",
    # Helpers
    "AddThis",
    "ContentLoader",
    "Cookie",
    "CspNonce",
    "Feedback",
    "GeoCoords",
    "GoogleAnalytics",
    "Ils",
    "KeepAlive",
    "LocalizedNumber",
    "SearchOptions",
    "SearchParams",
    "ShortenUrl",
    "SystemEmail",
    # Registries
    "PluginManager",
    "HelperContainer",
    "build_helper_manager",
    # Entities
    "SearchOptionsEntity",
    "SearchParamsEntity",
]
