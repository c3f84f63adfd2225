"""View helpers callable from templates.

Every helper is a plain class: the constructor stores a value or a
collaborator, ``__call__`` is the single operation a template invokes.
Helpers are registered by name in a PluginManager (see
``view_helpers.services.helper_factories``).

Kinds:
    - value holders: AddThis, Feedback, KeepAlive, SystemEmail, GeoCoords,
      GoogleAnalytics
    - collaborator accessors: Ils, Cookie
    - delegators: ContentLoader, ShortenUrl, CspNonce
    - registry lookups: SearchOptions, SearchParams
    - formatting: LocalizedNumber
"""

from .accessors import Cookie, Ils
from .config_values import AddThis, Feedback, GeoCoords, GoogleAnalytics, KeepAlive, SystemEmail
from .content_loader import ContentLoader
from .csp_nonce import CspNonce
from .localized_number import LocalizedNumber, format_number
from .search import DEFAULT_SEARCH_TYPE, SearchOptions, SearchParams
from .shorten_url import ShortenUrl

__all__ = [
    "AddThis",
    "Cookie",
    "ContentLoader",
    "CspNonce",
    "DEFAULT_SEARCH_TYPE",
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
    "format_number",
]
