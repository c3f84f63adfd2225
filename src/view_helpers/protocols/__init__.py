"""Protocol interfaces for the collaborators helpers wrap.

Helpers depend on these structural types, never on concrete classes, so a
template can be rendered against the default implementations in
``view_helpers.repositories`` or against any test double that has the
same methods.

Usage:
    ```python
    from view_helpers.protocols import UrlShortener

    shortener: UrlShortener = NoneUrlShortener()   # works
    shortener: UrlShortener = RedisUrlShortener()  # also works
    ```
"""

from .content_loader import ContentLoader
from .cookie_manager import CookieManager
from .ils_connection import IlsConnection
from .nonce_generator import NonceGenerator
from .service_locator import ServiceLocator
from .translator import Translator
from .url_shortener import UrlShortener

__all__ = [
    "ContentLoader",
    "CookieManager",
    "IlsConnection",
    "NonceGenerator",
    "ServiceLocator",
    "Translator",
    "UrlShortener",
]
