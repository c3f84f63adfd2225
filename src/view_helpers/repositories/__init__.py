"""Default collaborator implementations.

Each class satisfies one of the protocols in ``view_helpers.protocols``
through structural typing. They cover the "nothing configured" case of
every collaborator, plus Redis-backed short links.
"""

from view_helpers.protocols import ContentLoader, CookieManager, IlsConnection, NonceGenerator, Translator, UrlShortener

from .cookie_manager import RequestCookieManager
from .csp_nonce_generator import CspNonceGenerator
from .dict_translator import DictTranslator
from .no_ils_connection import NoIlsConnection
from .none_url_shortener import NoneUrlShortener
from .null_content_loader import NullContentLoader
from .redis_url_shortener import RedisUrlShortener

__all__ = [
    "ContentLoader",
    "CookieManager",
    "IlsConnection",
    "NonceGenerator",
    "Translator",
    "UrlShortener",
    "CspNonceGenerator",
    "DictTranslator",
    "NoIlsConnection",
    "NoneUrlShortener",
    "NullContentLoader",
    "RedisUrlShortener",
    "RequestCookieManager",
]
