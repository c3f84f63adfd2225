"""Redis implementation of UrlShortener.

Short links are stored as plain string keys, ``{prefix}:{hash}`` holding
the path (everything after the site base URL); URLs of other sites are
rejected, and resolving always prefixes the base URL. The hash is the first
characters of the path's md5 digest; on collision with a different path
it is extended one character at a time.
"""

import hashlib
import logging

import redis

from view_helpers.config import get_redis_client, settings
from view_helpers.exceptions import ForeignUrlError, ShortUrlNotFoundError

logger = logging.getLogger(__name__)


class RedisUrlShortener:
    """Redis-backed short links.

    This class satisfies the UrlShortener protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        shortener = RedisUrlShortener.create(base_url="https://library.example.org")
        shortener.shorten("https://library.example.org/Record/123")
        # "https://library.example.org/short/202cb962a"
        ```
    """

    MIN_HASH_LENGTH = 9

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        base_url: str | None = None,
        prefix: str | None = None,
    ) -> None:
        """Initialize the shortener.

        Args:
            redis_client: Redis client instance. If None, creates default.
                Must be created with decode_responses=True.
            base_url: Site base URL. Defaults to settings.site_url.
            prefix: Key prefix in Redis. Defaults to settings.short_url_prefix.
        """
        self._client = redis_client or get_redis_client()
        self._base_url = (base_url or settings.site_url).rstrip("/")
        self._prefix = prefix or settings.short_url_prefix

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        prefix: str | None = None,
    ) -> "RedisUrlShortener":
        """Factory method to create RedisUrlShortener with defaults.

        Args:
            base_url: Site base URL. If None, uses settings.
            prefix: Redis key prefix. If None, uses settings.

        Returns:
            Configured RedisUrlShortener
        """
        return cls(base_url=base_url, prefix=prefix)

    def _key(self, short_id: str) -> str:
        return f"{self._prefix}:{short_id}"

    def _path(self, url: str) -> str:
        """Return the part of ``url`` after the base URL, starting with "/".

        Raises:
            ForeignUrlError: If ``url`` is not under the base URL
        """
        if not url.startswith(self._base_url):
            raise ForeignUrlError(url, self._base_url)
        rest = url[len(self._base_url):]
        # "https://lib.example.org.evil.com" shares the prefix but not the host
        if rest and rest[0] not in "/?#":
            raise ForeignUrlError(url, self._base_url)
        return rest if rest.startswith("/") else "/" + rest

    def shorten(self, url: str) -> str:
        """Store ``url`` and return its short link.

        Args:
            url: Absolute URL on this site

        Returns:
            ``{base_url}/short/{hash}``

        Raises:
            ForeignUrlError: If ``url`` is not under the base URL
        """
        path = self._path(url)
        digest = hashlib.md5(path.encode("utf-8")).hexdigest()

        for length in range(self.MIN_HASH_LENGTH, len(digest) + 1):
            short_id = digest[:length]
            key = self._key(short_id)
            # SET NX: claim the id unless someone else owns it
            if self._client.set(key, path, nx=True) or self._client.get(key) == path:
                return f"{self._base_url}/short/{short_id}"
            logger.debug("Short link collision on %s, extending hash", short_id)

        raise RuntimeError(f"Could not allocate a short link for {url}")

    def resolve(self, short_id: str) -> str:
        """Return the full URL behind a short id.

        Raises:
            ShortUrlNotFoundError: If the id was never issued
        """
        path = self._client.get(self._key(short_id))
        if path is None:
            raise ShortUrlNotFoundError(short_id)
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._base_url}{path}"

    def health_check(self) -> bool:
        """Check if Redis is reachable."""
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
