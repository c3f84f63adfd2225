import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def _env_key(name: str) -> str | bool:
    """Read an optional key; unset or empty means the feature is disabled."""
    return os.getenv(name) or False


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Site
    site_url: str = os.getenv("SITE_URL", "http://localhost:8000")
    site_email: str = os.getenv("SITE_EMAIL", "")
    default_locale: str = os.getenv("DEFAULT_LOCALE", "en")

    # Third-party keys (False when not configured)
    addthis_key: str | bool = _env_key("ADDTHIS_KEY")
    google_analytics_key: str | bool = _env_key("GOOGLE_ANALYTICS_KEY")
    google_analytics_universal: bool = _env_flag("GOOGLE_ANALYTICS_UNIVERSAL")

    # Feature flags
    feedback_tab_enabled: bool = _env_flag("FEEDBACK_TAB_ENABLED")
    session_keep_alive: int = int(os.getenv("SESSION_KEEP_ALIVE", "0"))
    map_default_coordinates: str | bool = _env_key("MAP_DEFAULT_COORDINATES")
    csp_enabled: bool = _env_flag("CSP_ENABLED", "true")

    # Search backends exposed through searchOptions / searchParams
    search_backends: str = os.getenv("SEARCH_BACKENDS", "Solr")

    # Cookies
    cookie_path: str = os.getenv("COOKIE_PATH", "/")
    cookie_domain: str | None = os.getenv("COOKIE_DOMAIN") or None
    cookie_secure: bool = _env_flag("COOKIE_ONLY_SECURE")
    session_name: str | None = os.getenv("SESSION_NAME") or None

    # URL shortener: "none" or "redis"
    url_shortener: str = os.getenv("URL_SHORTENER", "none").lower()
    short_url_prefix: str = os.getenv("SHORT_URL_PREFIX", "shortlink")

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def search_backend_names(self) -> list[str]:
        """Configured search backend identifiers, in declaration order."""
        return [name.strip() for name in self.search_backends.split(",") if name.strip()]

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.session_keep_alive < 0:
            raise ValueError("SESSION_KEEP_ALIVE must be zero (disabled) or a positive number of seconds")

        if self.url_shortener not in ("none", "redis"):
            raise ValueError(f"URL_SHORTENER must be one of ['none', 'redis'], got {self.url_shortener!r}")

        if not self.search_backend_names:
            raise ValueError("SEARCH_BACKENDS must name at least one backend")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
