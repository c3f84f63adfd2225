"""Factories wiring helpers to settings and collaborators.

Each ``get_*`` function builds one helper the way the template layer
expects it; missing configuration falls back to a value that switches
the feature off (False, 0 or ""). ``build_helper_manager`` registers all
of them under the names templates use.
"""

from dataclasses import dataclass, field
from typing import Callable

from view_helpers.config import Settings, settings as default_settings
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
from view_helpers.protocols import (
    ContentLoader as ContentLoaderProtocol,
    CookieManager,
    IlsConnection,
    NonceGenerator,
    ServiceLocator,
    Translator,
    UrlShortener,
)

from .plugin_manager import PluginManager


@dataclass
class HelperContainer:
    """Collaborators available to helper factories.

    The shared part (ILS, loaders, shortener, search managers) lives for
    the application; ``for_request`` adds the request-scoped ones.
    """

    ils_connection: IlsConnection
    url_shortener: UrlShortener
    translator: Translator
    search_options_manager: ServiceLocator
    search_params_manager: ServiceLocator
    content_loaders: dict[str, ContentLoaderProtocol] = field(default_factory=dict)
    nonce_generator: NonceGenerator | None = None
    cookie_manager: CookieManager | None = None

    def for_request(
        self,
        nonce_generator: NonceGenerator,
        cookie_manager: CookieManager,
        translator: Translator | None = None,
    ) -> "HelperContainer":
        return HelperContainer(
            ils_connection=self.ils_connection,
            url_shortener=self.url_shortener,
            translator=translator or self.translator,
            search_options_manager=self.search_options_manager,
            search_params_manager=self.search_params_manager,
            content_loaders=self.content_loaders,
            nonce_generator=nonce_generator,
            cookie_manager=cookie_manager,
        )

    def get_content_loader(self, content_type: str) -> ContentLoaderProtocol:
        try:
            return self.content_loaders[content_type]
        except KeyError:
            raise KeyError(f"No content loader configured for {content_type!r}") from None


def get_add_this(settings: Settings) -> AddThis:
    return AddThis(settings.addthis_key)


def get_feedback(settings: Settings) -> Feedback:
    return Feedback(settings.feedback_tab_enabled)


def get_keep_alive(settings: Settings) -> KeepAlive:
    return KeepAlive(settings.session_keep_alive)


def get_system_email(settings: Settings) -> SystemEmail:
    return SystemEmail(settings.site_email)


def get_geo_coords(settings: Settings) -> GeoCoords:
    return GeoCoords(settings.map_default_coordinates)


def get_google_analytics(settings: Settings) -> GoogleAnalytics:
    return GoogleAnalytics(settings.google_analytics_key, settings.google_analytics_universal)


def get_ils(container: HelperContainer) -> Ils:
    return Ils(container.ils_connection)


def get_cookie(container: HelperContainer) -> Cookie:
    if container.cookie_manager is None:
        raise RuntimeError("Cookie manager not initialized. Build the helpers per request.")
    return Cookie(container.cookie_manager)


def get_content_loader(container: HelperContainer, content_type: str) -> ContentLoader:
    """Build the content helper for one content type ("authornotes", "summaries")."""
    return ContentLoader(container.get_content_loader(content_type))


def get_shorten_url(container: HelperContainer) -> ShortenUrl:
    return ShortenUrl(container.url_shortener)


def get_search_options(container: HelperContainer) -> SearchOptions:
    return SearchOptions(container.search_options_manager)


def get_search_params(container: HelperContainer) -> SearchParams:
    return SearchParams(container.search_params_manager)


def get_csp_nonce(container: HelperContainer) -> CspNonce:
    if container.nonce_generator is None:
        raise RuntimeError("Nonce generator not initialized. Build the helpers per request.")
    return CspNonce(container.nonce_generator)


def get_localized_number(container: HelperContainer) -> LocalizedNumber:
    return LocalizedNumber(container.translator)


def build_helper_manager(container: HelperContainer, settings: Settings | None = None) -> PluginManager:
    """Register every helper under its class name and template alias.

    Helpers are built lazily, so a request that never touches the ILS
    never builds the ils helper.

    Args:
        container: Collaborators for this request
        settings: Application settings. Defaults to the global settings.

    Returns:
        PluginManager of helpers
    """
    settings = settings or default_settings
    manager = PluginManager("view helper manager")

    factories: list[tuple[str, str, Callable[[], object]]] = [
        ("AddThis", "addThis", lambda: get_add_this(settings)),
        ("Feedback", "feedback", lambda: get_feedback(settings)),
        ("KeepAlive", "keepAlive", lambda: get_keep_alive(settings)),
        ("SystemEmail", "systemEmail", lambda: get_system_email(settings)),
        ("GeoCoords", "geocoords", lambda: get_geo_coords(settings)),
        ("GoogleAnalytics", "googleanalytics", lambda: get_google_analytics(settings)),
        ("Ils", "ils", lambda: get_ils(container)),
        ("Cookie", "cookie", lambda: get_cookie(container)),
        ("AuthorNotes", "authorNotes", lambda: get_content_loader(container, "authornotes")),
        ("Summaries", "summaries", lambda: get_content_loader(container, "summaries")),
        ("ShortenUrl", "shortenUrl", lambda: get_shorten_url(container)),
        ("SearchOptions", "searchOptions", lambda: get_search_options(container)),
        ("SearchParams", "searchParams", lambda: get_search_params(container)),
        ("CspNonce", "cspNonce", lambda: get_csp_nonce(container)),
        ("LocalizedNumber", "localizedNumber", lambda: get_localized_number(container)),
    ]
    for name, alias, factory in factories:
        manager.register(name, factory, aliases=[alias])
    return manager
