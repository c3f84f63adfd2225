"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing application-wide
collaborators and request.state for the per-request helper manager.

Pattern:
    - Shared collaborators stored in app.state during lifespan
    - Helper manager built per request by middleware
    - Dependency functions retrieve from request.app.state / request.state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from view_helpers.api.templating import create_templates
from view_helpers.config import Settings, settings
from view_helpers.handlers import HelperHandler
from view_helpers.languages import STRINGS
from view_helpers.repositories import (
    DictTranslator,
    NoIlsConnection,
    NoneUrlShortener,
    NullContentLoader,
    RedisUrlShortener,
)
from view_helpers.protocols import UrlShortener
from view_helpers.services import (
    HelperContainer,
    PluginManager,
    build_search_options_manager,
    build_search_params_manager,
)

logger = logging.getLogger(__name__)


def build_url_shortener(settings: Settings) -> UrlShortener:
    """Create the shortener selected by URL_SHORTENER."""
    if settings.url_shortener == "redis":
        return RedisUrlShortener.create(base_url=settings.site_url)
    return NoneUrlShortener()


def build_helper_container(settings: Settings, url_shortener: UrlShortener | None = None) -> HelperContainer:
    """Create the application-wide collaborators helpers delegate to."""
    options_manager = build_search_options_manager(settings)
    params_manager = build_search_params_manager(options_manager, settings.search_backend_names)
    return HelperContainer(
        ils_connection=NoIlsConnection(),
        url_shortener=url_shortener or build_url_shortener(settings),
        translator=DictTranslator(STRINGS, locale=settings.default_locale),
        search_options_manager=options_manager,
        search_params_manager=params_manager,
        content_loaders={
            "authornotes": NullContentLoader("authornotes"),
            "summaries": NullContentLoader("summaries"),
        },
    )


def get_helpers(request: Request) -> PluginManager:
    """Dependency injection for the request's helper manager.

    Raises:
        RuntimeError: If the helper middleware did not run
    """
    helpers = getattr(request.state, "helpers", None)
    if helpers is None:
        raise RuntimeError("Helpers not initialized. Check middleware setup.")
    return helpers


def get_handler(request: Request) -> HelperHandler:
    """Dependency injection for HelperHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "helper_handler", None)
    if handler is None:
        raise RuntimeError("HelperHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes and stores in app.state:
    1. Helper container (shared collaborators) - app.state.helper_container
    2. Translator and known languages - app.state.translator / app.state.languages
    3. Handler (HTTP endpoints) - app.state.helper_handler

    Cleanup:
        Removes everything from app.state on shutdown
    """
    container = build_helper_container(settings)

    app.state.helper_container = container
    app.state.translator = container.translator
    app.state.languages = set(STRINGS)
    app.state.helper_handler = HelperHandler(
        templates=create_templates(),
        url_shortener=container.url_shortener,
        shortener_mode=settings.url_shortener,
    )

    logger.info("View helpers initialized")
    logger.info("URL shortener: %s", settings.url_shortener)
    logger.info("Search backends: %s", ", ".join(settings.search_backend_names))

    yield

    del app.state.helper_handler
    del app.state.languages
    del app.state.translator
    del app.state.helper_container
    logger.info("View helpers shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[HelperHandler, Depends(get_handler)]
HelpersDep = Annotated[PluginManager, Depends(get_helpers)]
