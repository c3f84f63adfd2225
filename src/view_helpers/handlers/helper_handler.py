"""HTTP handlers for pages and endpoints that use view helpers.

Handlers take care of HTTP concerns (status codes, redirects, response
models); the helpers and collaborators underneath never see HTTP types.
"""

import logging

from fastapi import HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from view_helpers.api.templating import HelperProxy
from view_helpers.dto import HealthCheckResponse, HelperListResponse, ShortenUrlRequest, ShortenUrlResponse
from view_helpers.exceptions import ForeignUrlError, ShortUrlNotFoundError
from view_helpers.protocols import UrlShortener
from view_helpers.services import PluginManager

logger = logging.getLogger(__name__)


class HelperHandler:
    """HTTP handlers backed by view helpers.

    Example:
        ```python
        handler = HelperHandler(templates=create_templates(), url_shortener=NoneUrlShortener())

        @app.get("/", response_class=HTMLResponse)
        async def home(request: Request, helpers: HelpersDep):
            return await handler.render_home(request, helpers)
        ```
    """

    def __init__(
        self,
        templates: Jinja2Templates,
        url_shortener: UrlShortener,
        shortener_mode: str = "none",
    ) -> None:
        """Initialize the handler.

        Args:
            templates: Jinja2 template renderer
            url_shortener: Shortener used to resolve short links
            shortener_mode: Configured shortener name, reported by health checks
        """
        self._templates = templates
        self._shortener = url_shortener
        self._shortener_mode = shortener_mode

    async def render_home(
        self,
        request: Request,
        helpers: PluginManager,
        count: int = 0,
        decimals: int = 0,
    ) -> HTMLResponse:
        """Handle GET / requests."""
        translator = request.state.translator
        return self._templates.TemplateResponse(
            request,
            "home.html",
            {
                "view": HelperProxy(helpers),
                "translate": translator.translate,
                "locale": translator.locale,
                "page_url": str(request.url),
                "count": count,
                "decimals": decimals,
            },
        )

    async def list_helpers(self, helpers: PluginManager) -> HelperListResponse:
        """Handle GET /helpers requests."""
        return HelperListResponse(helpers=helpers.names(), aliases=helpers.aliases())

    async def shorten_url(self, request: ShortenUrlRequest, helpers: PluginManager) -> ShortenUrlResponse:
        """Handle POST /shorten requests.

        Raises:
            HTTPException: 400 for URLs outside this site, 500 if the shortener fails
        """
        try:
            short_url = helpers.get("shortenUrl")(request.url)
        except ForeignUrlError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except Exception as e:
            logger.error(f"Failed to shorten {request.url}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to shorten URL: {e}",
            ) from e
        return ShortenUrlResponse(url=request.url, short_url=short_url)

    async def resolve_short_url(self, short_id: str) -> RedirectResponse:
        """Handle GET /short/{short_id} requests.

        Raises:
            HTTPException: 404 if the short link is unknown
        """
        try:
            url = self._shortener.resolve(short_id)
        except ShortUrlNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        return RedirectResponse(url=url, status_code=status.HTTP_301_MOVED_PERMANENTLY)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        shortener_healthy = None
        health_check = getattr(self._shortener, "health_check", None)
        if health_check is not None:
            shortener_healthy = health_check()

        return HealthCheckResponse(
            status="unhealthy" if shortener_healthy is False else "healthy",
            url_shortener=self._shortener_mode,
            shortener_healthy=shortener_healthy,
        )
