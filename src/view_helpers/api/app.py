import logging

from fastapi import FastAPI, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from view_helpers.api.dependencies import HandlerDep, HelpersDep, lifespan
from view_helpers.api.middleware import attach_helpers, log_requests
from view_helpers.config import settings
from view_helpers.dto import HealthCheckResponse, HelperListResponse, ShortenUrlRequest, ShortenUrlResponse

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="View Helpers",
    description="Template view helpers for a library discovery interface",
    version="0.1.0",
    lifespan=lifespan,
)

# Registered last runs first: request logging wraps helper setup
app.middleware("http")(attach_helpers)
app.middleware("http")(log_requests)


@app.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    handler: HandlerDep,
    helpers: HelpersDep,
    count: int = Query(0, ge=0),
    decimals: int = Query(0, ge=0, le=10),
) -> HTMLResponse:
    """Home page rendered with the view helpers."""
    return await handler.render_home(request, helpers, count=count, decimals=decimals)


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/helpers", response_model=HelperListResponse)
async def list_helpers(handler: HandlerDep, helpers: HelpersDep) -> HelperListResponse:
    """List the helpers templates can call."""
    return await handler.list_helpers(helpers)


@app.post("/shorten", response_model=ShortenUrlResponse)
async def shorten(request: ShortenUrlRequest, handler: HandlerDep, helpers: HelpersDep) -> ShortenUrlResponse:
    """Shorten a URL with the configured shortener."""
    return await handler.shorten_url(request, helpers)


@app.get("/short/{short_id}")
async def resolve_short_url(short_id: str, handler: HandlerDep) -> RedirectResponse:
    """Redirect a short link to its full URL."""
    return await handler.resolve_short_url(short_id)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "view_helpers.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
