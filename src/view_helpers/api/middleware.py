"""Per-request middleware.

``attach_helpers`` builds the request-scoped collaborators (cookie
manager, nonce generator, translator for the visitor's language) and the
helper manager on top of them, then writes cookie changes and the CSP
header to the response.
"""

import logging
import time
from typing import Callable

from fastapi import Request

from view_helpers.config import settings
from view_helpers.languages import LANGUAGE_COOKIE
from view_helpers.repositories import CspNonceGenerator, RequestCookieManager
from view_helpers.services import build_helper_manager

logger = logging.getLogger(__name__)


def content_security_policy(nonce: str) -> str:
    return f"default-src 'self'; script-src 'self' 'nonce-{nonce}'; object-src 'none'"


async def attach_helpers(request: Request, call_next: Callable):
    container = getattr(request.app.state, "helper_container", None)
    if container is None:
        raise RuntimeError("Helper container not initialized. Check lifespan setup.")

    cookie_manager = RequestCookieManager(request.cookies)
    nonce_generator = CspNonceGenerator()
    translator = request.app.state.translator
    language = cookie_manager.get(LANGUAGE_COOKIE)
    if language and language in request.app.state.languages:
        translator = translator.with_locale(language)

    request_container = container.for_request(
        nonce_generator=nonce_generator,
        cookie_manager=cookie_manager,
        translator=translator,
    )
    request.state.cookie_manager = cookie_manager
    request.state.translator = translator
    request.state.helpers = build_helper_manager(request_container, settings)

    response = await call_next(request)

    cookie_manager.apply(response)
    if settings.csp_enabled:
        response.headers["Content-Security-Policy"] = content_security_policy(nonce_generator.get_nonce())
    return response


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        # Only log slow requests (>1s) or errors
        if process_time > 1.0 or response.status_code >= 400:
            logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.2f}s")
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(f"{request.method} {request.url.path} - ERROR: {str(e)} - {process_time:.2f}s")
        raise
