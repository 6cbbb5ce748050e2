"""Core FastAPI application utilities shared across all services."""

import logging
from typing import Any

import fastapi
import fastapi.responses

from common import log

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Health router
# ---------------------------------------------------------------------------

_health_router = fastapi.APIRouter()


@_health_router.api_route('/health', methods=['GET', 'HEAD'])
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {'status': 'healthy'}


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


async def _bad_request(
    request: fastapi.Request, exc: Exception
) -> fastapi.responses.JSONResponse:
    logger.warning('Rejected %s %s: %s', request.method, request.url.path, exc)
    return fastapi.responses.JSONResponse(status_code=400, content={'detail': str(exc)})


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------


def create_app(
    title: str,
    bad_request_errors: tuple[type[Exception], ...] = (),
    **kwargs: Any,
) -> fastapi.FastAPI:
    """Create a FastAPI app with health endpoint and logging configured.

    Args:
        title: Application title shown in the OpenAPI docs.
        bad_request_errors: Exception types raised by handlers for bad client
            input.  Each is answered with HTTP 400 and ``{"detail": message}``.
        **kwargs: Forwarded to FastAPI.__init__ (e.g. lifespan).
    """
    app = fastapi.FastAPI(title=title, **kwargs)
    log.configure_logging()
    app.include_router(_health_router)
    for error_type in bad_request_errors:
        app.add_exception_handler(error_type, _bad_request)
    return app
