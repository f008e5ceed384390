"""
Rate limiting configuration and setup.

Uses slowapi to limit /set calls per client address. Limits are
attached to each endpoint when the router is built, so enforcement
does not depend on how FastAPI nests included routers.
Each application gets its own limiter so that counters are never
shared between app instances.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

DEFAULT_RATE_LIMIT = "60/minute"
HTTP_429 = 429


def create_limiter(enabled: bool = True) -> Limiter:
    """Build a limiter keyed on the client address.

    Args:
        enabled: When False every request is let through.

    Returns:
        A Limiter with in-memory storage.
    """
    return Limiter(key_func=get_remote_address, enabled=enabled)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
