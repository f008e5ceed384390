"""
Secure HTTP headers middleware.

Every response, error responses included, carries a fixed set of
restrictive headers. ``Cache-Control: no-store`` keeps proxies and
browsers from serving a stale copy of the set after it changes.
"""

from collections.abc import Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Set SECURE_HEADERS, plus any extra headers, on every response.

    Args:
        app: The wrapped ASGI application.
        extra_headers: Headers added to, or overriding, SECURE_HEADERS.
    """

    def __init__(
        self, app: ASGIApp, extra_headers: Mapping[str, str] | None = None
    ) -> None:
        super().__init__(app)
        self._headers = {**SECURE_HEADERS, **(extra_headers or {})}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers.update(self._headers)
        return response
