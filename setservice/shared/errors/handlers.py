"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from setservice.domain.sets.errors import InvalidRequestError, SetDomainError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500

INVALID_REQUEST_MESSAGE = "This request was no good."


def map_validation_failure(error: InvalidRequestError) -> PlainTextResponse:
    """Translate a validation failure into the fixed 400 response.

    The failure's own message is logged and never copied into the body.

    Args:
        error: The domain validation failure.

    Returns:
        A plain-text 400 response with INVALID_REQUEST_MESSAGE as body.
    """
    logger.warning("Invalid request: %s", error.message)
    return PlainTextResponse(INVALID_REQUEST_MESSAGE, status_code=HTTP_400)


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidRequestError)
    async def handle_invalid_request(
        _request: Request, exc: InvalidRequestError
    ) -> PlainTextResponse:
        """Handle validation failures raised outside the request handler."""
        return map_validation_failure(exc)

    @app.exception_handler(SetDomainError)
    async def handle_set_domain(
        _request: Request, exc: SetDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled sets domain errors."""
        logger.error("Unhandled sets domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
