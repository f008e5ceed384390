"""
FastAPI routes for the sets bounded context.

Routes are declared in an explicit table (SET_ROUTES) and registered
once when the router is built. Every route delegates to the
SetRequestHandler and turns its result into a response; a Failure
result goes through the validation-failure mapper.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, Response
from slowapi import Limiter

from setservice.application.sets.handler import SetRequestHandler
from setservice.interfaces.sets.dependencies import get_set_request_handler
from setservice.interfaces.sets.schemas import ErrorResponse
from setservice.shared.errors.handlers import (
    INVALID_REQUEST_MESSAGE,
    map_validation_failure,
)
from setservice.shared.security.rate_limiting import DEFAULT_RATE_LIMIT

logger = logging.getLogger(__name__)

HTTP_200 = 200
HTTP_405 = 405

SET_PREFIX = "/set"

_INVALID_REQUEST_DOC = {
    400: {
        "description": "The request was rejected as malformed",
        "content": {"text/plain": {"example": INVALID_REQUEST_MESSAGE}},
    }
}

Handler = Annotated[SetRequestHandler, Depends(get_set_request_handler)]


def add_single(value: str, request: Request, handler: Handler) -> Response:
    """Add one value taken from the path; the body is ``true`` if it was new."""
    logger.info("Call to %s", request.url.path)
    result = handler.add_single(value)
    if not result.ok:
        return map_validation_failure(result.error)
    return JSONResponse(content=result.value, status_code=HTTP_200)


def add_multiple(
    request: Request,
    handler: Handler,
    values: Annotated[
        set[str] | None,
        Body(description="JSON array of strings to add to the set"),
    ] = None,
) -> Response:
    """Add every value in the JSON body. Responds with an empty 200.

    A request without a body has neither a path value nor values to
    add, so it is refused as a call to the single-value route.
    """
    if values is None:
        raise HTTPException(
            status_code=HTTP_405,
            detail="Method Not Allowed",
            headers={"Allow": "PUT"},
        )
    result = handler.add_multiple(values)
    if not result.ok:
        return map_validation_failure(result.error)
    return Response(status_code=HTTP_200)


def get_all(request: Request, handler: Handler) -> Response:
    """Return every stored value as a JSON array (sorted, order is not meaningful)."""
    result = handler.get_all()
    if not result.ok:
        return map_validation_failure(result.error)
    return JSONResponse(content=sorted(result.value), status_code=HTTP_200)


@dataclass(frozen=True)
class RouteSpec:
    """One row of the route table."""

    method: str
    path: str
    endpoint: Callable[..., Any]
    summary: str
    options: dict[str, Any] = field(default_factory=dict)


SET_ROUTES: tuple[RouteSpec, ...] = (
    RouteSpec(
        "PUT",
        "/add/{value}",
        add_single,
        summary="Add a single value",
        options={"response_model": bool, "responses": _INVALID_REQUEST_DOC},
    ),
    RouteSpec(
        "PUT",
        "/add",
        add_multiple,
        summary="Add many values",
        options={"responses": _INVALID_REQUEST_DOC},
    ),
    RouteSpec(
        "GET",
        "/get",
        get_all,
        summary="Get all values",
        options={"response_model": list[str]},
    ),
)


def create_set_router(
    routes: tuple[RouteSpec, ...] = SET_ROUTES,
    limiter: Limiter | None = None,
    rate_limit: str = DEFAULT_RATE_LIMIT,
) -> APIRouter:
    """Build the /set router from the route table.

    When a limiter is given, every endpoint is wrapped with
    ``limiter.limit(rate_limit)``. Endpoints keep a ``request``
    parameter because slowapi reads the client address from it.

    Args:
        routes: Table rows to register, SET_ROUTES by default.
        limiter: Per-application slowapi limiter, or None for no limit.
        rate_limit: Limit string in slowapi notation, e.g. "60/minute".

    Returns:
        An APIRouter with one route per table row.
    """
    router = APIRouter(
        prefix=SET_PREFIX,
        tags=["set"],
        responses={429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    for route in routes:
        endpoint = route.endpoint
        if limiter is not None:
            endpoint = limiter.limit(rate_limit)(endpoint)
        router.add_api_route(
            route.path,
            endpoint,
            methods=[route.method],
            summary=route.summary,
            **route.options,
        )
    return router
