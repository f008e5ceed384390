"""
Dependency wiring for the sets bounded context.

The request handler is built once, handed to ``create_app`` and kept
on ``app.state``. Routes receive it through ``get_set_request_handler``.
"""

from fastapi import Request

from setservice.application.sets.handler import SetRequestHandler
from setservice.infrastructure.sets.in_memory_set_store import InMemorySetStore


def build_set_request_handler() -> SetRequestHandler:
    """Build a SetRequestHandler backed by a fresh in-memory store."""
    return SetRequestHandler(store=InMemorySetStore())


def get_set_request_handler(request: Request) -> SetRequestHandler:
    """Return the handler the running application was configured with."""
    return request.app.state.set_request_handler
