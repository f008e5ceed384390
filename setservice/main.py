"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health and the /set route table)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from setservice.application.sets.handler import SetRequestHandler
from setservice.core.config import Settings, settings
from setservice.interfaces.health import router as health_router
from setservice.interfaces.sets.dependencies import build_set_request_handler
from setservice.interfaces.sets.router import create_set_router
from setservice.shared.errors.handlers import register_error_handlers
from setservice.shared.logging import configure_logging
from setservice.shared.security.headers import SecurityHeadersMiddleware
from setservice.shared.security.rate_limiting import (
    create_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def create_app(
    handler: SetRequestHandler | None = None,
    app_settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. The request
    handler is passed in explicitly; tests hand in one built around
    a mocked store.

    Args:
        handler: Handler serving the /set routes. A handler over a
            fresh in-memory store is built when omitted.
        app_settings: Settings override, the module-level settings
            by default.

    Returns:
        A fully configured FastAPI application instance.
    """
    cfg = app_settings or settings
    configure_logging(level=cfg.log_level)

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.version,
        docs_url="/docs" if cfg.debug else None,
        redoc_url="/redoc" if cfg.debug else None,
    )
    app.state.set_request_handler = handler or build_set_request_handler()

    # --- Rate Limiting ---
    limiter = create_limiter(enabled=cfg.rate_limit_enabled)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=cfg.api_prefix)
    app.include_router(
        create_set_router(
            limiter=limiter if cfg.rate_limit_enabled else None,
            rate_limit=cfg.rate_limit_default,
        ),
        prefix=cfg.api_prefix,
    )

    logger.info(
        "%s %s ready (prefix=%r)", cfg.project_name, cfg.version, cfg.api_prefix
    )
    return app


app = create_app()
