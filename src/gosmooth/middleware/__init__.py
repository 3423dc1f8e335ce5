"""Middleware registration."""

from fastapi import FastAPI

from gosmooth.config import Settings
from gosmooth.middleware.cors import setup_cors
from gosmooth.middleware.error_handler import setup_error_handlers
from gosmooth.middleware.logging import setup_logging
from gosmooth.middleware.request_id import RequestIdMiddleware
from gosmooth.middleware.timeout import RequestDeadlineMiddleware


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware in the correct order.

    Starlette runs middleware in reverse-add order (last added = outermost).
    CORS stays outermost so 504 responses from the deadline middleware carry
    CORS headers too.
    """
    setup_logging(settings)
    setup_error_handlers(app)
    app.add_middleware(RequestDeadlineMiddleware, timeout_seconds=settings.request_timeout_seconds)
    app.add_middleware(RequestIdMiddleware)
    setup_cors(app, settings)
