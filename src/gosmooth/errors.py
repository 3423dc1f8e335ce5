"""API error taxonomy.

Services raise these; the global handlers in ``gosmooth.middleware.error_handler``
turn them into ``{"error", "message", "code"}`` JSON bodies.
"""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code = 500
    default_message = "An internal server error occurred"

    def __init__(self, error: str, message: str | None = None, **extra: Any) -> None:
        super().__init__(error)
        self.error = error
        self.message = message or self.default_message
        self.extra = extra

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error, "message": self.message, "code": self.status_code}
        body.update(self.extra)
        return body


class BadRequestError(ApiError):
    status_code = 400
    default_message = "Invalid request"


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = "Unauthorized access"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "Access forbidden"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "The requested resource was not found"


class ConflictError(ApiError):
    status_code = 409
    default_message = "Resource already exists"


class InternalError(ApiError):
    status_code = 500
