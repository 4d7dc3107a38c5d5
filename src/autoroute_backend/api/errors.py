"""API error types and the handlers that render them."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors rendered as ``{"detail", "code"}`` responses."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, *, headers: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.headers = headers or {}

    def to_dict(self) -> dict[str, str]:
        return {"detail": self.message, "code": self.code}


class NotFoundError(ApiError):
    """Raised when a requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class ConflictError(ApiError):
    """Raised when a resource would be duplicated."""

    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"


class RateLimitExceededError(ApiError):
    """Raised when a client exhausts its call quota for the current window."""

    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    code = "RATE_LIMITED"

    def __init__(self, retry_after: int) -> None:
        super().__init__(
            "Rate limit exceeded", headers={"Retry-After": str(retry_after)}
        )
        self.retry_after = retry_after


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an :class:`ApiError` as JSON."""

    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers for :class:`ApiError` subclasses on *app*."""

    app.add_exception_handler(ApiError, api_error_handler)


__all__ = [
    "ApiError",
    "ConflictError",
    "NotFoundError",
    "RateLimitExceededError",
    "api_error_handler",
    "register_error_handlers",
]
