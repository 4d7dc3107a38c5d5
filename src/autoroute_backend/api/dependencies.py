"""Dependency providers for discovered route modules."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from autoroute_backend.api.rate_limit import RateLimitOptions, rate_limit
from autoroute_backend.api.services import ProductService, UserRecord, UserService
from autoroute_backend.settings import get_settings

_user_service = UserService()
_product_service = ProductService()


def get_user_service() -> UserService:
    """Return the shared :class:`UserService` instance."""

    return _user_service


def get_product_service() -> ProductService:
    """Return the shared :class:`ProductService` instance."""

    return _product_service


def get_current_user(
    user_service: Annotated[UserService, Depends(get_user_service)],
    x_user_id: Annotated[str | None, Header()] = None,
) -> UserRecord:
    """Resolve the calling user from the ``X-User-Id`` header."""

    if x_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing X-User-Id header"
        )
    try:
        user_id = UUID(x_user_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid X-User-Id header"
        ) from exc
    return user_service.get_user(user_id)


def default_rate_limit(scope: str):
    """Rate-limit dependency for *scope* using the configured quota."""

    settings = get_settings()
    options = RateLimitOptions(
        window_seconds=settings.rate_limit_window_seconds,
        max_calls=settings.rate_limit_max_calls,
    )
    return rate_limit(scope, options)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
CurrentUserDep = Annotated[UserRecord, Depends(get_current_user)]

__all__ = [
    "CurrentUserDep",
    "ProductServiceDep",
    "UserServiceDep",
    "default_rate_limit",
    "get_current_user",
    "get_product_service",
    "get_user_service",
]
