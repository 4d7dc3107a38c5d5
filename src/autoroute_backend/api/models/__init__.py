"""Models used for API request and response payloads."""

from autoroute_backend.api.models.product import (
    OrderCreateRequest,
    OrderResponse,
    ProductCreateRequest,
    ProductResponse,
)
from autoroute_backend.api.models.user import (
    UserCreateRequest,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "OrderCreateRequest",
    "OrderResponse",
    "ProductCreateRequest",
    "ProductResponse",
    "UserCreateRequest",
    "UserListResponse",
    "UserResponse",
]
