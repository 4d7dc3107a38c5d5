"""Service layer for API-specific business logic."""

from autoroute_backend.api.services.product import (
    OrderRecord,
    ProductNotFoundError,
    ProductRecord,
    ProductService,
)
from autoroute_backend.api.services.user import (
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRecord,
    UserService,
)

__all__ = [
    "OrderRecord",
    "ProductNotFoundError",
    "ProductRecord",
    "ProductService",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRecord",
    "UserService",
]
