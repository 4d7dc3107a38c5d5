"""Mapping helpers shared by the route modules."""

from autoroute_backend.api.controllers.product import (
    to_order_response,
    to_product_response,
)
from autoroute_backend.api.controllers.user import (
    to_user_list_response,
    to_user_response,
)

__all__ = [
    "to_order_response",
    "to_product_response",
    "to_user_list_response",
    "to_user_response",
]
