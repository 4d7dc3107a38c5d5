"""Order endpoints nested beneath the product catalog."""

from __future__ import annotations

from fastapi import APIRouter, status

from autoroute_backend.api.controllers import to_order_response
from autoroute_backend.api.dependencies import ProductServiceDep
from autoroute_backend.api.models import OrderCreateRequest, OrderResponse

router = APIRouter(tags=["order"])


@router.get("", response_model=list[OrderResponse])
def list_orders(product_service: ProductServiceDep) -> list[OrderResponse]:
    return [to_order_response(order) for order in product_service.list_orders()]


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def place_order(
    payload: OrderCreateRequest, product_service: ProductServiceDep
) -> OrderResponse:
    """Order a quantity of an existing product."""

    order = product_service.place_order(
        product_id=payload.product_id, quantity=payload.quantity
    )
    return to_order_response(order)
