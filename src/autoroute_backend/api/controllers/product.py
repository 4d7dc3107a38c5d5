"""Conversions between stored catalog records and their API representation."""

from __future__ import annotations

from autoroute_backend.api.models import OrderResponse, ProductResponse
from autoroute_backend.api.services import OrderRecord, ProductRecord


def to_product_response(product: ProductRecord) -> ProductResponse:
    return ProductResponse.model_validate(product, from_attributes=True)


def to_order_response(order: OrderRecord) -> OrderResponse:
    return OrderResponse.model_validate(order, from_attributes=True)
