"""Pydantic models for product and order endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

PRODUCT_NAME_MAX_LENGTH = 120
ORDER_MAX_QUANTITY = 1_000


class ProductResponse(BaseModel):
    """Public representation of a catalog product."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    name: str
    price: float


class ProductCreateRequest(BaseModel):
    """Payload for adding a product to the catalog."""

    name: str = Field(min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH)
    price: float = Field(gt=0)


class OrderResponse(BaseModel):
    """An order placed against a product."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    product_id: UUID
    quantity: int
    total: float
    created_at: datetime


class OrderCreateRequest(BaseModel):
    """Payload for ordering a product."""

    product_id: UUID
    quantity: int = Field(ge=1, le=ORDER_MAX_QUANTITY)
