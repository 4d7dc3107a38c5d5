"""Product catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from autoroute_backend.api.controllers import to_product_response
from autoroute_backend.api.dependencies import ProductServiceDep
from autoroute_backend.api.models import ProductCreateRequest, ProductResponse

router = APIRouter(tags=["product"])


@router.get("", response_model=list[ProductResponse])
def list_products(product_service: ProductServiceDep) -> list[ProductResponse]:
    return [to_product_response(product) for product in product_service.list_products()]


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreateRequest, product_service: ProductServiceDep
) -> ProductResponse:
    """Add a product to the catalog."""

    product = product_service.add_product(name=payload.name, price=payload.price)
    return to_product_response(product)
