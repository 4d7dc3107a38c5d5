"""Product catalog and ordering backed by an in-memory store."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from autoroute_backend.api.errors import NotFoundError


class ProductNotFoundError(NotFoundError):
    """Raised when a product ID does not exist."""

    def __init__(self, product_id: UUID) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


@dataclass(slots=True)
class ProductRecord:
    """Stored catalog entry."""

    name: str
    price: float
    id: UUID = field(default_factory=uuid4)


@dataclass(slots=True)
class OrderRecord:
    """Stored order; ``total`` is fixed at the price when ordered."""

    product_id: UUID
    quantity: int
    total: float
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))


class ProductService:
    """Manages the catalog and the orders placed against it."""

    def __init__(self) -> None:
        self._products: dict[UUID, ProductRecord] = {}
        self._orders: list[OrderRecord] = []
        self._lock = threading.Lock()

    def add_product(self, *, name: str, price: float) -> ProductRecord:
        product = ProductRecord(name=name, price=price)
        with self._lock:
            self._products[product.id] = product
        return product

    def list_products(self) -> list[ProductRecord]:
        with self._lock:
            return list(self._products.values())

    def place_order(self, *, product_id: UUID, quantity: int) -> OrderRecord:
        """Order *quantity* units of a catalog product."""

        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            order = OrderRecord(
                product_id=product_id,
                quantity=quantity,
                total=round(product.price * quantity, 2),
            )
            self._orders.append(order)
        return order

    def list_orders(self) -> list[OrderRecord]:
        with self._lock:
            return list(self._orders)

    def reset(self) -> None:
        with self._lock:
            self._products.clear()
            self._orders.clear()
