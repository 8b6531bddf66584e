"""Product aggregate.

Products live independently of baskets and orders. They have their own
lifecycle: details and prices change, stock is replenished and consumed
by checkouts.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from shop.domain.exceptions import (
    EmptyNameError,
    InsufficientStockError,
    MissingPriceError,
    MissingStockError,
)
from shop.domain.model.value_objects import Money, Quantity


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products. The ``__init__`` is left
    plain so the repository can reconstitute persisted products (with
    their stored id and timestamps) without re-validating.
    """

    id: str
    name: str
    description: str
    price: Money
    stock: Quantity
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def create(
        name: str,
        description: str,
        price: Money | None,
        stock: Quantity | None,
    ) -> Product:
        _validate_details(name, price)
        if stock is None:
            raise MissingStockError("Product stock is required")
        now = _now()
        return Product(
            id=str(uuid.uuid4()),
            name=name,
            description=description or "",
            price=price,  # type: ignore[arg-type]
            stock=stock,
            created_at=now,
            updated_at=now,
        )

    # --- Mutations ------------------------------------------------------------

    def update_details(self, name: str, description: str, price: Money | None) -> None:
        """Replace name, description and price.

        Existing basket items and orders keep the price they captured.
        """
        _validate_details(name, price)
        self.name = name
        self.description = description or ""
        self.price = price  # type: ignore[assignment]
        self.updated_at = _now()

    def update_stock(self, stock: Quantity | None) -> None:
        if stock is None:
            raise MissingStockError("Product stock is required")
        self.stock = stock
        self.updated_at = _now()

    def reduce_stock(self, quantity: Quantity) -> None:
        """Take ``quantity`` units out of stock.

        On failure the product is left untouched.
        """
        if quantity.value > self.stock.value:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity.value}, have {self.stock.value})"
            )
        self.stock = self.stock.subtract(quantity)
        self.updated_at = _now()

    def is_available(self) -> bool:
        return not self.stock.is_zero()


def _validate_details(name: str, price: Money | None) -> None:
    if not name or not name.strip():
        raise EmptyNameError("Product name is required")
    if price is None:
        raise MissingPriceError("Product price is required")
