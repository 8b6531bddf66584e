"""Basket aggregate: a shopper's in-progress selection of products.

The Basket owns its BasketItems exclusively.  Each item carries a price
snapshot taken when the product was added, so later catalog price
changes do not silently alter what the shopper saw.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from shop.domain.exceptions import ItemNotFoundError, MissingPriceError, ValidationError
from shop.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity


def _now() -> datetime:
    return datetime.now(timezone.utc)


def validate_line(product_id: str, quantity: Quantity | None, price: Money | None) -> None:
    """Shared validation for basket and order lines."""
    if not product_id:
        raise ValidationError("Product ID cannot be empty")
    if quantity is None or quantity.is_zero():
        raise ValidationError("Quantity must be greater than zero")
    if price is None:
        raise MissingPriceError("Price is required")


@dataclass(frozen=True)
class BasketItem:

    product_id: str
    quantity: Quantity
    price: Money  # snapshot at add time

    def __post_init__(self) -> None:
        validate_line(self.product_id, self.quantity, self.price)

    @property
    def subtotal(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Basket:
    """Aggregate root for shopping baskets.

    Invariant: no two items share a ``product_id``.
    """

    id: str
    items: list[BasketItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def create() -> Basket:
        now = _now()
        return Basket(id=str(uuid.uuid4()), items=[], created_at=now, updated_at=now)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product_id: str, quantity: Quantity, price: Money) -> None:
        """Add a product, or top up its quantity if it is already here.

        On a repeat add the stored price is replaced by ``price``.
        """
        for i, item in enumerate(self.items):
            if item.product_id == product_id:
                self.items[i] = BasketItem(product_id, item.quantity + quantity, price)
                self.updated_at = _now()
                return

        self.items.append(BasketItem(product_id, quantity, price))
        self.updated_at = _now()

    def remove_item(self, product_id: str) -> None:
        index = self._index_of(product_id)
        del self.items[index]
        self.updated_at = _now()

    def update_item_quantity(self, product_id: str, quantity: Quantity) -> None:
        """Set an item's quantity; zero removes it.

        The price captured when the item was added is kept.
        """
        if quantity.is_zero():
            self.remove_item(product_id)
            return

        index = self._index_of(product_id)
        item = self.items[index]
        self.items[index] = BasketItem(product_id, quantity, item.price)
        self.updated_at = _now()

    def clear(self) -> None:
        self.items = []
        self.updated_at = _now()

    # --- Queries --------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self.items

    def get_item(self, product_id: str) -> BasketItem:
        return self.items[self._index_of(product_id)]

    def total(self) -> Money:
        if self.is_empty():
            return Money.zero(DEFAULT_CURRENCY)
        result = Money.zero(self.items[0].price.currency)
        for item in self.items:
            result = result + item.subtotal
        return result

    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: str) -> int:
        for i, item in enumerate(self.items):
            if item.product_id == product_id:
                return i
        raise ItemNotFoundError(f"Product '{product_id}' is not in the basket")
