"""Order aggregate: the result of a checkout.

The Order is an aggregate root that owns its items.  Items and total are
fixed at creation; only the status moves, along this state machine::

    PENDING -> CONFIRMED -> SHIPPED -> DELIVERED
       \\           \\           \\
        +-----------+-----------+--> CANCELLED

DELIVERED and CANCELLED are terminal.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable

from shop.domain.exceptions import (
    AlreadyCancelledError,
    AlreadyDeliveredError,
    EmptyBasketError,
    InvalidTransitionError,
)
from shop.domain.model.basket import BasketItem, validate_line
from shop.domain.model.value_objects import Money, Quantity


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})


@dataclass(frozen=True)
class OrderItem:
    """A line of an order, copied from a basket item at checkout."""

    product_id: str
    quantity: Quantity
    price: Money  # locked at order-creation time

    def __post_init__(self) -> None:
        validate_line(self.product_id, self.quantity, self.price)

    @property
    def subtotal(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str
    items: tuple[OrderItem, ...]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(basket_items: Iterable[BasketItem]) -> Order:
        basket_items = list(basket_items)
        if not basket_items:
            raise EmptyBasketError("Cannot create an order from an empty basket")

        items = tuple(
            OrderItem(product_id=bi.product_id, quantity=bi.quantity, price=bi.price)
            for bi in basket_items
        )

        total = Money.zero(items[0].price.currency)
        for item in items:
            total = total + item.subtotal

        now = _now()
        return Order(
            id=str(uuid.uuid4()),
            items=items,
            total=total,
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        self._transition(OrderStatus.PENDING, OrderStatus.CONFIRMED)

    def ship(self) -> None:
        self._transition(OrderStatus.CONFIRMED, OrderStatus.SHIPPED)

    def deliver(self) -> None:
        self._transition(OrderStatus.SHIPPED, OrderStatus.DELIVERED)

    def cancel(self) -> None:
        if self.status == OrderStatus.DELIVERED:
            raise AlreadyDeliveredError("Delivered orders cannot be cancelled")
        if self.status == OrderStatus.CANCELLED:
            raise AlreadyCancelledError("Order is already cancelled")
        self.status = OrderStatus.CANCELLED
        self.updated_at = _now()

    def is_cancellable(self) -> bool:
        return self.status not in TERMINAL_STATUSES

    # --- Internal helpers -----------------------------------------------------

    def _transition(self, expected: OrderStatus, target: OrderStatus) -> None:
        if self.status != expected:
            raise InvalidTransitionError(
                f"Cannot move order to {target.value}: current status is "
                f"{self.status.value}, expected {expected.value}"
            )
        self.status = target
        self.updated_at = _now()
