"""Application service: Checkout use case.

Turns a basket into an order:

1. Load the basket (must exist and hold at least one item).
2. Check every product has enough stock, then reduce it
   (``StockReservationService``).
3. Build the Order from the basket's items and persist it.
4. Clear the basket.

All of it runs inside one unit of work, so a failure at any step leaves
products, orders and the basket exactly as they were.
"""

from __future__ import annotations

import structlog

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.exceptions import BasketNotFoundError, EmptyBasketError, ValidationError
from shop.domain.model.order import Order
from shop.domain.repository.unit_of_work import UnitOfWork
from shop.domain.service.stock_reservation_service import StockReservationService

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, basket_id: str) -> OrderDTO:
        if not basket_id:
            raise ValidationError("Basket ID is required")

        log = logger.bind(basket_id=basket_id)

        with self._uow as uow:
            basket = uow.baskets.get_by_id(basket_id)
            if basket is None:
                raise BasketNotFoundError(f"Basket '{basket_id}' not found")
            if basket.is_empty():
                raise EmptyBasketError("Cannot create an order from an empty basket")

            StockReservationService(uow.products).reserve_for_items(basket.items)

            order = Order.create(basket.items)
            uow.orders.save(order)

            basket.clear()
            uow.baskets.update(basket)

            uow.commit()

        log.info(
            "order.checked_out",
            order_id=order.id,
            total=str(order.total),
            lines=len(order.items),
        )
        return order_to_dto(order)
