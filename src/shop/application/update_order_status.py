"""Application services: Order lifecycle use cases.

Each handler loads the order, asks the aggregate to make one status
transition and persists the result.  The aggregate decides whether the
transition is legal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.exceptions import OrderNotFoundError
from shop.domain.model.order import Order
from shop.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class _OrderTransitionHandler(ABC):

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order '{order_id}' not found")

        previous = order.status
        self._apply(order)
        self._order_repo.update(order)

        logger.info(
            "order.status_changed",
            order_id=order.id,
            from_status=previous.value,
            to_status=order.status.value,
        )
        return order_to_dto(order)

    @abstractmethod
    def _apply(self, order: Order) -> None:
        """Make the one status transition this handler stands for."""


class ConfirmOrderHandler(_OrderTransitionHandler):

    def _apply(self, order: Order) -> None:
        order.confirm()


class ShipOrderHandler(_OrderTransitionHandler):

    def _apply(self, order: Order) -> None:
        order.ship()


class DeliverOrderHandler(_OrderTransitionHandler):

    def _apply(self, order: Order) -> None:
        order.deliver()


class CancelOrderHandler(_OrderTransitionHandler):
    """Cancelling does not return stock to the products."""

    def _apply(self, order: Order) -> None:
        order.cancel()
