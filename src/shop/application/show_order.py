"""Application service: Show / List Orders use cases (queries)."""

from __future__ import annotations

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.exceptions import OrderNotFoundError
from shop.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order '{order_id}' not found")
        return order_to_dto(order)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [order_to_dto(o) for o in self._order_repo.list_all()]
