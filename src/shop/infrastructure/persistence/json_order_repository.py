"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime

from shop.domain.exceptions import OrderNotFoundError
from shop.domain.model.order import Order, OrderItem, OrderStatus
from shop.domain.model.value_objects import Money, Quantity
from shop.domain.repository.order_repository import OrderRepository
from shop.infrastructure.persistence.json_repository import JsonRepository


class JsonOrderRepository(JsonRepository[Order], OrderRepository):

    not_found_error = OrderNotFoundError
    entity_name = "Order"

    # --- OrderRepository interface --------------------------------------------

    def save(self, order: Order) -> None:
        self._upsert(order.id, order, must_exist=False)

    def get_by_id(self, order_id: str) -> Order | None:
        return self._get(order_id)

    def list_all(self) -> list[Order]:
        return sorted(self._list(), key=lambda o: o.created_at)

    def update(self, order: Order) -> None:
        self._upsert(order.id, order, must_exist=True)

    def exists_by_id(self, order_id: str) -> bool:
        return self._exists(order_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        # The total is stored rather than recomputed: it is fixed at checkout.
        return {
            "id": order.id,
            "status": order.status.value,
            "total": order.total.amount,
            "currency": order.total.currency,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "price": item.price.amount,
                    "currency": item.price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            OrderItem(
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                price=Money(i["price"], i["currency"]),
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            items=items,
            total=Money(raw["total"], raw["currency"]),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
