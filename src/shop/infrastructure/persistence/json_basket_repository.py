"""JSON-file-backed implementation of BasketRepository."""

from __future__ import annotations

from datetime import datetime

from shop.domain.exceptions import BasketNotFoundError
from shop.domain.model.basket import Basket, BasketItem
from shop.domain.model.value_objects import Money, Quantity
from shop.domain.repository.basket_repository import BasketRepository
from shop.infrastructure.persistence.json_repository import JsonRepository


class JsonBasketRepository(JsonRepository[Basket], BasketRepository):

    not_found_error = BasketNotFoundError
    entity_name = "Basket"

    # --- BasketRepository interface -------------------------------------------

    def save(self, basket: Basket) -> None:
        self._upsert(basket.id, basket, must_exist=False)

    def get_by_id(self, basket_id: str) -> Basket | None:
        return self._get(basket_id)

    def list_all(self) -> list[Basket]:
        return self._list()

    def update(self, basket: Basket) -> None:
        self._upsert(basket.id, basket, must_exist=True)

    def exists_by_id(self, basket_id: str) -> bool:
        return self._exists(basket_id)

    def delete(self, basket_id: str) -> None:
        self._delete(basket_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(basket: Basket) -> dict:
        return {
            "id": basket.id,
            "created_at": basket.created_at.isoformat(),
            "updated_at": basket.updated_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "price": item.price.amount,
                    "currency": item.price.currency,
                }
                for item in basket.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Basket:
        return Basket(
            id=raw["id"],
            items=[
                BasketItem(
                    product_id=i["product_id"],
                    quantity=Quantity(i["quantity"]),
                    price=Money(i["price"], i["currency"]),
                )
                for i in raw["items"]
            ],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
