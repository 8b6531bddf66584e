"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime

from shop.domain.exceptions import ProductNotFoundError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money, Quantity
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.persistence.json_repository import JsonRepository


class JsonProductRepository(JsonRepository[Product], ProductRepository):

    not_found_error = ProductNotFoundError
    entity_name = "Product"

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> None:
        self._upsert(product.id, product, must_exist=False)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._get(product_id)

    def list_all(self) -> list[Product]:
        return self._list()

    def update(self, product: Product) -> None:
        self._upsert(product.id, product, must_exist=True)

    def exists_by_id(self, product_id: str) -> bool:
        return self._exists(product_id)

    def delete(self, product_id: str) -> None:
        self._delete(product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": product.price.amount,
            "currency": product.price.currency,
            "stock": product.stock.value,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(raw["price"], raw["currency"]),
            stock=Quantity(raw["stock"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
