"""Application service: Update Product use cases.

Two separate operations: editing catalog details (name, description,
price) and replacing the stock level.  Neither affects existing baskets
or orders, which captured a price snapshot of their own.
"""

from __future__ import annotations

import structlog

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.exceptions import ProductNotFoundError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money, Quantity
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


def _load(repo: ProductRepository, product_id: str) -> Product:
    product = repo.get_by_id(product_id)
    if product is None:
        raise ProductNotFoundError(f"Product '{product_id}' not found")
    return product


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        description: str,
        price: int,
        currency: str,
    ) -> ProductDTO:
        product = _load(self._product_repo, product_id)
        product.update_details(name, description, Money(price, currency))
        self._product_repo.update(product)

        logger.info("product.updated", product_id=product.id, price=str(product.price))
        return product_to_dto(product)


class UpdateStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, stock: int) -> ProductDTO:
        quantity = Quantity(stock)
        product = _load(self._product_repo, product_id)
        product.update_stock(quantity)
        self._product_repo.update(product)

        logger.info("product.stock_set", product_id=product.id, stock=stock)
        return product_to_dto(product)
