"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money, Quantity
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        description: str,
        price: int,
        currency: str,
        stock: int,
    ) -> ProductDTO:
        """Add a new product to the catalog.

        ``price`` is in cents. Negative price or stock are rejected by the
        value objects before the product is built.
        """
        product = Product.create(
            name=name,
            description=description,
            price=Money(price, currency),
            stock=Quantity(stock),
        )
        self._product_repo.save(product)

        logger.info(
            "product.created",
            product_id=product.id,
            price=str(product.price),
            stock=product.stock.value,
        )
        return product_to_dto(product)
