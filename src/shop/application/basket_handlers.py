"""Application services: Basket use cases.

A basket is created empty, filled item by item, and finally either
cleared or checked out (see ``checkout.py``).  Adding or re-quantifying
an item checks the product's current stock so shoppers are told early,
but nothing is reserved until checkout.
"""

from __future__ import annotations

import structlog

from shop.application.dto import BasketDTO, basket_to_dto
from shop.domain.exceptions import (
    BasketNotFoundError,
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from shop.domain.model.basket import Basket
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Quantity
from shop.domain.repository.basket_repository import BasketRepository
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class _BasketHandler:

    def __init__(self, basket_repo: BasketRepository) -> None:
        self._basket_repo = basket_repo

    def _load(self, basket_id: str) -> Basket:
        basket = self._basket_repo.get_by_id(basket_id)
        if basket is None:
            raise BasketNotFoundError(f"Basket '{basket_id}' not found")
        return basket


class _StockCheckingBasketHandler(_BasketHandler):

    def __init__(
        self,
        basket_repo: BasketRepository,
        product_repo: ProductRepository,
    ) -> None:
        super().__init__(basket_repo)
        self._product_repo = product_repo

    def _product_with_stock(self, product_id: str, quantity: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product '{product_id}' not found")
        if product.stock.value < quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {product.name} "
                f"(requested {quantity}, have {product.stock.value})"
            )
        return product


class CreateBasketHandler(_BasketHandler):

    def handle(self) -> BasketDTO:
        basket = Basket.create()
        self._basket_repo.save(basket)
        logger.info("basket.created", basket_id=basket.id)
        return basket_to_dto(basket)


class ShowBasketHandler(_BasketHandler):

    def handle(self, basket_id: str) -> BasketDTO:
        return basket_to_dto(self._load(basket_id))


class AddBasketItemHandler(_StockCheckingBasketHandler):

    def handle(self, basket_id: str, product_id: str, quantity: int) -> BasketDTO:
        """Put ``quantity`` units of a product in the basket.

        The product's current price is captured on the item.
        """
        if not product_id:
            raise ValidationError("Product ID is required")
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")

        basket = self._load(basket_id)
        product = self._product_with_stock(product_id, quantity)

        basket.add_item(product.id, Quantity(quantity), product.price)
        # Raises CurrencyMismatchError before anything is stored.
        basket.total()
        self._basket_repo.update(basket)

        logger.info(
            "basket.item_added",
            basket_id=basket.id,
            product_id=product.id,
            quantity=quantity,
        )
        return basket_to_dto(basket)


class RemoveBasketItemHandler(_BasketHandler):

    def handle(self, basket_id: str, product_id: str) -> BasketDTO:
        basket = self._load(basket_id)
        basket.remove_item(product_id)
        self._basket_repo.update(basket)
        logger.info("basket.item_removed", basket_id=basket.id, product_id=product_id)
        return basket_to_dto(basket)


class UpdateBasketItemHandler(_StockCheckingBasketHandler):

    def handle(self, basket_id: str, product_id: str, quantity: int) -> BasketDTO:
        """Set an item's quantity. Zero removes the item."""
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")

        basket = self._load(basket_id)
        if quantity > 0:
            self._product_with_stock(product_id, quantity)
        basket.update_item_quantity(product_id, Quantity(quantity))
        self._basket_repo.update(basket)

        logger.info(
            "basket.item_updated",
            basket_id=basket.id,
            product_id=product_id,
            quantity=quantity,
        )
        return basket_to_dto(basket)


class ClearBasketHandler(_BasketHandler):

    def handle(self, basket_id: str) -> BasketDTO:
        basket = self._load(basket_id)
        basket.clear()
        self._basket_repo.update(basket)
        logger.info("basket.cleared", basket_id=basket.id)
        return basket_to_dto(basket)
