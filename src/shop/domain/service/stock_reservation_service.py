"""Domain service: Stock Reservation.

This service coordinates the cross-aggregate operation of taking stock
out of several products for one checkout.  It lives in the domain layer
because the rule (every line must be coverable before any stock moves)
is a core business rule, not just orchestration.
"""

from __future__ import annotations

from typing import Iterable

from shop.domain.exceptions import InsufficientStockError, ProductNotFoundError
from shop.domain.model.basket import BasketItem
from shop.domain.model.product import Product
from shop.domain.repository.product_repository import ProductRepository


class StockReservationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve_for_items(self, items: Iterable[BasketItem]) -> None:
        """Reduce stock for every item.

        Uses a two-pass approach:
          Pass 1, check: every product exists and holds enough stock.
          Fails fast before any mutation.
          Pass 2, reduce: re-read each product, call ``reduce_stock()``
          and persist it.

        The passes do not share Product objects, so callers that need the
        check to still hold at write time must run this inside a unit of
        work.
        """
        items = list(items)

        # Pass 1: validate everything
        for item in items:
            product = self._load(item.product_id)
            if product.stock.value < item.quantity.value:
                raise InsufficientStockError(
                    f"Insufficient stock for {product.name} "
                    f"(need {item.quantity.value}, have {product.stock.value})"
                )

        # Pass 2: mutate and persist
        for item in items:
            product = self._load(item.product_id)
            product.reduce_stock(item.quantity)
            self._product_repo.update(product)

    def _load(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product '{product_id}' not found")
        return product
