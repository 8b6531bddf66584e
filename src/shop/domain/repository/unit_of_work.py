"""Unit of Work: one transaction spanning several repositories.

Checkout touches products, the order and the basket.  Running it inside
a unit of work makes those writes commit or roll back together::

    with uow:
        product = uow.products.get_by_id(pid)
        product.reduce_stock(qty)
        uow.products.update(product)
        uow.orders.save(order)
        uow.commit()

Leaving the ``with`` block without ``commit()`` (normally or through an
exception) discards every staged change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from shop.domain.repository.basket_repository import BasketRepository
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    baskets: BasketRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        self._begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        try:
            self.rollback()
        finally:
            self._end()

    @abstractmethod
    def _begin(self) -> None:
        """Open the transaction and bind the repositories."""

    def _end(self) -> None:
        """Release whatever ``_begin`` acquired."""

    @abstractmethod
    def commit(self) -> None:
        """Make every staged change durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged changes. A no-op after ``commit``."""
