"""Abstract repository for Order aggregate.

Orders are never deleted; cancelled orders stay as a record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new order."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""

    @abstractmethod
    def update(self, order: Order) -> None:
        """Persist a status change. Raises OrderNotFoundError if absent."""

    @abstractmethod
    def exists_by_id(self, order_id: str) -> bool:
        """Return True if an order with this ID is stored."""
