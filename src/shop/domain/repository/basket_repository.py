"""Abstract repository for Basket aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.basket import Basket


class BasketRepository(ABC):

    @abstractmethod
    def save(self, basket: Basket) -> None:
        """Persist a new basket."""

    @abstractmethod
    def get_by_id(self, basket_id: str) -> Basket | None:
        """Return a basket by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Basket]:
        """Return every basket."""

    @abstractmethod
    def update(self, basket: Basket) -> None:
        """Persist changes. Raises BasketNotFoundError if absent."""

    @abstractmethod
    def exists_by_id(self, basket_id: str) -> bool:
        """Return True if a basket with this ID is stored."""

    @abstractmethod
    def delete(self, basket_id: str) -> None:
        """Remove a basket. Raises BasketNotFoundError if absent."""
