"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and the test suite.

Implementations hand out detached copies: changing a loaded Product has
no effect on storage until ``save`` or ``update`` is called.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new product (or overwrite one with the same ID)."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Persist changes to an existing product.

        Raises ProductNotFoundError if the product was never saved.
        """

    @abstractmethod
    def exists_by_id(self, product_id: str) -> bool:
        """Return True if a product with this ID is stored."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product. Raises ProductNotFoundError if absent."""
