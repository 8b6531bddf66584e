"""Application service: Remove Product use case."""

from __future__ import annotations

import structlog

from shop.domain.exceptions import ProductNotFoundError
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        """Delete a product from the catalog.

        Baskets and orders that reference it are left alone; a later
        checkout of such a basket fails with ProductNotFoundError.
        """
        if not self._product_repo.exists_by_id(product_id):
            raise ProductNotFoundError(f"Product '{product_id}' not found")
        self._product_repo.delete(product_id)
        logger.info("product.removed", product_id=product_id)
