"""Application service: Show / List Products use cases (queries)."""

from __future__ import annotations

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.exceptions import ProductNotFoundError
from shop.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product '{product_id}' not found")
        return product_to_dto(product)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.list_all()]
