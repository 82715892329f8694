"""Application service: List Products use case (query)."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.catalog_queries import SortKey, sort_products


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, search: str = "", sort: SortKey | str = SortKey.NONE) -> list[ProductDTO]:
        """Return the table rows matching ``search``, ordered by ``sort``."""
        key = SortKey.parse(sort)
        matches = self._product_repo.search(search)
        return [ProductDTO.from_product(p) for p in sort_products(matches, key)]
