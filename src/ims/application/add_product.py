"""Application service: Add Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, category: str, price: str, quantity: int | str) -> ProductDTO:
        """Add a new product to the inventory."""
        product = self._product_repo.add(name, category, price, quantity)
        return ProductDTO.from_product(product)
