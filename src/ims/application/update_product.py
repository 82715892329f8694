"""Application service: Update Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        category: str | None = None,
        price: str | None = None,
        quantity: int | str | None = None,
    ) -> ProductDTO:
        """Edit a product, keeping current values for omitted fields.

        The product keeps its ID and its place in the table.
        """
        current = self._product_repo.get(product_id)
        product = self._product_repo.update(
            product_id,
            name=current.name if name is None else name,
            category=current.category if category is None else category,
            price=current.price if price is None else price,
            quantity=current.quantity if quantity is None else quantity,
        )
        return ProductDTO.from_product(product)
