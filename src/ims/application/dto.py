"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.product import Product
from ims.domain.service.catalog_queries import InventorySummary


@dataclass(frozen=True)
class ProductDTO:
    """Output: one row of the inventory table."""

    id: int
    name: str
    category: str
    price: str  # formatted, e.g. "MWK 2,500"
    quantity: int
    low_stock: bool

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            category=product.category,
            price=str(product.price),
            quantity=product.quantity,
            low_stock=product.is_low_stock,
        )


@dataclass(frozen=True)
class DashboardDTO:
    """Output: summary cards shown above the table."""

    total_count: int
    total_value: str
    low_stock_count: int

    @staticmethod
    def from_summary(summary: InventorySummary) -> DashboardDTO:
        return DashboardDTO(
            total_count=summary.total_count,
            total_value=str(summary.total_value),
            low_stock_count=summary.low_stock_count,
        )
