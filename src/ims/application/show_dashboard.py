"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from ims.application.dto import DashboardDTO
from ims.domain.repository.product_repository import ProductRepository


class ShowDashboardHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> DashboardDTO:
        return DashboardDTO.from_summary(self._product_repo.aggregate())
