"""Integration tests for the ShowDashboard use case."""

from ims.application.show_dashboard import ShowDashboardHandler
from ims.domain.repository.product_repository import ProductRepository
from tests.fakes import FakeKeyValueStore


class TestShowDashboard:

    def test_empty_inventory(self):
        dto = ShowDashboardHandler(ProductRepository(FakeKeyValueStore())).handle()
        assert (dto.total_count, dto.total_value, dto.low_stock_count) == (0, "MWK 0", 0)

    def test_fish_stock(self):
        repo = ProductRepository(FakeKeyValueStore())
        repo.add("Tilapia", "Fish", 2500, 5)
        repo.add("Catfish", "Fish", 1800, 2)

        dto = ShowDashboardHandler(repo).handle()

        assert dto.total_count == 2
        assert dto.total_value == "MWK 16,100"
        assert dto.low_stock_count == 1

    def test_uses_repository_currency(self):
        repo = ProductRepository(FakeKeyValueStore(), currency="USD")
        repo.add("Widget", "Parts", "12.5", 4)
        assert ShowDashboardHandler(repo).handle().total_value == "USD 50"
