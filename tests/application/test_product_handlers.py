"""Integration tests for the product use cases.

Uses an in-memory fake key-value store, no file I/O.
"""

import pytest

from ims.application.add_product import AddProductHandler
from ims.application.list_products import ListProductsHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import NotFoundError, ValidationError
from ims.domain.repository.product_repository import ProductRepository
from tests.fakes import FakeKeyValueStore


def _setup() -> ProductRepository:
    repo = ProductRepository(FakeKeyValueStore())
    repo.add("Tilapia", "Fish", 2500, 5)
    repo.add("Rice", "Grains", 1200, 40)
    repo.add("Catfish", "Fish", 1800, 2)
    return repo


class TestAddProduct:

    def test_returns_formatted_row(self):
        repo = ProductRepository(FakeKeyValueStore())
        dto = AddProductHandler(repo).handle("Salt", "Spices", "19.99", 3)
        assert dto.id == 1
        assert dto.price == "MWK 19.99"
        assert dto.low_stock is True

    def test_validation_error_propagates(self):
        repo = ProductRepository(FakeKeyValueStore())
        with pytest.raises(ValidationError):
            AddProductHandler(repo).handle("Salt", "", "19.99", 3)


class TestUpdateProduct:

    def test_omitted_fields_keep_current_values(self):
        repo = _setup()
        dto = UpdateProductHandler(repo).handle(1, quantity=12)
        assert dto.name == "Tilapia"
        assert dto.category == "Fish"
        assert dto.price == "MWK 2,500"
        assert dto.quantity == 12

    def test_all_fields(self):
        repo = _setup()
        dto = UpdateProductHandler(repo).handle(
            2, name="Brown rice", category="Grains", price="1500", quantity=30
        )
        assert (dto.id, dto.name, dto.price, dto.quantity) == (2, "Brown rice", "MWK 1,500", 30)
        assert [p.id for p in repo.list()] == [1, 2, 3]

    def test_missing_product(self):
        with pytest.raises(NotFoundError):
            UpdateProductHandler(_setup()).handle(99, name="Ghost")


class TestRemoveProduct:

    def test_removes(self):
        repo = _setup()
        RemoveProductHandler(repo).handle(1)
        assert [p.id for p in repo.list()] == [2, 3]

    def test_missing_product(self):
        with pytest.raises(NotFoundError):
            RemoveProductHandler(_setup()).handle(99)


class TestListProducts:

    def test_defaults_to_creation_order(self):
        rows = ListProductsHandler(_setup()).handle()
        assert [r.name for r in rows] == ["Tilapia", "Rice", "Catfish"]

    def test_search_then_sort(self):
        rows = ListProductsHandler(_setup()).handle(search="fish", sort="price")
        assert [r.name for r in rows] == ["Catfish", "Tilapia"]

    def test_low_stock_flag(self):
        rows = ListProductsHandler(_setup()).handle(sort="quantity")
        assert [(r.name, r.low_stock) for r in rows] == [
            ("Catfish", True),
            ("Tilapia", False),
            ("Rice", False),
        ]

    def test_bad_sort_key(self):
        with pytest.raises(ValidationError):
            ListProductsHandler(_setup()).handle(sort="colour")
