"""ProductRepository: owns the product collection and the id counter.

The repository keeps products in creation order, issues ids from a
counter that only ever grows, and writes its whole state through to an
injected KeyValueStore after every mutation.
"""

from __future__ import annotations

import copy
import json
import logging
from decimal import Decimal
from typing import Union

from ims.domain.exceptions import DomainException, NotFoundError, PersistenceError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import DEFAULT_CURRENCY, Money
from ims.domain.repository.key_value_store import KeyValueStore
from ims.domain.service.catalog_queries import (
    InventorySummary,
    SortKey,
    search_products,
    sort_products,
    summarize,
)

logger = logging.getLogger(__name__)

PRODUCTS_KEY = "products"
COUNTER_KEY = "productIdCounter"

# Python refuses to parse longer integer literals by default.
_MAX_INT_DIGITS = 4300

PriceInput = Union[str, float, int, Decimal, Money]


class ProductRepository:

    def __init__(self, store: KeyValueStore, currency: str = DEFAULT_CURRENCY) -> None:
        self._store = store
        self._currency = currency
        self._products: list[Product] = []
        self._next_id = 1
        self._restore()

    @property
    def next_id(self) -> int:
        return self._next_id

    # --- Mutations ------------------------------------------------------------

    def add(self, name: str, category: str, price: PriceInput, quantity: int | str) -> Product:
        """Create a product, persist, and return a copy of it."""
        product = Product.create(
            self._next_id, name, category, price, quantity, self._currency
        )
        self._next_id += 1

        snapshot = list(self._products)
        self._products.append(product)
        self._commit(snapshot)
        logger.info("Added product #%d '%s'", product.id, product.name)
        return copy.copy(product)

    def update(
        self,
        product_id: int,
        name: str,
        category: str,
        price: PriceInput,
        quantity: int | str,
    ) -> Product:
        """Replace the editable fields of an existing product in place."""
        product = self._find(product_id)

        snapshot = copy.deepcopy(self._products)
        product.update_details(name, category, price, quantity)
        self._commit(snapshot)
        logger.info("Updated product #%d '%s'", product.id, product.name)
        return copy.copy(product)

    def remove(self, product_id: int) -> None:
        product = self._find(product_id)

        snapshot = list(self._products)
        self._products.remove(product)
        self._commit(snapshot)
        logger.info("Removed product #%d '%s'", product.id, product.name)

    # --- Queries --------------------------------------------------------------

    def get(self, product_id: int) -> Product:
        return copy.copy(self._find(product_id))

    def list(self) -> list[Product]:
        return [copy.copy(p) for p in self._products]

    def search(self, term: str) -> list[Product]:
        return search_products(self.list(), term)

    def sort_by(self, key: SortKey | str) -> list[Product]:
        return sort_products(self.list(), key)

    def aggregate(self) -> InventorySummary:
        return summarize(self._products, self._currency)

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: int) -> Product:
        for product in self._products:
            if product.id == product_id:
                return product
        raise NotFoundError(f"Product with ID '{product_id}' not found")

    def _commit(self, snapshot: list[Product]) -> None:
        """Write state through to the store, or roll the collection back.

        The counter is not rolled back, so an id handed out once is
        never handed out again.
        """
        try:
            self._persist()
        except PersistenceError:
            self._products = snapshot
            raise

    def _persist(self) -> None:
        try:
            payload = self._encode_products(self._products)
        except (ValueError, TypeError) as exc:
            raise PersistenceError(f"Cannot serialize inventory: {exc}") from exc
        self._store.set(COUNTER_KEY, json.dumps(self._next_id))
        self._store.set(PRODUCTS_KEY, payload)

    def _restore(self) -> None:
        try:
            raw_products = self._store.get(PRODUCTS_KEY)
            raw_counter = self._store.get(COUNTER_KEY)
        except PersistenceError as exc:
            logger.warning("Could not read saved inventory, starting empty: %s", exc)
            return
        if raw_products is None:
            return

        try:
            records = json.loads(raw_products, parse_float=Decimal)
            if not isinstance(records, list):
                raise ValueError("expected a list of product records")
            products = [self._to_domain(r) for r in records]
            if len({p.id for p in products}) != len(products):
                raise ValueError("duplicate product ids")
        except (ValueError, TypeError, KeyError, DomainException) as exc:
            logger.warning("Discarding malformed saved inventory: %s", exc)
            return

        floor = max((p.id for p in products), default=0) + 1
        self._products = products
        self._next_id = max(self._parse_counter(raw_counter), floor)
        logger.debug(
            "Restored %d products (next id %d)", len(products), self._next_id
        )

    @staticmethod
    def _parse_counter(raw: str | None) -> int:
        if raw is None:
            return 1
        try:
            value = json.loads(raw)
        except ValueError:
            return 1
        if isinstance(value, bool) or not isinstance(value, int):
            return 1
        return value

    # --- Serialization --------------------------------------------------------

    @classmethod
    def _encode_products(cls, products: list[Product]) -> str:
        """Serialize products to a JSON list, writing prices exactly.

        ``json`` has no way to emit a Decimal as a bare number, so each
        record is assembled from individually encoded fields.
        """
        return "[" + ", ".join(cls._encode_record(p) for p in products) + "]"

    @staticmethod
    def _encode_record(product: Product) -> str:
        fields = (
            ("id", json.dumps(product.id)),
            ("name", json.dumps(product.name)),
            ("category", json.dumps(product.category)),
            ("price", _price_literal(product.price.amount)),
            ("quantity", json.dumps(product.quantity)),
        )
        return "{" + ", ".join(f'"{key}": {value}' for key, value in fields) + "}"

    def _to_domain(self, raw: dict) -> Product:
        product_id = raw["id"]
        if isinstance(product_id, bool) or not isinstance(product_id, int) or product_id < 1:
            raise ValueError(f"invalid product id {product_id!r}")
        if isinstance(raw["price"], (bool, str)):
            raise ValueError(f"invalid price {raw['price']!r}")
        return Product.create(
            product_id,
            raw["name"],
            raw["category"],
            Money.of(raw["price"], self._currency),
            raw["quantity"],
            self._currency,
        )


def _price_literal(amount: Decimal) -> str:
    """JSON number text that reads back as exactly ``amount``.

    Long integral amounts are written in exponent form so they parse as
    Decimal rather than hitting the int conversion digit limit.
    """
    text = str(amount)
    if len(text) > _MAX_INT_DIGITS and text.isdigit():
        text = f"{amount:E}"
    return text
