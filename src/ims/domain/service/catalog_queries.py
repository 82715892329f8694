"""Domain service: catalog queries.

Search, sort and summary over a sequence of products. None of these
functions mutate their input; each returns a new list or value so the
repository can hand results to callers without exposing its own state.
"""

from __future__ import annotations

import locale
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import DEFAULT_CURRENCY, Money


class SortKey(Enum):
    NONE = "none"
    NAME = "name"
    CATEGORY = "category"
    PRICE = "price"
    QUANTITY = "quantity"

    @classmethod
    def parse(cls, value: SortKey | str) -> SortKey:
        if isinstance(value, SortKey):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise ValidationError(
                f"Unknown sort key {value!r} (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class InventorySummary:
    """Dashboard metrics for the whole catalog."""

    total_count: int
    total_value: Money
    low_stock_count: int


def _text_key(value: str) -> tuple[str, str]:
    """Collation key: accent-insensitive first, then the accented form.

    ``locale.strxfrm`` follows LC_COLLATE, which the CLI sets from the
    environment; folding accents keeps "Éclair" next to "eclair" even
    under the C locale.
    """
    folded = value.casefold()
    base = "".join(
        ch for ch in unicodedata.normalize("NFKD", folded)
        if not unicodedata.combining(ch)
    )
    return locale.strxfrm(base), locale.strxfrm(folded)


_SORT_KEYS = {
    SortKey.NAME: lambda p: _text_key(p.name),
    SortKey.CATEGORY: lambda p: _text_key(p.category),
    SortKey.PRICE: lambda p: p.price.amount,
    SortKey.QUANTITY: lambda p: p.quantity,
}


def search_products(products: Iterable[Product], term: str) -> list[Product]:
    """Case-insensitive substring match on name or category.

    A blank term matches every product.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(products)
    return [
        p
        for p in products
        if needle in p.name.lower() or needle in p.category.lower()
    ]


def sort_products(products: Iterable[Product], key: SortKey | str) -> list[Product]:
    """Return products ordered by ``key``, ascending.

    Products are first put in id order, and the sort is stable, so equal
    keys always come out in creation order.
    """
    key = SortKey.parse(key)
    by_id = sorted(products, key=lambda p: p.id)
    if key is SortKey.NONE:
        return by_id
    return sorted(by_id, key=_SORT_KEYS[key])


def summarize(products: Iterable[Product], currency: str = DEFAULT_CURRENCY) -> InventorySummary:
    total_count = 0
    total_value = Money.zero(currency)
    low_stock_count = 0
    for p in products:
        total_count += 1
        total_value = total_value + p.stock_value
        if p.is_low_stock:
            low_stock_count += 1
    return InventorySummary(
        total_count=total_count,
        total_value=total_value,
        low_stock_count=low_stock_count,
    )
