"""Product entity.

A product is one row of the inventory table: what it is, which category
it belongs to, what one unit costs and how many units are on hand.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import DEFAULT_CURRENCY, Money

# Products at or below this quantity count as low stock on the dashboard.
LOW_STOCK_THRESHOLD = 3


@dataclass
class Product:
    """A product in the inventory.

    ``id`` is issued by the repository and never changes. Use
    ``Product.create()`` for anything coming from user input; the plain
    ``__init__`` trusts its arguments.
    """

    id: int
    name: str
    category: str
    price: Money
    quantity: int

    @property
    def stock_value(self) -> Money:
        return self.price * self.quantity

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= LOW_STOCK_THRESHOLD

    @classmethod
    def create(
        cls,
        product_id: int,
        name: str,
        category: str,
        price: str | float | int | Decimal | Money,
        quantity: int | str,
        currency: str = DEFAULT_CURRENCY,
    ) -> Product:
        """Build a product from raw input, enforcing every field rule."""
        name, category, money, qty = validate_fields(name, category, price, quantity, currency)
        return cls(id=product_id, name=name, category=category, price=money, quantity=qty)

    def update_details(
        self,
        name: str,
        category: str,
        price: str | float | int | Decimal | Money,
        quantity: int | str,
    ) -> None:
        """Replace every editable field.

        Validation runs before any assignment so a rejected edit leaves
        the product untouched.
        """
        name, category, money, qty = validate_fields(
            name, category, price, quantity, self.price.currency
        )
        self.name = name
        self.category = category
        self.price = money
        self.quantity = qty


def validate_fields(
    name: str,
    category: str,
    price: str | float | int | Decimal | Money,
    quantity: int | str,
    currency: str = DEFAULT_CURRENCY,
) -> tuple[str, str, Money, int]:
    """Return normalized (name, category, price, quantity) or raise ValidationError."""
    name = _required_text(name, "Product name")
    category = _required_text(category, "Category")
    money = price if isinstance(price, Money) else Money.of(price, currency)
    return name, category, money, _stock_quantity(quantity)


def _required_text(value: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _stock_quantity(value: int | str) -> int:
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError as exc:
            raise ValidationError(f"Quantity must be a whole number, got {value!r}") from exc
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"Quantity must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"Quantity cannot be negative, got {value}")
    return value
