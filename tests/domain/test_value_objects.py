"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "MWK"

    def test_of_factory_from_string(self):
        m = Money.of(" 25.99 ")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")

    def test_of_factory_from_float(self):
        assert Money.of(19.99).amount == Decimal("19.99")

    def test_zero_is_allowed(self):
        assert Money.of("0").amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")

    def test_infinity_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of(float("inf"))

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            Money.of(True)

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_multiplication_by_int(self):
        result = Money.of("2500") * 5
        assert result == Money.of("12500")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "MWK") + Money(Decimal("5"), "USD")

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


class TestMoneyDisplay:

    def test_whole_amount_has_no_decimals(self):
        assert str(Money.of("2500")) == "MWK 2,500"

    def test_two_decimals_kept(self):
        assert str(Money.of("19.99")) == "MWK 19.99"

    def test_trailing_zero_dropped(self):
        assert str(Money.of("9.50")) == "MWK 9.5"

    def test_rounds_to_two_decimals(self):
        assert str(Money.of("1234567.891")) == "MWK 1,234,567.89"

    def test_custom_currency(self):
        assert str(Money.of("15", "USD")) == "USD 15"

    def test_half_cent_rounds_up(self):
        assert str(Money.of("0.125")) == "MWK 0.13"
        assert str(Money.of("2.675")) == "MWK 2.68"

    def test_large_amount_shown_in_full(self):
        assert str(Money.of("1e30")) == "MWK 1," + ",".join(["000"] * 10)
