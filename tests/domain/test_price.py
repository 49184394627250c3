"""Unit tests for the Price value object."""

from decimal import Decimal

import pytest

from orderitems.domain.exceptions import ValidationError
from orderitems.domain.model.value_objects import Price


class TestPrice:

    def test_creation(self):
        p = Price(Decimal("10.50"))
        assert p.amount == Decimal("10.50")
        assert p.currency == "EUR"

    def test_create_factory_from_string(self):
        assert Price.create("25.99").amount == Decimal("25.99")

    def test_create_factory_from_float_keeps_written_digits(self):
        assert Price.create(9.99).amount == Decimal("9.99")

    def test_create_factory_with_currency(self):
        assert Price.create("3", "USD").currency == "USD"

    def test_create_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid price amount"):
            Price.create("ten euro")

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Price(10)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Price(Decimal("-1"))

    def test_infinite_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Price.create("Infinity")

    def test_nan_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Price(Decimal("NaN"))

    def test_nan_via_factory_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Price.create("NaN")

    def test_empty_currency_rejected(self):
        with pytest.raises(ValidationError, match="currency is required"):
            Price(Decimal("1"), "")

    def test_multiplication_is_exact(self):
        assert Price.create("9.99") * 3 == Price.create("29.97")

    def test_multiplication_by_zero(self):
        assert (Price.create("9.99") * 0).amount == Decimal("0")

    def test_multiplication_keeps_currency(self):
        assert (Price.create("2", "USD") * 2).currency == "USD"

    def test_multiplication_by_non_int_rejected(self):
        with pytest.raises(TypeError, match="multiply Price by int"):
            Price.create("1") * 1.5

    def test_multiplication_by_bool_rejected(self):
        with pytest.raises(TypeError):
            Price.create("1") * True

    def test_addition(self):
        assert Price.create("10") + Price.create("5.50") == Price.create("15.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Price.create("10", "EUR") + Price.create("5", "USD")

    def test_str_formatting(self):
        assert str(Price.create("15")) == "15.00 EUR"
        assert str(Price.create("9.5", "USD")) == "9.50 USD"
