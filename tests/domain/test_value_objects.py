"""Unit tests for Money, Quantity and EmailAddress value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import EmailAddress, Money, Quantity


class TestMoney:

    def test_of_parses_strings(self):
        assert Money.of("15.00").amount == Decimal("15.00")

    def test_zero_is_allowed(self):
        assert Money.of("0").amount == Decimal("0")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-1.00")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")

    def test_float_is_not_a_decimal(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)  # type: ignore[arg-type]

    def test_addition_is_exact(self):
        total = Money.of("0.10") + Money.of("0.20")
        assert total == Money.of("0.30")

    def test_multiply_by_int(self):
        assert Money.of("2.50") * 3 == Money.of("7.50")

    def test_multiply_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("2.50") * 1.5  # type: ignore[operator]

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("1"), "USD") + Money(Decimal("1"), "EUR")

    def test_str_formats_two_decimals(self):
        assert str(Money.of("7")) == "$7.00"

    def test_cents_precision(self):
        assert Money.of("9.99").has_cents_precision
        assert not Money.of("9.999").has_cents_precision

    def test_cents_precision_of_huge_amount_is_false(self):
        assert not Money.of("1e30").has_cents_precision


class TestQuantity:

    def test_positive_accepted(self):
        assert Quantity(3).value == 3

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)


class TestEmailAddress:

    def test_valid_address(self):
        assert str(EmailAddress.of("  ada@example.com ")) == "ada@example.com"

    def test_missing_address(self):
        with pytest.raises(ValidationError, match="email is required"):
            EmailAddress.of("   ")

    @pytest.mark.parametrize("raw", ["ada", "ada@", "@example.com", "ada @example.com", "ada@example"])
    def test_malformed_address(self, raw):
        with pytest.raises(ValidationError, match="Invalid email"):
            EmailAddress.of(raw)
