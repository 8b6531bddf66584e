"""Unit tests for domain value objects."""

import pytest

from shop.domain.exceptions import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidFactorError,
    NegativeQuantityError,
    NegativeResultError,
)
from shop.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money.create(1050, "USD")
        assert m.amount == 1050
        assert m.currency == "USD"

    def test_zero_amount_allowed(self):
        assert Money(0, "USD").amount == 0

    def test_default_currency_is_usd(self):
        assert Money(10).currency == "USD"
        assert Money.zero() == Money(0, "USD")

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidAmountError, match="cannot be negative"):
            Money(-100, "USD")

    def test_non_integer_amount_rejected(self):
        with pytest.raises(InvalidAmountError, match="integer"):
            Money(10.5, "USD")  # type: ignore[arg-type]

    def test_bool_amount_rejected(self):
        with pytest.raises(InvalidAmountError):
            Money(True, "USD")  # type: ignore[arg-type]

    @pytest.mark.parametrize("currency", ["", "   "])
    def test_empty_currency_rejected(self, currency):
        with pytest.raises(InvalidCurrencyError):
            Money(1000, currency)

    def test_addition(self):
        assert Money(1000, "USD").add(Money(500, "USD")) == Money(1500, "USD")
        assert Money(1000, "USD") + Money(1, "USD") == Money(1001, "USD")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(CurrencyMismatchError):
            Money(100, "USD").add(Money(100, "EUR"))

    def test_multiplication_by_int(self):
        assert Money(1000, "USD").multiply(3) == Money(3000, "USD")
        assert Money(250, "EUR") * 4 == Money(1000, "EUR")

    def test_multiplication_by_zero(self):
        assert Money(999, "USD") * 0 == Money(0, "USD")

    def test_multiply_by_negative_rejected(self):
        with pytest.raises(InvalidFactorError, match="negative"):
            Money(1000, "USD").multiply(-1)

    def test_multiply_by_float_rejected(self):
        with pytest.raises(InvalidFactorError):
            Money(1000, "USD").multiply(1.5)  # type: ignore[arg-type]

    def test_equals(self):
        assert Money(1000, "USD").equals(Money(1000, "USD"))
        assert not Money(1000, "USD").equals(Money(500, "USD"))
        assert not Money(1000, "USD").equals(Money(1000, "EUR"))

    def test_operations_return_new_values(self):
        m = Money(100, "USD")
        m + Money(50, "USD")
        m * 3
        assert m == Money(100, "USD")

    @pytest.mark.parametrize(
        "amount, currency, expected",
        [
            (1050, "USD", "USD 10.50"),
            (5, "EUR", "EUR 0.05"),
            (0, "USD", "USD 0.00"),
            (123400, "GBP", "GBP 1234.00"),
        ],
    )
    def test_str_formatting(self, amount, currency, expected):
        assert str(Money(amount, currency)) == expected


_AMOUNTS = [0, 1, 99, 1000, 123456]


class TestMoneyProperties:

    @pytest.mark.parametrize("a", _AMOUNTS)
    @pytest.mark.parametrize("b", _AMOUNTS)
    def test_add_is_commutative(self, a, b):
        assert Money(a, "USD") + Money(b, "USD") == Money(b, "USD") + Money(a, "USD")

    @pytest.mark.parametrize("a, b, c", [(0, 1, 2), (99, 1000, 5), (123456, 7, 0)])
    def test_add_is_associative(self, a, b, c):
        x, y, z = Money(a, "EUR"), Money(b, "EUR"), Money(c, "EUR")
        assert (x + y) + z == x + (y + z)

    @pytest.mark.parametrize("a", _AMOUNTS)
    @pytest.mark.parametrize("pair", [("USD", "EUR"), ("EUR", "GBP"), ("JPY", "USD")])
    def test_add_fails_for_differing_currencies(self, a, pair):
        left, right = pair
        with pytest.raises(CurrencyMismatchError):
            Money(a, left) + Money(a, right)

    @pytest.mark.parametrize("amount", [0, 1, 1999])
    @pytest.mark.parametrize("n", [0, 1, 2, 7])
    def test_multiply_equals_repeated_addition(self, amount, n):
        m = Money(amount, "USD")
        expected = Money.zero("USD")
        for _ in range(n):
            expected = expected + m
        assert m * n == expected

    @pytest.mark.parametrize("n", [-1, -2, -100])
    def test_multiply_by_negative_always_fails(self, n):
        with pytest.raises(InvalidFactorError):
            Money(500, "USD") * n


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity.create(5).value == 5

    def test_zero_allowed(self):
        assert Quantity(0).is_zero()

    def test_negative_rejected(self):
        with pytest.raises(NegativeQuantityError, match="cannot be negative"):
            Quantity(-3)

    def test_add(self):
        assert Quantity(2).add(Quantity(3)) == Quantity(5)
        assert Quantity(2) + Quantity(0) == Quantity(2)

    def test_subtract(self):
        assert Quantity(5).subtract(Quantity(2)) == Quantity(3)
        assert Quantity(5) - Quantity(5) == Quantity(0)

    @pytest.mark.parametrize("start, taken", [(0, 1), (3, 4), (10, 100)])
    def test_subtract_never_goes_negative(self, start, taken):
        with pytest.raises(NegativeResultError):
            Quantity(start) - Quantity(taken)

    def test_is_zero(self):
        assert not Quantity(1).is_zero()

    def test_str(self):
        assert str(Quantity(7)) == "7"
