"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidFactorError,
    NegativeQuantityError,
    NegativeResultError,
)

DEFAULT_CURRENCY = "USD"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Money:
    """Monetary amount in minor units (cents) with a currency code.

    Integer cents keep arithmetic exact: there is no rounding anywhere.
    """

    amount: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not _is_int(self.amount):
            raise InvalidAmountError(
                f"Money amount must be an integer number of cents, "
                f"got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise InvalidAmountError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise InvalidCurrencyError("Currency cannot be empty")

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(amount: int, currency: str) -> Money:
        return Money(amount, currency)

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(0, currency)

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot add {other.currency} to {self.currency}"
            )
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: int) -> Money:
        if not _is_int(factor):
            raise InvalidFactorError(
                f"Can only multiply Money by int, got {type(factor).__name__}"
            )
        if factor < 0:
            raise InvalidFactorError(f"Multiplier cannot be negative, got {factor}")
        return Money(self.amount * factor, self.currency)

    def equals(self, other: Money) -> bool:
        return self == other

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __mul__(self, factor: int) -> Money:
        return self.multiply(factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.currency} {self.amount // 100}.{self.amount % 100:02d}"


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer count of units."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            raise NegativeQuantityError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise NegativeQuantityError(
                f"Quantity cannot be negative, got {self.value}"
            )

    @staticmethod
    def create(value: int) -> Quantity:
        return Quantity(value)

    def add(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def subtract(self, other: Quantity) -> Quantity:
        result = self.value - other.value
        if result < 0:
            raise NegativeResultError(
                f"Cannot subtract {other.value} from {self.value}"
            )
        return Quantity(result)

    def is_zero(self) -> bool:
        return self.value == 0

    def __add__(self, other: Quantity) -> Quantity:
        return self.add(other)

    def __sub__(self, other: Quantity) -> Quantity:
        return self.subtract(other)

    def __str__(self) -> str:
        return str(self.value)
