from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Callable, TypeVar

from suite_money.domain.monetary.currency import Currency
from suite_money.utils.numeric_tools import DecimalLike, as_decimal

if TYPE_CHECKING:
    from suite_money.format.to_string_format import FormatStyle

A = TypeVar("A", bound="MonetaryAmount")


class MonetaryAmount(ABC):
    """Immutable amount of money: a `Decimal` value in a `Currency`.

    Concrete variants (`Money`, `FastMoney`, `RoundedMoney`) differ only in how
    they store the value. Arithmetic returns a new instance of the same variant
    as the left operand.

    Two amounts are equal when their currencies are equal and their values are
    numerically equal, regardless of scale ('10.5 USD' == '10.50 USD') and of
    variant.
    """

    __slots__ = ()

    # region Construction

    @classmethod
    @abstractmethod
    def of(cls: type[A], value: DecimalLike, currency: Currency) -> A:
        """Create an amount of $value in $currency."""
        ...

    @classmethod
    def of_zero(cls: type[A], currency: Currency) -> A:
        return cls.of(Decimal(0), currency)

    @classmethod
    def from_amount(cls: type[A], amount: MonetaryAmount) -> A:
        """Convert any other variant into this one, keeping value and currency."""
        if not isinstance(amount, MonetaryAmount):
            raise TypeError(f"$amount must be a MonetaryAmount instance, but provided value is: {amount}")
        return cls.of(amount.value, amount.currency)

    @classmethod
    def from_str(cls: type[A], text: str) -> A:
        """Parse text like '25.25 EUR' or 'EUR 25.25' into this variant.

        Raises:
            MonetaryParseError: If $text cannot be parsed.
        """
        from suite_money.format.to_string_format import ToStringAmountFormat

        return ToStringAmountFormat.of(cls.format_style()).parse(text)

    @classmethod
    @abstractmethod
    def format_style(cls) -> FormatStyle:
        """Return the text format style that constructs this variant."""
        ...

    def with_value(self: A, value: DecimalLike) -> A:
        """Return an amount of the same variant and currency holding $value."""
        return self.of(value, self.currency)

    # endregion

    # region Properties

    @property
    @abstractmethod
    def value(self) -> Decimal:
        ...

    @property
    @abstractmethod
    def currency(self) -> Currency:
        ...

    def is_zero(self) -> bool:
        return self.value.is_zero()

    def is_positive(self) -> bool:
        return self.value > 0

    def is_negative(self) -> bool:
        return self.value < 0

    def signum(self) -> int:
        if self.value > 0:
            return 1
        if self.value < 0:
            return -1
        return 0

    # endregion

    # region Operators

    def apply(self, operator: Callable[[MonetaryAmount], MonetaryAmount]) -> MonetaryAmount:
        """Apply $operator (for example a rounding policy) and return its result."""
        return operator(self)

    def _check_same_currency(self, other: MonetaryAmount) -> None:
        if self.currency != other.currency:
            raise ValueError(f"Cannot operate on different currencies: {self.currency} and {other.currency}")

    def _as_operand(self, other) -> Decimal | None:
        """Convert a numeric right operand to Decimal, or None when unsupported."""
        if isinstance(other, (MonetaryAmount, bool)):
            return None
        try:
            return as_decimal(other)
        except (ValueError, TypeError, InvalidOperation):
            return None

    def __eq__(self, other) -> bool:
        if not isinstance(other, MonetaryAmount):
            return False
        return self.currency == other.currency and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.value, self.currency.code))

    def __lt__(self, other) -> bool:
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        self._check_same_currency(other)
        return self.value < other.value

    def __le__(self, other) -> bool:
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        self._check_same_currency(other)
        return self.value <= other.value

    def __gt__(self, other) -> bool:
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        self._check_same_currency(other)
        return self.value > other.value

    def __ge__(self, other) -> bool:
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        self._check_same_currency(other)
        return self.value >= other.value

    def __add__(self, other):
        """Add another amount in the same currency."""
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        self._check_same_currency(other)
        return self.with_value(self.value + other.value)

    def __sub__(self, other):
        """Subtract another amount in the same currency."""
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        self._check_same_currency(other)
        return self.with_value(self.value - other.value)

    def __mul__(self, other):
        """Multiply by a number (amount * amount is not supported)."""
        factor = self._as_operand(other)
        if factor is None:
            return NotImplemented
        return self.with_value(self.value * factor)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide by a number, or by an amount in the same currency (returns Decimal)."""
        if isinstance(other, MonetaryAmount):
            self._check_same_currency(other)
            if other.is_zero():
                raise ZeroDivisionError("Cannot divide by zero amount")
            return self.value / other.value

        divisor = self._as_operand(other)
        if divisor is None:
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide amount by zero")
        return self.with_value(self.value / divisor)

    def __neg__(self):
        return self.with_value(-self.value)

    def __pos__(self):
        return self.with_value(self.value)

    def __abs__(self):
        return self.with_value(abs(self.value))

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return text like '1000.50 USD' using the process default format order."""
        from suite_money.format.to_string_format import ToStringAmountFormat

        return ToStringAmountFormat.of(self.format_style()).format(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value}, {self.currency.code})"

    # endregion
