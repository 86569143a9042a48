from __future__ import annotations

from decimal import Decimal, InvalidOperation

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.monetary_amount import MonetaryAmount
from suite_money.utils.numeric_tools import DecimalLike, as_decimal


class Money(MonetaryAmount):
    """Monetary amount that keeps the exact `Decimal` value it was given.

    The scale of $value is never truncated: `Money.of("10.505", USD).value` is
    `Decimal("10.505")`. Use a rounding policy to reduce it explicitly.

    Supports values between -999_999_999_999_999.999999999999999999 and
    +999_999_999_999_999.999999999999999999
    """

    __slots__ = ("_value", "_currency")

    # Value limits
    MAX_VALUE = Decimal("999_999_999_999_999.999999999999999999")
    MIN_VALUE = Decimal("-999_999_999_999_999.999999999999999999")

    def __init__(self, value: DecimalLike, currency: Currency):
        """Initialize Money with value and currency.

        Args:
            value: Numeric value (Decimal-like scalar).
            currency (Currency): Currency object.

        Raises:
            ValueError: If value is invalid or out of range.
            TypeError: If currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: $value must be convertible to a finite Decimal
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Money` because $value ({value}) cannot be converted to Decimal") from e
        if not decimal_value.is_finite():
            raise ValueError(f"Cannot init `Money` because $value ({value}) is not finite")

        # Raise: value must be within allowed range
        if decimal_value > self.MAX_VALUE:
            raise ValueError(f"$value exceeds maximum allowed value {self.MAX_VALUE}, but provided value is: {decimal_value}")
        if decimal_value < self.MIN_VALUE:
            raise ValueError(f"$value is below minimum allowed value {self.MIN_VALUE}, but provided value is: {decimal_value}")

        self._value = decimal_value
        self._currency = currency

    @classmethod
    def of(cls, value: DecimalLike, currency: Currency) -> Money:
        return cls(value, currency)

    @classmethod
    def format_style(cls):
        from suite_money.format.to_string_format import FormatStyle

        return FormatStyle.MONEY

    @property
    def value(self) -> Decimal:
        return self._value

    @property
    def currency(self) -> Currency:
        return self._currency
