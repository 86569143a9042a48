from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.monetary_amount import MonetaryAmount
from suite_money.utils.numeric_tools import DecimalLike, as_decimal


class FastMoney(MonetaryAmount):
    """Monetary amount stored as an integer number of 10^-5 units.

    Values are limited to 5 fraction digits and to the signed 64-bit range of
    units. A value that would need more fraction digits is rejected instead of
    being truncated. Division is the only operation that rounds its result
    (half-even, to 5 digits).
    """

    __slots__ = ("_units", "_currency")

    SCALE = 5
    _QUANTUM = Decimal(1).scaleb(-SCALE)

    MAX_UNITS = 2**63 - 1
    MIN_UNITS = -(2**63)
    MAX_VALUE = Decimal(MAX_UNITS).scaleb(-SCALE)
    MIN_VALUE = Decimal(MIN_UNITS).scaleb(-SCALE)

    def __init__(self, value: DecimalLike, currency: Currency):
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: $value must be convertible to a finite Decimal
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `FastMoney` because $value ({value}) cannot be converted to Decimal") from e
        if not decimal_value.is_finite():
            raise ValueError(f"Cannot init `FastMoney` because $value ({value}) is not finite")

        # Raise: value must fit into 64-bit units
        if not (self.MIN_VALUE <= decimal_value <= self.MAX_VALUE):
            raise ValueError(f"Cannot init `FastMoney` because $value ({decimal_value}) is outside [{self.MIN_VALUE}, {self.MAX_VALUE}]")

        # Raise: value must not need more than SCALE fraction digits
        quantized = decimal_value.quantize(self._QUANTUM)
        if quantized != decimal_value:
            raise ValueError(f"Cannot init `FastMoney` because $value ({decimal_value}) has more than {self.SCALE} fraction digits")

        self._units = int(quantized.scaleb(self.SCALE))
        self._currency = currency

    @classmethod
    def of(cls, value: DecimalLike, currency: Currency) -> FastMoney:
        return cls(value, currency)

    @classmethod
    def format_style(cls):
        from suite_money.format.to_string_format import FormatStyle

        return FormatStyle.FAST_MONEY

    @property
    def units(self) -> int:
        """Raw value in 10^-5 units."""
        return self._units

    @property
    def value(self) -> Decimal:
        return Decimal(self._units).scaleb(-self.SCALE)

    @property
    def currency(self) -> Currency:
        return self._currency

    def __truediv__(self, other):
        if isinstance(other, MonetaryAmount):
            return super().__truediv__(other)

        divisor = self._as_operand(other)
        if divisor is None:
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide amount by zero")
        return self.with_value((self.value / divisor).quantize(self._QUANTUM, rounding=ROUND_HALF_EVEN))
