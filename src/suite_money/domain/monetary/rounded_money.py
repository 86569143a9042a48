from __future__ import annotations

from decimal import Decimal

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.monetary_amount import MonetaryAmount, A
from suite_money.domain.monetary.money import Money
from suite_money.rounding.rounding_policy import AmountOperator, minor_rounding
from suite_money.utils.numeric_tools import DecimalLike


class RoundedMoney(MonetaryAmount):
    """Monetary amount that applies a rounding whenever a value is created.

    The rounding runs on construction and on every arithmetic result. Without an
    explicit $rounding the currency's minor unit is used (e.g. 2 digits for CHF,
    0 for JPY) with half-up ties.

    Args:
        value: Numeric value (Decimal-like scalar).
        currency: Currency object.
        rounding: Optional operator applied to every value, e.g. a cash rounding.
    """

    __slots__ = ("_money", "_rounding")

    def __init__(self, value: DecimalLike, currency: Currency, rounding: AmountOperator | None = None):
        exact = Money(value, currency)
        if rounding is None:
            rounding = minor_rounding(currency.precision)

        rounded = rounding(exact)

        self._money = Money.from_amount(rounded)
        self._rounding = rounding

    @classmethod
    def of(cls, value: DecimalLike, currency: Currency, rounding: AmountOperator | None = None) -> RoundedMoney:
        return cls(value, currency, rounding)

    @classmethod
    def format_style(cls):
        from suite_money.format.to_string_format import FormatStyle

        return FormatStyle.ROUNDED_MONEY

    def with_value(self: A, value: DecimalLike) -> A:
        return RoundedMoney(value, self.currency, self._rounding)

    @property
    def rounding(self) -> AmountOperator:
        return self._rounding

    @property
    def value(self) -> Decimal:
        return self._money.value

    @property
    def currency(self) -> Currency:
        return self._money.currency
