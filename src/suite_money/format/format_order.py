from __future__ import annotations

from enum import Enum


class FormatOrder(Enum):
    """Order of the amount and the currency code in formatted text."""

    AMOUNT_CURRENCY = "AMOUNT_CURRENCY"
    CURRENCY_AMOUNT = "CURRENCY_AMOUNT"

    @classmethod
    def from_config_value(cls, value: str | None) -> FormatOrder:
        """Resolve the order from a configuration value (case-sensitive).

        'ca', 'c-a', 'c a', 'currency-amount' and 'currency amount' select
        CURRENCY_AMOUNT. Anything else, including None, selects AMOUNT_CURRENCY.
        """
        if value in _CURRENCY_FIRST_VALUES:
            return cls.CURRENCY_AMOUNT
        return cls.AMOUNT_CURRENCY


_CURRENCY_FIRST_VALUES = frozenset({"ca", "c-a", "c a", "currency-amount", "currency amount"})
