from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Callable, NamedTuple, TextIO

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.fast_money import FastMoney
from suite_money.domain.monetary.monetary_amount import MonetaryAmount
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounded_money import RoundedMoney
from suite_money.format.errors import MalformedTextError, MonetaryParseError, UnresolvableAmountError
from suite_money.format.format_order import FormatOrder
from suite_money.rounding.rounding_policy import round_to_scale
from suite_money.utils.config import TO_STRING_FORMAT_ORDER_KEY, ConfigProvider, default_config
from suite_money.utils.numeric_tools import parse_decimal_literal

logger = logging.getLogger(__name__)

AmountFactory = Callable[[Decimal, Currency], MonetaryAmount]


class FormatStyle(Enum):
    """Selects which amount variant `ToStringAmountFormat.parse` constructs.

    Formatting and parsing are identical for all styles.
    """

    MONEY = "MONEY"
    FAST_MONEY = "FAST_MONEY"
    ROUNDED_MONEY = "ROUNDED_MONEY"

    def create(self, number: Decimal, currency: Currency) -> MonetaryAmount:
        """Construct the amount variant of this style."""
        return _FACTORY_BY_STYLE[self](number, currency)


_FACTORY_BY_STYLE: dict[FormatStyle, AmountFactory] = {
    FormatStyle.MONEY: Money.of,
    FormatStyle.FAST_MONEY: FastMoney.of,
    FormatStyle.ROUNDED_MONEY: RoundedMoney.of,
}


class ParsedAmount(NamedTuple):
    """Currency and number read from text, before a variant is constructed."""

    currency: Currency
    number: Decimal


def format_display_number(value: Decimal) -> str:
    """Render $value with exactly 2 fraction digits in plain notation.

    Ties round away from zero: 10.505 -> '10.51', -10.505 -> '-10.51'.
    """
    rounded = round_to_scale(value, ToStringAmountFormat.DISPLAY_SCALE, ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return f"{rounded:f}"


def read_amount_pair(amount_token: str, currency_token: str) -> ParsedAmount:
    """Read one token order.

    Raises:
        ValueError: If $currency_token is not a registered code or $amount_token
            is not a decimal literal.
    """
    # Raise: the code must be the whole token, without any whitespace
    if not currency_token or any(char.isspace() for char in currency_token):
        raise ValueError(f"$currency_token ('{currency_token}') is not a currency code")

    currency = Currency.from_str(currency_token)
    number = parse_decimal_literal(amount_token)
    return ParsedAmount(currency, number)


class ToStringAmountFormat:
    """Formats amounts as text like '100232.12 CHF' and parses such text back.

    The amount is rendered rounded to 2 fraction digits (half-up, '.' as the
    decimal mark, no grouping) and joined with the currency code by one space.
    The order comes from the `toStringFormatOrder` configuration value, read on
    every call:

    - 'ca', 'c-a', 'c a', 'currency-amount', 'currency amount' -> 'CHF 100232.12'
    - anything else, or unset -> '100232.12 CHF'

    Parsing accepts both orders regardless of configuration, so text produced
    under either order parses back to the same amount. The amount-first reading
    is tried before the currency-first one.

    Args:
        style: Amount variant constructed by `parse`.
        config: Configuration source. Defaults to the process-wide configuration.
    """

    __slots__ = ("_style", "_config")

    CONTEXT_PREFIX = "ToString_"
    DISPLAY_SCALE = 2
    SEPARATOR = " "
    NULL_TEXT = "null"

    def __init__(self, style: FormatStyle = FormatStyle.MONEY, config: ConfigProvider | None = None) -> None:
        # Raise: style must be a FormatStyle
        if not isinstance(style, FormatStyle):
            raise TypeError(f"$style must be a FormatStyle instance, but provided value is: {style}")

        self._style = style
        self._config = config

    @classmethod
    def of(cls, style: FormatStyle = FormatStyle.MONEY, config: ConfigProvider | None = None) -> ToStringAmountFormat:
        """Return the shared format for $style, or a new one bound to $config."""
        if config is not None:
            return cls(style, config)
        return _SHARED_FORMATS[style]

    # region Properties

    @property
    def style(self) -> FormatStyle:
        return self._style

    @property
    def context_name(self) -> str:
        return f"{self.CONTEXT_PREFIX}{self._style.name}"

    @property
    def config(self) -> ConfigProvider:
        return self._config if self._config is not None else default_config()

    def format_order(self) -> FormatOrder:
        """Read the currently configured order."""
        return FormatOrder.from_config_value(self.config.lookup(TO_STRING_FORMAT_ORDER_KEY))

    # endregion

    # region Format

    def format(self, amount: MonetaryAmount | None) -> str:
        """Return the text for $amount, or 'null' when $amount is None."""
        if amount is None:
            return self.NULL_TEXT

        # Raise: only monetary amounts can be formatted
        if not isinstance(amount, MonetaryAmount):
            raise TypeError(f"$amount must be a MonetaryAmount instance, but provided value is: {amount}")

        number = format_display_number(amount.value)
        code = amount.currency.code

        if self.format_order() is FormatOrder.CURRENCY_AMOUNT:
            return f"{code}{self.SEPARATOR}{number}"
        return f"{number}{self.SEPARATOR}{code}"

    def print(self, stream: TextIO, amount: MonetaryAmount | None) -> None:
        """Write the text for $amount to $stream."""
        stream.write(self.format(amount))

    # endregion

    # region Parse

    def parse(self, text: str) -> MonetaryAmount:
        """Parse $text like '25.25 EUR' or 'EUR 25.25'.

        Args:
            text: Exactly two tokens separated by a single space.

        Returns:
            MonetaryAmount: Amount of the variant selected by this format's style.

        Raises:
            TypeError: If $text is not a string.
            MalformedTextError: If $text does not split into exactly two tokens.
            UnresolvableAmountError: If neither token order gives a decimal and a known currency.
            MonetaryParseError: If the variant rejects the parsed value.
        """
        if not isinstance(text, str):
            raise TypeError(f"$text must be a string, but provided value is: {text}")

        parsed = self._parse_pair(text)

        try:
            return self._style.create(parsed.number, parsed.currency)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise MonetaryParseError(f"Cannot parse $text ('{text}') into {self._style.name}: {e}", text) from e

    def _parse_pair(self, text: str) -> ParsedAmount:
        tokens = text.split(self.SEPARATOR)

        # Raise: exactly two tokens are required
        if len(tokens) != 2:
            raise MalformedTextError(f"Cannot parse $text ('{text}') because it must consist of exactly 2 space separated tokens, but has {len(tokens)}", text)

        first, second = tokens
        try:
            parsed = read_amount_pair(amount_token=first, currency_token=second)
            logger.debug(f"Parsed $text '{text}' as amount followed by currency")
            return parsed
        except ValueError:
            pass

        try:
            parsed = read_amount_pair(amount_token=second, currency_token=first)
        except ValueError as e:
            raise UnresolvableAmountError(f"Cannot parse $text ('{text}') because no token order gives a decimal amount and a known currency code: {e}", text) from e

        logger.debug(f"Parsed $text '{text}' as currency followed by amount")
        return parsed

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._style.name})"


_SHARED_FORMATS: dict[FormatStyle, ToStringAmountFormat] = {style: ToStringAmountFormat(style) for style in FormatStyle}
