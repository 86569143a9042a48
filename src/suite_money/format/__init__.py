"""Canonical text format of monetary amounts."""

from suite_money.format.errors import MalformedTextError, MonetaryParseError, UnresolvableAmountError
from suite_money.format.format_order import FormatOrder
from suite_money.format.to_string_format import FormatStyle, ToStringAmountFormat

__all__ = [
    "FormatOrder",
    "FormatStyle",
    "ToStringAmountFormat",
    "MonetaryParseError",
    "MalformedTextError",
    "UnresolvableAmountError",
]
