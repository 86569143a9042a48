__version__ = "0.0.1"

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.fast_money import FastMoney
from suite_money.domain.monetary.rounded_money import RoundedMoney
from suite_money.format.to_string_format import FormatStyle, ToStringAmountFormat
from suite_money.rounding.rounding_registry import RoundingRegistry

__all__ = ["Currency", "Money", "FastMoney", "RoundedMoney", "FormatStyle", "ToStringAmountFormat", "RoundingRegistry"]
