"""Monetary domain package.

This package contains currencies and the monetary amount variants (`Money`,
`FastMoney`, `RoundedMoney`). Importing it registers the predefined currencies
so that they can be resolved by code.
"""

from suite_money.domain.monetary import currency_registry  # noqa: F401
