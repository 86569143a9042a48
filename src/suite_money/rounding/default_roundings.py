from __future__ import annotations

from datetime import datetime

from suite_money.rounding.cash_rounding import cash_rounding_policy
from suite_money.rounding.rounding_policy import RoundingKind, constant_rounding, zero_rounding
from suite_money.rounding.rounding_registry import RoundingRegistry, RoundingRegistryEntry, custom_policies_by_id
from suite_money.utils.datetime_tools import require_utc, utc_now

# Identifiers of the predefined custom roundings
ZERO_ROUNDING_ID = "zero"
MINUS_ONE_ROUNDING_ID = "minusOne"
CHF_CASH_ROUNDING_ID = "CHF-cash"


def create_default_rounding_registry(cutover: datetime | None = None) -> RoundingRegistry:
    """Create the reference rounding tables.

    - standard: XXX rounds to zero; after $cutover XXX rounds to -1.
    - cash: CHF rounds to 0.05 coins; after $cutover CHF rounds to -1. XXX rounds to zero.
    - custom: 'zero', 'minusOne' and 'CHF-cash'.

    Args:
        cutover: Instant after which the overrides apply. Defaults to now, so any
            future timestamp hits the overrides.

    Returns:
        RoundingRegistry: The populated registry.
    """
    if cutover is None:
        cutover = utc_now()
    require_utc(cutover)

    chf_cash = cash_rounding_policy()
    minus_one = constant_rounding(-1, name="minusOne")
    zero = zero_rounding()

    standard_entries = [
        RoundingRegistryEntry("XXX", zero, ((cutover, minus_one),)),
    ]
    cash_entries = [
        RoundingRegistryEntry("CHF", chf_cash, ((cutover, minus_one.retag(RoundingKind.CASH)),)),
        RoundingRegistryEntry("XXX", zero.retag(RoundingKind.CASH)),
    ]
    custom_policies = custom_policies_by_id(
        [
            zero.retag(RoundingKind.CUSTOM, ZERO_ROUNDING_ID),
            minus_one.retag(RoundingKind.CUSTOM, MINUS_ONE_ROUNDING_ID),
            chf_cash.retag(RoundingKind.CUSTOM, CHF_CASH_ROUNDING_ID),
        ]
    )

    return RoundingRegistry(standard_entries, cash_entries, custom_policies)
