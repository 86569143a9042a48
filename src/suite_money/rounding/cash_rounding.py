from __future__ import annotations

import logging
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP

from suite_money.domain.monetary.monetary_amount import MonetaryAmount
from suite_money.rounding.rounding_policy import RoundingKind, RoundingPolicy, round_to_scale
from suite_money.utils.numeric_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)

# Smallest circulating Swiss coin and the cent remainder from which we round up to it
CHF_CASH_INCREMENT = Decimal("0.05")
CHF_CASH_THRESHOLD = Decimal("0.03")


def grid_remainder(value: Decimal, increment: Decimal) -> Decimal:
    """Return how far $value lies above the $increment grid line at or below it.

    The grid line is found by flooring, so the result is in [0, increment) for
    negative values too: grid_remainder(-10.02, 0.05) == 0.03.
    """
    floor_line = (value / increment).to_integral_value(rounding=ROUND_FLOOR) * increment
    return value - floor_line


def cash_round_value(value: Decimal, increment: Decimal = CHF_CASH_INCREMENT, threshold: Decimal = CHF_CASH_THRESHOLD, scale: int = 2) -> Decimal:
    """Snap $value onto the cash denomination grid.

    Two stages:
    1. Round $value to $scale fraction digits, half-up (the minor unit).
    2. Take the remainder above the grid line below. A remainder of at least
       $threshold moves up to the next grid line, anything smaller moves down.

    With the CHF defaults 10.02 -> 10.00, 10.03 -> 10.05 and 10.024 -> 10.00.

    Returns:
        Decimal: Value on the grid, keeping $scale fraction digits.
    """
    base = round_to_scale(value, scale, ROUND_HALF_UP)
    remainder = grid_remainder(base, increment)

    if remainder >= threshold:
        return base + (increment - remainder)
    return base - remainder


def cash_rounding_policy(
    increment: DecimalLike = CHF_CASH_INCREMENT,
    threshold: DecimalLike = CHF_CASH_THRESHOLD,
    scale: int = 2,
    kind: RoundingKind = RoundingKind.CASH,
    custom_id: str | None = None,
) -> RoundingPolicy:
    """Create a cash rounding policy for a currency whose smallest coin is $increment.

    Args:
        increment: Smallest circulating denomination, e.g. 0.05 for CHF.
        threshold: Remainder (after rounding to $scale digits) from which amounts round up.
        scale: Minor unit fraction digits applied before snapping to the grid.
        kind: Kind tag of the created policy.
        custom_id: Identifier when the policy is registered as CUSTOM.

    Returns:
        RoundingPolicy: The cash rounding.

    Raises:
        ValueError: If $increment is not positive or $threshold is outside (0, $increment].
    """
    increment_value = as_decimal(increment)
    threshold_value = as_decimal(threshold)

    # Raise: the grid must have a positive step
    if increment_value <= 0:
        raise ValueError(f"Cannot call `cash_rounding_policy` because $increment ({increment_value}) is not positive")

    # Raise: threshold must split the grid step
    if not (0 < threshold_value <= increment_value):
        raise ValueError(f"Cannot call `cash_rounding_policy` because $threshold ({threshold_value}) is outside (0, {increment_value}]")

    def _cash_round(amount: MonetaryAmount) -> MonetaryAmount:
        rounded = cash_round_value(amount.value, increment_value, threshold_value, scale)
        logger.debug(f"Cash rounded {amount!r} to {rounded} on grid {increment_value}")
        return amount.with_value(rounded)

    return RoundingPolicy(_cash_round, kind=kind, custom_id=custom_id, name=f"cash-{increment_value}")
