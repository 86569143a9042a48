from __future__ import annotations

from datetime import datetime
from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP
from enum import Enum
from typing import Callable

from suite_money.domain.monetary.monetary_amount import MonetaryAmount
from suite_money.utils.numeric_tools import DecimalLike, as_decimal

AmountOperator = Callable[[MonetaryAmount], MonetaryAmount]
ValidityPredicate = Callable[[datetime], bool]


class RoundingKind(Enum):
    """Kind of a rounding policy."""

    STANDARD = "STANDARD"
    CASH = "CASH"
    CUSTOM = "CUSTOM"


class RoundingPolicy:
    """Named, pure `MonetaryAmount -> MonetaryAmount` adjustment.

    A policy is called like a function. The result always keeps the currency of
    the input; an operator that changes it is a programming error and raises.

    Args:
        operator: Function computing the adjusted amount.
        kind: Which family of rounding this policy belongs to.
        custom_id: Identifier under which a CUSTOM policy is registered.
        validity: Optional predicate telling at which timestamps the policy applies.
            Without it the policy is valid at any time.
        name: Human readable label used in `repr`.
    """

    __slots__ = ("_operator", "_kind", "_custom_id", "_validity", "_name")

    def __init__(
        self,
        operator: AmountOperator,
        kind: RoundingKind = RoundingKind.STANDARD,
        custom_id: str | None = None,
        validity: ValidityPredicate | None = None,
        name: str | None = None,
    ) -> None:
        # Raise: operator must be callable
        if not callable(operator):
            raise TypeError(f"$operator must be callable, but provided value is: {operator}")

        # Raise: kind must be a RoundingKind
        if not isinstance(kind, RoundingKind):
            raise TypeError(f"$kind must be a RoundingKind instance, but provided value is: {kind}")

        # Raise: CUSTOM policies need an identifier, others must not have one
        if kind is RoundingKind.CUSTOM and not custom_id:
            raise ValueError("Cannot init `RoundingPolicy` because $kind is CUSTOM and $custom_id is empty")
        if kind is not RoundingKind.CUSTOM and custom_id is not None:
            raise ValueError(f"Cannot init `RoundingPolicy` because $custom_id ('{custom_id}') is set for $kind {kind.name}")

        self._operator = operator
        self._kind = kind
        self._custom_id = custom_id
        self._validity = validity
        self._name = name or getattr(operator, "__name__", "rounding")

    @property
    def kind(self) -> RoundingKind:
        return self._kind

    @property
    def custom_id(self) -> str | None:
        return self._custom_id

    @property
    def name(self) -> str:
        return self._name

    def is_valid_at(self, timestamp: datetime | None) -> bool:
        """Check whether this policy applies at $timestamp (None means "any time")."""
        if self._validity is None or timestamp is None:
            return True
        return bool(self._validity(timestamp))

    def retag(self, kind: RoundingKind, custom_id: str | None = None, validity: ValidityPredicate | None = None) -> RoundingPolicy:
        """Return a policy with the same operator under another $kind / $custom_id.

        The validity predicate is kept unless a new $validity is given.
        """
        if validity is None:
            validity = self._validity
        return RoundingPolicy(self._operator, kind=kind, custom_id=custom_id, validity=validity, name=self._name)

    def __call__(self, amount: MonetaryAmount) -> MonetaryAmount:
        # Raise: policies only accept monetary amounts
        if not isinstance(amount, MonetaryAmount):
            raise TypeError(f"$amount must be a MonetaryAmount instance, but provided value is: {amount}")

        result = self._operator(amount)

        # Raise: rounding must never change the currency
        if result.currency != amount.currency:
            raise ValueError(f"Rounding '{self._name}' changed currency from {amount.currency} to {result.currency}")

        return result

    def __repr__(self) -> str:
        if self._custom_id is not None:
            return f"{self.__class__.__name__}('{self._name}', {self._kind.name}, '{self._custom_id}')"
        return f"{self.__class__.__name__}('{self._name}', {self._kind.name})"


# region Building blocks


def scale_quantum(scale: int) -> Decimal:
    """Return the smallest step for $scale fraction digits, e.g. 2 -> Decimal('0.01')."""
    return Decimal(1).scaleb(-scale)


def round_to_scale(value: Decimal, scale: int, rounding: str = ROUND_HALF_UP) -> Decimal:
    """Round $value to exactly $scale fraction digits.

    With ROUND_HALF_UP ties go away from zero, which is half-up on the
    magnitude with the sign restored: 0.125 -> 0.13 and -0.125 -> -0.13.
    """
    return value.quantize(scale_quantum(scale), rounding=rounding)


def minor_rounding(scale: int = 2, rounding: str = ROUND_HALF_UP, kind: RoundingKind = RoundingKind.STANDARD) -> RoundingPolicy:
    """Create the rounding to $scale fraction digits (the minor unit for most currencies).

    Args:
        scale: Number of fraction digits to keep.
        rounding: Any `decimal` rounding mode constant.
        kind: Kind tag of the created policy.

    Returns:
        RoundingPolicy: Policy keeping the input variant and currency.
    """
    # Raise: scale must be a non-negative integer
    if not isinstance(scale, int) or scale < 0:
        raise ValueError(f"Cannot call `minor_rounding` because $scale ({scale}) is not a non-negative integer")

    def _round(amount: MonetaryAmount) -> MonetaryAmount:
        return amount.with_value(round_to_scale(amount.value, scale, rounding))

    return RoundingPolicy(_round, kind=kind, name=f"minor-{scale}-{rounding}")


def minor_part(amount: MonetaryAmount) -> MonetaryAmount:
    """Return the part of $amount below its integer part, keeping the sign.

    Examples: 10.27 -> 0.27, -10.27 -> -0.27.
    """
    value = amount.value
    return amount.with_value(value - value.to_integral_value(rounding=ROUND_DOWN))


def constant_rounding(value: DecimalLike, kind: RoundingKind = RoundingKind.STANDARD, custom_id: str | None = None, name: str | None = None) -> RoundingPolicy:
    """Create a policy that always returns $value in the currency of its input."""
    constant = as_decimal(value)

    def _constant(amount: MonetaryAmount) -> MonetaryAmount:
        return amount.with_value(constant)

    return RoundingPolicy(_constant, kind=kind, custom_id=custom_id, name=name or f"constant-{constant}")


def zero_rounding(kind: RoundingKind = RoundingKind.STANDARD, custom_id: str | None = None) -> RoundingPolicy:
    """Create a policy mapping every amount to zero."""
    return constant_rounding(0, kind=kind, custom_id=custom_id, name="zero")


# endregion
