"""Rounding policies and their lookup by currency, timestamp or identifier."""

from suite_money.rounding.cash_rounding import cash_rounding_policy
from suite_money.rounding.default_roundings import create_default_rounding_registry
from suite_money.rounding.rounding_policy import RoundingKind, RoundingPolicy, minor_part, minor_rounding
from suite_money.rounding.rounding_registry import RoundingRegistry, RoundingRegistryEntry

__all__ = [
    "RoundingKind",
    "RoundingPolicy",
    "RoundingRegistry",
    "RoundingRegistryEntry",
    "cash_rounding_policy",
    "create_default_rounding_registry",
    "minor_part",
    "minor_rounding",
]
