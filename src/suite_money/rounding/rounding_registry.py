from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Iterable, Mapping

from suite_money.domain.monetary.currency import Currency
from suite_money.rounding.rounding_policy import RoundingKind, RoundingPolicy
from suite_money.utils.datetime_tools import require_utc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundingRegistryEntry:
    """Rounding policies of one currency, optionally switched at cutover instants.

    Attributes:
        key: Currency code the entry belongs to.
        base: Policy used without a timestamp and before the first cutover. May be None
            when the currency only gets a rounding after a cutover.
        overrides: Pairs of (cutover, policy). A timestamp strictly after a cutover
            selects its policy; the latest such cutover wins.
    """

    key: str
    base: RoundingPolicy | None
    overrides: tuple[tuple[datetime, RoundingPolicy], ...] = field(default=())

    def __post_init__(self) -> None:
        # Raise: key must be a non-empty string
        if not isinstance(self.key, str) or not self.key.strip():
            raise ValueError(f"$key must be a non-empty string, but provided value is: '{self.key}'")

        # Raise: every cutover must be UTC
        for cutover, _policy in self.overrides:
            require_utc(cutover)

        object.__setattr__(self, "key", self.key.upper().strip())
        object.__setattr__(self, "overrides", tuple(sorted(self.overrides, key=lambda pair: pair[0])))

    def resolve(self, timestamp: datetime | None = None) -> RoundingPolicy | None:
        """Return the policy applying at $timestamp, or the base policy when $timestamp is None.

        Raises:
            ValueError: If $timestamp is not timezone-aware UTC.
        """
        if timestamp is None:
            return self.base

        require_utc(timestamp)

        selected = self.base
        for cutover, policy in self.overrides:
            if timestamp <= cutover:
                break
            selected = policy

        if selected is not None and not selected.is_valid_at(timestamp):
            return None
        return selected


class RoundingRegistry:
    """Read-only lookup of standard, cash and custom rounding policies.

    Tables are filled once at construction. A missing policy is a normal
    outcome: every lookup returns None when nothing is configured, including
    for unknown currency codes.

    Args:
        standard_entries: Standard rounding entries, at most one per currency.
        cash_entries: Cash rounding entries, at most one per currency.
        custom_policies: Custom policies by identifier.

    Raises:
        ValueError: If a currency appears twice in one table.
    """

    __slots__ = ("_standard_by_code", "_cash_by_code", "_custom_by_id")

    def __init__(
        self,
        standard_entries: Iterable[RoundingRegistryEntry] = (),
        cash_entries: Iterable[RoundingRegistryEntry] = (),
        custom_policies: Mapping[str, RoundingPolicy] | None = None,
    ) -> None:
        self._standard_by_code = self._index_entries(standard_entries, "standard_entries")
        self._cash_by_code = self._index_entries(cash_entries, "cash_entries")
        self._custom_by_id = MappingProxyType(dict(custom_policies or {}))

        logger.debug(f"Created RoundingRegistry with {len(self._standard_by_code)} standard, {len(self._cash_by_code)} cash and {len(self._custom_by_id)} custom rounding(s)")

    @staticmethod
    def _index_entries(entries: Iterable[RoundingRegistryEntry], table_name: str) -> Mapping[str, RoundingRegistryEntry]:
        indexed: dict[str, RoundingRegistryEntry] = {}
        for entry in entries:
            # Raise: entries must be RoundingRegistryEntry instances
            if not isinstance(entry, RoundingRegistryEntry):
                raise TypeError(f"${table_name} must contain RoundingRegistryEntry instances, but found: {entry}")

            # Raise: one entry per currency
            if entry.key in indexed:
                raise ValueError(f"${table_name} contains currency '{entry.key}' more than once")

            indexed[entry.key] = entry
        return MappingProxyType(indexed)

    @staticmethod
    def _code_of(currency: Currency | str) -> str:
        if isinstance(currency, Currency):
            return currency.code
        if isinstance(currency, str):
            return currency.upper().strip()
        raise TypeError(f"$currency must be a Currency or a currency code, but provided value is: {currency}")

    def _resolve(self, table: Mapping[str, RoundingRegistryEntry], currency: Currency | str, timestamp: datetime | None, table_name: str) -> RoundingPolicy | None:
        code = self._code_of(currency)
        entry = table.get(code)
        if entry is None:
            logger.debug(f"No {table_name} rounding configured for currency '{code}'")
            return None

        policy = entry.resolve(timestamp)
        logger.debug(f"Resolved {table_name} rounding for currency '{code}' at $timestamp {timestamp} to {policy!r}")
        return policy

    # region Queries

    def standard_rounding(self, currency: Currency | str, timestamp: datetime | None = None) -> RoundingPolicy | None:
        """Return the standard rounding of $currency (at $timestamp), or None."""
        return self._resolve(self._standard_by_code, currency, timestamp, "standard")

    def cash_rounding(self, currency: Currency | str, timestamp: datetime | None = None) -> RoundingPolicy | None:
        """Return the cash rounding of $currency (at $timestamp), or None."""
        return self._resolve(self._cash_by_code, currency, timestamp, "cash")

    def custom_rounding(self, rounding_id: str) -> RoundingPolicy | None:
        """Return the custom rounding registered as $rounding_id, or None."""
        if not isinstance(rounding_id, str):
            raise TypeError(f"$rounding_id must be a string, but provided value is: {rounding_id}")

        policy = self._custom_by_id.get(rounding_id)
        if policy is None:
            logger.debug(f"No custom rounding registered as '{rounding_id}'")
        return policy

    def custom_rounding_ids(self) -> frozenset[str]:
        """Return all registered custom rounding identifiers."""
        return frozenset(self._custom_by_id)

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(standard={sorted(self._standard_by_code)}, cash={sorted(self._cash_by_code)}, custom={sorted(self._custom_by_id)})"


def custom_policies_by_id(policies: Iterable[RoundingPolicy]) -> dict[str, RoundingPolicy]:
    """Index CUSTOM $policies by their identifiers.

    Raises:
        ValueError: If a policy is not CUSTOM or an identifier repeats.
    """
    indexed: dict[str, RoundingPolicy] = {}
    for policy in policies:
        if policy.kind is not RoundingKind.CUSTOM:
            raise ValueError(f"Cannot call `custom_policies_by_id` because policy {policy!r} is not CUSTOM")
        if policy.custom_id in indexed:
            raise ValueError(f"Cannot call `custom_policies_by_id` because $custom_id '{policy.custom_id}' repeats")
        indexed[policy.custom_id] = policy
    return indexed
