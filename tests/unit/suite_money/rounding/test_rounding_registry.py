from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from suite_money.domain.monetary.currency_registry import CHF, EUR, USD, XXX
from suite_money.domain.monetary.money import Money
from suite_money.rounding.default_roundings import create_default_rounding_registry
from suite_money.rounding.rounding_policy import RoundingKind, constant_rounding, minor_rounding
from suite_money.rounding.rounding_registry import RoundingRegistry, RoundingRegistryEntry, custom_policies_by_id
from suite_money.utils.datetime_tools import utc_now

# Constants
CUTOVER = datetime(2025, 1, 1, tzinfo=timezone.utc)
BEFORE_CUTOVER = CUTOVER - timedelta(days=1)
AFTER_CUTOVER = CUTOVER + timedelta(days=1)


@pytest.fixture
def registry() -> RoundingRegistry:
    return create_default_rounding_registry(CUTOVER)


# region Default registry


def test_standard_rounding_by_currency(registry):
    policy = registry.standard_rounding(XXX)

    assert policy is not None
    assert policy.kind is RoundingKind.STANDARD
    assert policy(Money.of("12.34", XXX)) == Money.of_zero(XXX)


def test_standard_rounding_switches_after_cutover(registry):
    amount = Money.of("12.34", XXX)

    assert registry.standard_rounding(XXX, BEFORE_CUTOVER)(amount) == Money.of(0, XXX)
    assert registry.standard_rounding(XXX, CUTOVER)(amount) == Money.of(0, XXX)
    assert registry.standard_rounding(XXX, AFTER_CUTOVER)(amount) == Money.of(-1, XXX)


def test_unconfigured_currency_has_no_rounding(registry):
    """Absence is a normal result, not an error."""
    assert registry.standard_rounding(USD) is None
    assert registry.standard_rounding(USD, AFTER_CUTOVER) is None
    assert registry.standard_rounding("ZZZ") is None
    assert registry.cash_rounding(EUR) is None
    assert registry.cash_rounding("ZZZ", AFTER_CUTOVER) is None


def test_cash_rounding_by_currency(registry):
    chf_cash = registry.cash_rounding(CHF)

    assert chf_cash.kind is RoundingKind.CASH
    assert chf_cash(Money.of("10.02", CHF)) == Money.of("10.00", CHF)
    assert chf_cash(Money.of("10.03", CHF)) == Money.of("10.05", CHF)
    assert registry.cash_rounding("chf") is chf_cash


def test_cash_rounding_switches_after_cutover(registry):
    assert registry.cash_rounding(CHF, BEFORE_CUTOVER) is registry.cash_rounding(CHF)

    after = registry.cash_rounding(CHF, AFTER_CUTOVER)
    assert after.kind is RoundingKind.CASH
    assert after(Money.of("10.03", CHF)) == Money.of(-1, CHF)


def test_cash_rounding_without_override_ignores_timestamp(registry):
    assert registry.cash_rounding(XXX, AFTER_CUTOVER)(Money.of(5, XXX)).is_zero()
    assert registry.cash_rounding(XXX)(Money.of(5, XXX)).is_zero()


def test_custom_rounding_ids(registry):
    ids = registry.custom_rounding_ids()

    assert ids == frozenset({"zero", "minusOne", "CHF-cash"})
    for rounding_id in ids:
        policy = registry.custom_rounding(rounding_id)
        assert policy is not None
        assert policy.kind is RoundingKind.CUSTOM
        assert policy.custom_id == rounding_id

    with pytest.raises(AttributeError):
        ids.add("other")


def test_custom_roundings_behave_as_named(registry):
    assert registry.custom_rounding("zero")(Money.of(3, USD)) == Money.of(0, USD)
    assert registry.custom_rounding("minusOne")(Money.of(3, USD)) == Money.of(-1, USD)
    assert registry.custom_rounding("CHF-cash")(Money.of("0.08", CHF)) == Money.of("0.10", CHF)


def test_unknown_custom_rounding_is_none(registry):
    assert registry.custom_rounding("unknown") is None
    assert registry.custom_rounding("ZERO") is None

    with pytest.raises(TypeError):
        registry.custom_rounding(None)


def test_policies_never_change_currency(registry):
    for policy in (registry.standard_rounding(XXX, AFTER_CUTOVER), registry.cash_rounding(CHF), registry.custom_rounding("minusOne")):
        assert policy(Money.of("1.23", EUR)).currency == EUR


def test_rounding_policies_are_idempotent(registry):
    policies = [registry.cash_rounding(CHF), registry.standard_rounding(XXX), registry.custom_rounding("minusOne")]
    for policy in policies:
        once = policy(Money.of("10.03", CHF))
        assert policy(once) == once


def test_default_cutover_is_construction_time():
    registry = create_default_rounding_registry()

    assert registry.standard_rounding(XXX, utc_now() + timedelta(days=1))(Money.of(1, XXX)) == Money.of(-1, XXX)
    assert registry.standard_rounding(XXX, utc_now() - timedelta(days=1))(Money.of(1, XXX)).is_zero()


def test_timestamps_must_be_utc(registry):
    with pytest.raises(ValueError, match="UTC"):
        registry.standard_rounding(XXX, datetime(2025, 1, 2))

    with pytest.raises(ValueError, match="UTC"):
        create_default_rounding_registry(datetime(2025, 1, 2))


def test_currency_must_be_currency_or_code(registry):
    with pytest.raises(TypeError):
        registry.cash_rounding(42)


# endregion

# region Custom tables


def test_entry_picks_latest_cutover_before_timestamp():
    first = constant_rounding(1, name="first")
    second = constant_rounding(2, name="second")
    base = minor_rounding(2)
    cutover_2030 = datetime(2030, 1, 1, tzinfo=timezone.utc)

    # Overrides given out of order are sorted by cutover
    entry = RoundingRegistryEntry("usd", base, ((cutover_2030, second), (CUTOVER, first)))

    assert entry.key == "USD"
    assert entry.resolve(None) is base
    assert entry.resolve(BEFORE_CUTOVER) is base
    assert entry.resolve(AFTER_CUTOVER) is first
    assert entry.resolve(cutover_2030) is first
    assert entry.resolve(cutover_2030 + timedelta(seconds=1)) is second


def test_entry_without_base_only_applies_after_cutover():
    entry = RoundingRegistryEntry("EUR", None, ((CUTOVER, minor_rounding(0)),))
    registry = RoundingRegistry(standard_entries=[entry])

    assert registry.standard_rounding(EUR) is None
    assert registry.standard_rounding(EUR, BEFORE_CUTOVER) is None
    assert registry.standard_rounding(EUR, AFTER_CUTOVER)(Money.of("2.5", EUR)).value == Decimal("3")


def test_entry_respects_policy_validity():
    limited = minor_rounding(2).retag(RoundingKind.STANDARD, validity=lambda ts: ts.year < 2026)
    entry = RoundingRegistryEntry("USD", limited)

    assert entry.resolve(AFTER_CUTOVER) is limited
    assert entry.resolve(datetime(2026, 6, 1, tzinfo=timezone.utc)) is None


def test_entry_validation():
    with pytest.raises(ValueError):
        RoundingRegistryEntry("", minor_rounding(2))

    with pytest.raises(ValueError, match="UTC"):
        RoundingRegistryEntry("USD", minor_rounding(2), ((datetime(2025, 1, 1), minor_rounding(0)),))


def test_registry_refuses_duplicate_currencies():
    entries = [RoundingRegistryEntry("USD", minor_rounding(2)), RoundingRegistryEntry("usd", minor_rounding(0))]

    with pytest.raises(ValueError, match="more than once"):
        RoundingRegistry(cash_entries=entries)

    with pytest.raises(TypeError):
        RoundingRegistry(standard_entries=[minor_rounding(2)])


def test_custom_policies_by_id_validation():
    with pytest.raises(ValueError, match="not CUSTOM"):
        custom_policies_by_id([minor_rounding(2)])

    custom = minor_rounding(2).retag(RoundingKind.CUSTOM, "cents")
    with pytest.raises(ValueError, match="repeats"):
        custom_policies_by_id([custom, custom])


def test_empty_registry():
    registry = RoundingRegistry()

    assert registry.custom_rounding_ids() == frozenset()
    assert registry.standard_rounding(USD) is None
    assert repr(registry) == "RoundingRegistry(standard=[], cash=[], custom=[])"


# endregion
