from decimal import Decimal

import pytest

from suite_money.domain.monetary.currency_registry import CHF
from suite_money.domain.monetary.fast_money import FastMoney
from suite_money.domain.monetary.money import Money
from suite_money.rounding.cash_rounding import cash_round_value, cash_rounding_policy, grid_remainder
from suite_money.rounding.rounding_policy import RoundingKind

# Constants
NICKEL = Decimal("0.05")


@pytest.fixture
def chf_cash():
    return cash_rounding_policy()


@pytest.mark.parametrize(
    "value, expected",
    [
        # Remainder below 0.03 rounds down to the grid line
        ("10.02", "10.00"),
        ("10.01", "10.00"),
        ("10.07", "10.05"),
        # Remainder of at least 0.03 rounds up to the next grid line
        ("10.03", "10.05"),
        ("10.04", "10.05"),
        ("10.08", "10.10"),
        ("10.99", "11.00"),
        # Already on the grid
        ("10.00", "10.00"),
        ("10.05", "10.05"),
        # Rounded to cents first: 10.024 -> 10.02 (down), 10.025 -> 10.03 (up)
        ("10.024", "10.00"),
        ("10.0299", "10.05"),
        ("10.025", "10.05"),
        ("10.0249", "10.00"),
        # Negative amounts use the grid line below them
        ("-10.02", "-10.00"),
        ("-10.03", "-10.05"),
        ("-0.02", "0.00"),
    ],
)
def test_chf_cash_rounding(chf_cash, value, expected):
    result = chf_cash(Money.of(value, CHF))

    assert result.currency == CHF
    assert result.value == Decimal(expected)


def test_grid_remainder_is_never_negative():
    assert grid_remainder(Decimal("10.02"), NICKEL) == Decimal("0.02")
    assert grid_remainder(Decimal("-10.02"), NICKEL) == Decimal("0.03")
    assert grid_remainder(Decimal("10.05"), NICKEL) == 0


def test_cash_rounding_lands_on_grid_and_is_idempotent(chf_cash):
    """Every result is a multiple of 0.05 and a fixed point of the policy."""
    for cents in range(-250, 251):
        amount = Money.of(Decimal(cents) / 100, CHF)
        once = chf_cash(amount)

        assert once.value % NICKEL == 0, f"{amount!r} rounded off the grid to {once!r}"
        assert chf_cash(once) == once
        assert abs(once.value - amount.value) <= Decimal("0.02")


def test_cash_rounding_keeps_variant(chf_cash):
    result = chf_cash(FastMoney.of("3.33", CHF))

    assert isinstance(result, FastMoney)
    assert result.value == Decimal("3.35")


def test_cash_rounding_with_other_grid():
    """A 0.10 grid with a 0.05 threshold behaves like plain half-up to dimes."""
    assert cash_round_value(Decimal("1.04"), Decimal("0.10"), Decimal("0.05")) == Decimal("1.00")
    assert cash_round_value(Decimal("1.05"), Decimal("0.10"), Decimal("0.05")) == Decimal("1.10")


def test_cash_rounding_policy_tags():
    assert cash_rounding_policy().kind is RoundingKind.CASH

    custom = cash_rounding_policy(kind=RoundingKind.CUSTOM, custom_id="CHF-cash")
    assert custom.custom_id == "CHF-cash"


@pytest.mark.parametrize(
    "increment, threshold",
    [
        ("0", "0.03"),
        ("-0.05", "0.03"),
        ("0.05", "0"),
        ("0.05", "0.06"),
    ],
)
def test_cash_rounding_policy_validation(increment, threshold):
    with pytest.raises(ValueError):
        cash_rounding_policy(increment, threshold)
