import pytest

from suite_money.format.format_order import FormatOrder


@pytest.mark.parametrize(
    "value, expected",
    [
        ("ca", FormatOrder.CURRENCY_AMOUNT),
        ("c-a", FormatOrder.CURRENCY_AMOUNT),
        ("c a", FormatOrder.CURRENCY_AMOUNT),
        ("currency-amount", FormatOrder.CURRENCY_AMOUNT),
        ("currency amount", FormatOrder.CURRENCY_AMOUNT),
        ("ac", FormatOrder.AMOUNT_CURRENCY),
        ("a-c", FormatOrder.AMOUNT_CURRENCY),
        ("a c", FormatOrder.AMOUNT_CURRENCY),
        ("amount currency", FormatOrder.AMOUNT_CURRENCY),
        ("", FormatOrder.AMOUNT_CURRENCY),
        (None, FormatOrder.AMOUNT_CURRENCY),
    ],
)
def test_from_config_value(value, expected):
    assert FormatOrder.from_config_value(value) is expected


def test_from_config_value_is_case_sensitive():
    assert FormatOrder.from_config_value("CA") is FormatOrder.AMOUNT_CURRENCY
    assert FormatOrder.from_config_value("Currency-Amount") is FormatOrder.AMOUNT_CURRENCY
