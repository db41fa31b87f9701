"""Unit tests for date and amount helpers"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from fee_gateway.domain.exceptions import InvalidAmountError
from fee_gateway.utils.amounts import to_amount, to_decimal
from fee_gateway.utils.date_utils import to_calendar_date, whole_days_between


def test_to_calendar_date():
    assert to_calendar_date(datetime(2024, 1, 1, 13, 45)) == date(2024, 1, 1)
    assert to_calendar_date(date(2024, 1, 1)) == date(2024, 1, 1)


def test_whole_days_between_is_signed():
    assert whole_days_between(date(2024, 1, 1), date(2024, 1, 10)) == 9
    assert whole_days_between(date(2024, 1, 10), date(2024, 1, 1)) == -9
    assert whole_days_between(datetime(2024, 2, 28, 23, 0), date(2024, 3, 1)) == 2  # leap year


def test_to_decimal_accepts_numeric_inputs():
    assert to_decimal(5) == Decimal(5)
    assert to_decimal("12.50") == Decimal("12.50")
    assert to_decimal(0.1) == Decimal("0.1")


@pytest.mark.parametrize("value", ["", "12abc", float("-inf"), False, [1]])
def test_to_decimal_rejects_garbage(value):
    with pytest.raises(InvalidAmountError):
        to_decimal(value)


def test_to_amount_clamps_negative():
    assert to_amount(-3) == 0
    assert to_amount(Decimal("-0.01")) == 0
    assert to_amount(42) == 42


def test_to_decimal_huge_int_converts_exactly():
    """Ints skip str(), so the int string-conversion digit limit never applies"""
    assert to_decimal(10 ** 8000) == Decimal("1e8000")


def test_to_amount_huge_int():
    assert to_amount(10 ** 8000) > 0
