"""Unit tests for the tiered late-fine calculator"""

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal
from fee_gateway.domain.exceptions import InvalidScheduleError
from fee_gateway.domain.fines import (
    LATE_FINE_SCHEDULE,
    FineTier,
    compute_fine,
    compute_fine_result,
    days_late,
    describe_schedule,
    fine_band,
    fine_for_days,
    max_fine,
    schedule_span,
)


def test_no_payment_no_fine(due_date: date):
    """Unpaid charge accrues nothing"""
    assert compute_fine(due_date, None) == 0
    assert compute_fine(due_date) == 0


@pytest.mark.parametrize("offset", [0, -1, -30])
def test_on_time_or_early_payment_no_fine(due_date: date, offset: int):
    """Same-day or early payment never produces a fine, let alone a negative one"""
    assert compute_fine(due_date, due_date + timedelta(days=offset)) == 0
    assert days_late(due_date, due_date + timedelta(days=offset)) == 0


@pytest.mark.parametrize(
    "late, expected",
    [
        (1, 60),
        (7, 420),  # 7 * 60
        (8, 540),  # + 1 * 120
        (22, 2220),  # + 15 * 120
        (23, 2440),  # + 1 * 220
        (29, 3760),  # + 7 * 220
        (30, 3760),  # capped
        (100, 3760),
    ],
)
def test_tier_boundaries(due_date: date, late: int, expected: int):
    """Each tier boundary lands on its exact cumulative fine"""
    assert compute_fine(due_date, due_date + timedelta(days=late)) == expected


def test_nine_days_late(due_date: date):
    """7 days at 60 plus 2 days at 120"""
    result = compute_fine_result(due_date, date(2024, 1, 10))

    assert result.days_late == 9
    assert result.fine_amount == Decimal(660)


def test_time_of_day_ignored():
    """Datetimes are reduced to calendar dates before subtracting"""
    due = datetime(2024, 1, 1, 23, 59)
    paid = datetime(2024, 1, 2, 0, 1)

    assert days_late(due, paid) == 1
    assert compute_fine(due, paid) == 60

    # Same calendar day, later time: still on time
    assert compute_fine(datetime(2024, 1, 1, 8, 0), datetime(2024, 1, 1, 20, 0)) == 0


def test_fine_is_monotonic(due_date: date):
    """Paying later never costs less"""
    fines = [compute_fine(due_date, due_date + timedelta(days=d)) for d in range(-5, 60)]
    assert all(a <= b for a, b in zip(fines, fines[1:]))


def test_fine_is_idempotent(due_date: date):
    """Identical inputs give identical outputs"""
    for d in range(0, 40, 3):
        paid = due_date + timedelta(days=d)
        assert compute_fine_result(due_date, paid) == compute_fine_result(due_date, paid)


def test_fine_is_integer_valued(due_date: date):
    for d in range(0, 40):
        fine = compute_fine(due_date, due_date + timedelta(days=d))
        assert fine == fine.to_integral_value()


def test_max_fine_and_span():
    assert max_fine() == 7 * 60 + 15 * 120 + 7 * 220
    assert max_fine(LATE_FINE_SCHEDULE) == 3760
    assert schedule_span() == 29


def test_custom_schedule(due_date: date):
    """Alternate schedules are honored and cap at their own total"""
    schedule = (FineTier(days=3, daily_rate=Decimal(10)), FineTier(days=2, daily_rate=Decimal(50)))

    assert compute_fine(due_date, due_date + timedelta(days=2), schedule) == 20
    assert compute_fine(due_date, due_date + timedelta(days=4), schedule) == 80
    assert compute_fine(due_date, due_date + timedelta(days=50), schedule) == max_fine(schedule) == 130


@pytest.mark.parametrize(
    "schedule",
    [
        (),
        (FineTier(days=0, daily_rate=Decimal(60)),),
        (FineTier(days=7, daily_rate=Decimal(-1)),),
    ],
)
def test_invalid_schedule_rejected(schedule):
    with pytest.raises(InvalidScheduleError):
        fine_for_days(5, schedule)


@pytest.mark.parametrize(
    "late, band",
    [(0, "on_time"), (1, "tier_1"), (7, "tier_1"), (8, "tier_2"), (22, "tier_2"), (29, "tier_3"), (30, "capped")],
)
def test_fine_band(late: int, band: str):
    assert fine_band(late) == band


def test_describe_schedule():
    """Receipt notes list every tier"""
    assert describe_schedule() == [
        "Rs. 60/- per day for first 7 days",
        "Rs. 120/- per day for next 15 days",
        "Rs. 220/- per day for next 7 days",
    ]
