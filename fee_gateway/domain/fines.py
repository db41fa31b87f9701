"""Late-payment fine calculator - tiered daily-rate schedule"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from fee_gateway.domain.exceptions import InvalidScheduleError
from fee_gateway.domain.models import FineResult
from fee_gateway.utils.date_utils import whole_days_between


@dataclass(frozen=True)
class FineTier:
    """A run of consecutive late days charged at one daily rate"""

    days: int
    daily_rate: Decimal


FineSchedule = Tuple[FineTier, ...]

# Rs. 60/day for the first week, 120/day for the next 15 days, 220/day for the
# final 7. Nothing accrues after day 29.
LATE_FINE_SCHEDULE: FineSchedule = (
    FineTier(days=7, daily_rate=Decimal(60)),
    FineTier(days=15, daily_rate=Decimal(120)),
    FineTier(days=7, daily_rate=Decimal(220)),
)


def validate_schedule(schedule: FineSchedule) -> FineSchedule:
    """Reject empty schedules, non-positive tier lengths and negative rates"""
    if not schedule:
        raise InvalidScheduleError("Fine schedule needs at least one tier")
    for tier in schedule:
        if tier.days <= 0:
            raise InvalidScheduleError(f"Tier length must be positive, got {tier.days}")
        if tier.daily_rate < 0:
            raise InvalidScheduleError(f"Daily rate must be non-negative, got {tier.daily_rate}")
    return schedule


def schedule_span(schedule: FineSchedule = LATE_FINE_SCHEDULE) -> int:
    """Last day on which the schedule still accrues (29 for the default)"""
    return sum(tier.days for tier in schedule)


def max_fine(schedule: FineSchedule = LATE_FINE_SCHEDULE) -> Decimal:
    """Fine once every tier is fully consumed (3760 for the default)"""
    return sum((tier.days * tier.daily_rate for tier in schedule), Decimal(0))


def days_late(due_date: date, payment_date: Optional[date]) -> int:
    """
    Whole calendar days between due date and payment.

    Time of day is dropped before subtracting. Missing payment, same-day
    payment and early payment all count as 0 days late.
    """
    if payment_date is None:
        return 0
    return max(0, whole_days_between(due_date, payment_date))


def fine_for_days(late_days: int, schedule: FineSchedule = LATE_FINE_SCHEDULE) -> Decimal:
    """
    Accumulate the tiered fine for a number of late days.

    Each tier charges min(remaining, tier.days) * daily_rate; once all tiers
    are used up the fine stops growing, which caps it at max_fine().
    """
    validate_schedule(schedule)

    remaining = max(0, late_days)
    fine = Decimal(0)
    for tier in schedule:
        if remaining == 0:
            break
        charged = min(remaining, tier.days)
        fine += charged * tier.daily_rate
        remaining -= charged

    return fine


def compute_fine(
    due_date: date,
    payment_date: Optional[date] = None,
    schedule: FineSchedule = LATE_FINE_SCHEDULE,
) -> Decimal:
    """
    Late fine for a charge paid on payment_date.

    Args:
        due_date: Date the fee was due
        payment_date: Date it was paid, or None if still unpaid
        schedule: Tiers to apply (default: 60/120/220 per day over 7/15/7 days)

    Returns:
        Non-negative, integer-valued fine amount

    Example:
        due 2024-01-01, paid 2024-01-10 → 9 days late → 7*60 + 2*120 = 660
    """
    return fine_for_days(days_late(due_date, payment_date), schedule)


def compute_fine_result(
    due_date: date,
    payment_date: Optional[date] = None,
    schedule: FineSchedule = LATE_FINE_SCHEDULE,
) -> FineResult:
    """Days late together with the fine they incur"""
    late_days = days_late(due_date, payment_date)
    return FineResult(days_late=late_days, fine_amount=fine_for_days(late_days, schedule))


def fine_band(late_days: int, schedule: FineSchedule = LATE_FINE_SCHEDULE) -> str:
    """Label the tier a lateness falls into: on_time, tier_1..tier_n, or capped"""
    if late_days <= 0:
        return "on_time"

    boundary = 0
    for index, tier in enumerate(schedule, start=1):
        boundary += tier.days
        if late_days <= boundary:
            return f"tier_{index}"

    return "capped"


def describe_schedule(schedule: FineSchedule = LATE_FINE_SCHEDULE, currency_symbol: str = "Rs.") -> List[str]:
    """Receipt notes spelling out the schedule, one line per tier"""
    notes = []
    for index, tier in enumerate(schedule):
        qualifier = "first" if index == 0 else "next"
        notes.append(f"{currency_symbol} {tier.daily_rate:f}/- per day for {qualifier} {tier.days} days")
    return notes
