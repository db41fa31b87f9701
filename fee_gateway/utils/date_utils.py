"""Date manipulation utilities"""

from datetime import date, datetime


def to_calendar_date(value: date) -> date:
    """Drop the time of day from a datetime; plain dates pass through"""
    if isinstance(value, datetime):
        return value.date()
    return value


def whole_days_between(start: date, end: date) -> int:
    """Signed number of calendar days from start to end (time of day ignored)"""
    return (to_calendar_date(end) - to_calendar_date(start)).days
