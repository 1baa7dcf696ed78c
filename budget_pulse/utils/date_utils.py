"""Date manipulation utilities"""

import calendar
from datetime import date, datetime


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative if end is earlier)"""
    return (to_date(end) - to_date(start)).days


def to_date(value: date | datetime) -> date:
    """Drop any time component; the engine works at day resolution"""
    if isinstance(value, datetime):
        return value.date()
    return value


def month_bounds(day: date) -> tuple[date, date]:
    """First and last day of the calendar month containing day"""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)
