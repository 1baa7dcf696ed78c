"""Budget period helpers: filtering, rollover, progress and upstream validation"""

import math
from datetime import date
from typing import Iterable, List

from budget_pulse.domain.exceptions import InvalidExpenseError, InvalidPeriodError
from budget_pulse.domain.models import Expense, Period, PeriodProgress
from budget_pulse.utils.date_utils import days_between, month_bounds, to_date


def current_month_period(today: date) -> Period:
    """Calendar month containing today"""
    start, end = month_bounds(to_date(today))
    return Period(start_date=start, end_date=end)


def resolve_active_period(period: Period | None, today: date) -> Period:
    """
    Return the period to compute against.

    A period whose end date is already behind us rolls over to the current
    calendar month; a missing period defaults to it.
    """
    today = to_date(today)
    if period is None or period.end_date < today:
        return current_month_period(today)
    return period


def filter_to_period(expenses: Iterable[Expense], period: Period) -> List[Expense]:
    """Expenses dated inside [start_date, end_date], inclusive by calendar day"""
    return [
        e for e in expenses
        if period.start_date <= to_date(e.date) <= period.end_date
    ]


def measure_progress(period: Period, today: date) -> PeriodProgress:
    """
    Day counts shared by the run-rate index and the insight cascade.

    days_passed is clamped to at least 1 so time progress never divides by
    zero, even before the period starts. It is not capped at total_days.
    """
    total_days = period.total_days
    days_passed = max(1, days_between(period.start_date, today) + 1)
    days_remaining = max(0, total_days - days_passed)
    return PeriodProgress(
        total_days=total_days,
        days_passed=days_passed,
        days_remaining=days_remaining,
    )


def days_left_including_today(period: Period, today: date) -> int:
    """Days from today through end_date inclusive, never negative"""
    return max(0, days_between(today, period.end_date) + 1)


def validate_period(period: Period) -> Period:
    """Reject inverted date ranges before they reach the engine"""
    if period.start_date > period.end_date:
        raise InvalidPeriodError(
            f"Period start {period.start_date.isoformat()} is after end {period.end_date.isoformat()}"
        )
    return period


def validate_expenses(expenses: Iterable[Expense]) -> List[Expense]:
    """Reject negative or non-finite amounts before they reach the engine"""
    validated = []
    for index, expense in enumerate(expenses):
        if not math.isfinite(expense.amount):
            raise InvalidExpenseError(f"Expense #{index} has a non-finite amount")
        if expense.amount < 0:
            raise InvalidExpenseError(f"Expense #{index} has a negative amount: {expense.amount}")
        validated.append(expense)
    return validated
