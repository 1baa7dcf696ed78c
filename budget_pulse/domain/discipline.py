"""Spending discipline signals: under-limit streak and recovery daily limit"""

from datetime import date, timedelta
from typing import Dict, Iterable

from budget_pulse.domain.models import DEFAULT_THRESHOLDS, EngineThresholds, Expense
from budget_pulse.utils.date_utils import to_date


def group_spend_by_day(expenses: Iterable[Expense]) -> Dict[date, float]:
    """Total spend per calendar day"""
    spend_by_day: Dict[date, float] = {}
    for expense in expenses:
        day = to_date(expense.date)
        spend_by_day[day] = spend_by_day.get(day, 0.0) + expense.amount
    return spend_by_day


def calculate_streak(
    ledger: Iterable[Expense],
    daily_limit: float,
    today: date,
    thresholds: EngineThresholds = DEFAULT_THRESHOLDS,
) -> int:
    """
    Count consecutive days at or under daily_limit, walking back from yesterday.

    Requirements:
    - Takes the full ledger, not a period subset, so a streak can span periods
    - Today is skipped because it is not over yet
    - A day with no expenses qualifies; spend == limit qualifies
    - Stops at the first day over the limit or after streak_lookback_days
    """
    if daily_limit <= 0:
        return 0

    spend_by_day = group_spend_by_day(ledger)
    today = to_date(today)

    streak = 0
    for offset in range(1, thresholds.streak_lookback_days + 1):
        spent = spend_by_day.get(today - timedelta(days=offset), 0.0)
        if spent > daily_limit:
            break
        streak += 1

    return streak


def generate_recovery_limit(remaining_budget: float, days_remaining: int) -> float:
    """Remaining budget spread evenly over the remaining days, never negative"""
    if days_remaining <= 0:
        return 0.0
    return max(0.0, remaining_budget / days_remaining)
