"""Spend projection, velocity and run-rate signals for a budget period"""

from datetime import date, timedelta
from typing import List, Optional

from budget_pulse.domain.models import (
    DEFAULT_THRESHOLDS,
    EngineThresholds,
    Expense,
    Period,
    total_amount,
)
from budget_pulse.domain.periods import measure_progress
from budget_pulse.utils.date_utils import days_between, to_date


def calculate_forecast(
    expenses: List[Expense],
    period: Period,
    monthly_budget: float,
    today: date,
) -> float:
    """
    Linear projection of total period spend from spend-to-date.

    Requirements:
    - 0 before the period starts (nothing to extrapolate from)
    - days passed is capped at the period length, so a finished period
      projects exactly what was spent

    monthly_budget does not affect the projection; it is accepted so all
    period-scoped signals share one call shape.
    """
    today = to_date(today)
    if today < period.start_date:
        return 0.0

    total_days = period.total_days
    days_passed = min(days_between(period.start_date, today) + 1, total_days)
    if days_passed <= 0:
        return 0.0

    total_spent = total_amount(expenses)
    if days_passed == total_days:
        return total_spent

    daily_average = total_spent / days_passed
    return daily_average * total_days


def calculate_velocity(
    expenses: List[Expense],
    period: Period,
    today: date,
    recent_expenses: Optional[List[Expense]] = None,
    thresholds: EngineThresholds = DEFAULT_THRESHOLDS,
) -> float:
    """
    Ratio of recent daily spend to the overall daily average.

    The overall average uses the period expenses. The trailing window
    (today and the previous window_days - 1 days) reads recent_expenses when
    given, so it can reach back past the period start. >1.0 means spending
    is accelerating.
    """
    today = to_date(today)
    days_passed = max(1, days_between(period.start_date, today) + 1)
    overall_daily_avg = total_amount(expenses) / days_passed

    window_days = thresholds.velocity_window_days
    window_start = today - timedelta(days=window_days - 1)
    source = expenses if recent_expenses is None else recent_expenses
    recent_spent = sum(e.amount for e in source if to_date(e.date) >= window_start)
    recent_daily_avg = recent_spent / window_days

    return recent_daily_avg / overall_daily_avg if overall_daily_avg > 0 else 0.0


def calculate_run_rate_index(
    expenses: List[Expense],
    period: Period,
    monthly_budget: float,
    today: date,
) -> float:
    """Fraction of budget consumed over fraction of time elapsed (>1.0 = burning too fast)"""
    progress = measure_progress(period, to_date(today))
    spend_progress = total_amount(expenses) / monthly_budget if monthly_budget > 0 else 0.0

    if progress.time_progress == 0:
        return 0.0
    return spend_progress / progress.time_progress
