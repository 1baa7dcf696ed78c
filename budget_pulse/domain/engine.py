"""Analytics engine - assembles every signal for one ledger snapshot"""

from datetime import date, datetime
from typing import List

from budget_pulse.domain.discipline import calculate_streak, generate_recovery_limit
from budget_pulse.domain.forecasting import (
    calculate_forecast,
    calculate_run_rate_index,
    calculate_velocity,
)
from budget_pulse.domain.insights import generate_insight, get_behavior_breakdown
from budget_pulse.domain.models import (
    DEFAULT_THRESHOLDS,
    BudgetConfig,
    EngineThresholds,
    Expense,
    MetricsBundle,
    Period,
    total_amount,
)
from budget_pulse.domain.periods import (
    days_left_including_today,
    filter_to_period,
    resolve_active_period,
)
from budget_pulse.domain.scoring import determine_risk_band, score_projection
from budget_pulse.utils.date_utils import to_date
from budget_pulse.utils.formatting import DEFAULT_CURRENCY_SYMBOL


def compute_metrics(
    ledger: List[Expense],
    period: Period,
    budget: BudgetConfig,
    now: date | datetime,
    thresholds: EngineThresholds = DEFAULT_THRESHOLDS,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    roll_over_period: bool = False,
) -> MetricsBundle:
    """
    Main entry point: compute the full metrics bundle from scratch.

    Flow:
    1. Fix 'today' once from now, shared by every signal below
    2. Optionally roll an ended period over to the current month
    3. Filter the ledger into the period
    4. Period-scoped signals: forecast, risk, run-rate, velocity, insight
    5. Ledger-wide signals: streak, velocity window, behavior tags
    6. Recovery limit over the days left (today included)
    """
    today = to_date(now)
    if roll_over_period:
        period = resolve_active_period(period, today)

    expenses = filter_to_period(ledger, period)
    monthly_budget = budget.monthly_budget
    total_spent = total_amount(expenses)
    remaining_budget = monthly_budget - total_spent

    forecast = calculate_forecast(expenses, period, monthly_budget, today)
    risk_score = score_projection(forecast, monthly_budget, thresholds)

    daily_limit = monthly_budget / thresholds.streak_limit_divisor
    days_remaining = days_left_including_today(period, today)

    return MetricsBundle(
        forecast=forecast,
        velocity=calculate_velocity(expenses, period, today, recent_expenses=ledger, thresholds=thresholds),
        risk_score=risk_score,
        risk_band=determine_risk_band(risk_score),
        run_rate_index=calculate_run_rate_index(expenses, period, monthly_budget, today),
        streak=calculate_streak(ledger, daily_limit, today, thresholds),
        smart_daily_limit=generate_recovery_limit(remaining_budget, days_remaining),
        days_remaining=days_remaining,
        total_spent=total_spent,
        remaining_budget=remaining_budget,
        behavior=get_behavior_breakdown(expenses),
        insight=generate_insight(
            expenses,
            monthly_budget,
            budget.category_budgets,
            period,
            today,
            ledger=ledger,
            thresholds=thresholds,
            currency_symbol=currency_symbol,
        ),
        period=period,
        computed_on=today,
    )
