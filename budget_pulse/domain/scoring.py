"""Overflow risk scoring - maps projected spend against the budget to 0..100"""

from datetime import date
from typing import List

from budget_pulse.domain.forecasting import calculate_forecast
from budget_pulse.domain.models import DEFAULT_THRESHOLDS, EngineThresholds, Expense, Period

# Zone ceilings of the piecewise mapping
LOW_RISK_CEILING = 30.0
MEDIUM_RISK_CEILING = 70.0
MAX_RISK = 100.0

LOW_ZONE_SLOPE = 35.0  # score per unit of ratio below the low breakpoint
HIGH_ZONE_SLOPE = 100.0  # score per unit of ratio past the budget


def score_projection(
    forecast: float,
    monthly_budget: float,
    thresholds: EngineThresholds = DEFAULT_THRESHOLDS,
) -> float:
    """
    Map projected spend / budget to a risk score.

    Zones:
    - ratio < 0.85:        0 - 30  (low risk, on course to finish under budget)
    - 0.85 <= ratio < 1.0: 30 - 70 (medium risk, closing in on the budget)
    - ratio >= 1.0:        70 - 100 (high risk, projected to overflow)

    An unset budget (0) is maximal risk rather than missing data.
    """
    if monthly_budget <= 0:
        return MAX_RISK

    ratio = forecast / monthly_budget
    low = thresholds.risk_low_breakpoint
    high = thresholds.risk_high_breakpoint

    if ratio < low:
        return min(LOW_RISK_CEILING, ratio * LOW_ZONE_SLOPE)
    elif ratio < high:
        span = MEDIUM_RISK_CEILING - LOW_RISK_CEILING
        return LOW_RISK_CEILING + ((ratio - low) / (high - low)) * span
    else:
        return min(MAX_RISK, MEDIUM_RISK_CEILING + (ratio - high) * HIGH_ZONE_SLOPE)


def calculate_risk_score(
    expenses: List[Expense],
    monthly_budget: float,
    period: Period,
    today: date,
    thresholds: EngineThresholds = DEFAULT_THRESHOLDS,
) -> float:
    """Forecast the period, then score the projection against the budget"""
    forecast = calculate_forecast(expenses, period, monthly_budget, today)
    return score_projection(forecast, monthly_budget, thresholds)


def determine_risk_band(score: float) -> str:
    """
    Map risk score to a named band.

    - 0 - 30:   low_risk
    - 30 - 70:  medium_risk
    - 70+:      high_risk
    """
    if score < LOW_RISK_CEILING:
        return "low_risk"
    elif score < MEDIUM_RISK_CEILING:
        return "medium_risk"
    else:
        return "high_risk"
