"""Insight generation - ordered rule cascade producing a single nudge"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Mapping, Optional

from budget_pulse.domain.models import (
    BEHAVIOR_TAGS,
    DEFAULT_THRESHOLDS,
    EngineThresholds,
    Expense,
    Insight,
    Period,
    PeriodProgress,
    total_amount,
)
from budget_pulse.domain.periods import measure_progress
from budget_pulse.utils.formatting import DEFAULT_CURRENCY_SYMBOL, format_currency, format_percent


def sum_by_category(expenses: List[Expense]) -> Dict[str, float]:
    """Total spend per category"""
    totals: Dict[str, float] = {}
    for expense in expenses:
        totals[expense.category] = totals.get(expense.category, 0.0) + expense.amount
    return totals


def get_behavior_breakdown(expenses: List[Expense]) -> Dict[str, float]:
    """
    Spend per behavior tag.

    Each expense is bucketed by its first tag; a missing or unknown tag goes
    to Uncategorized. Buckets are always present, in fixed order.
    """
    breakdown = {tag: 0.0 for tag in BEHAVIOR_TAGS}
    for expense in expenses:
        tag = expense.tags[0] if expense.tags and expense.tags[0] else "Uncategorized"
        if tag not in breakdown:
            tag = "Uncategorized"
        breakdown[tag] += expense.amount
    return breakdown


@dataclass
class InsightContext:
    """Everything the rules look at, computed once per call"""

    total_spent: float
    monthly_budget: float
    category_budgets: Mapping[str, float]
    category_spend: Dict[str, float]
    behavior: Dict[str, float]
    progress: PeriodProgress
    thresholds: EngineThresholds
    currency_symbol: str

    @property
    def spend_progress(self) -> float:
        return self.total_spent / self.monthly_budget if self.monthly_budget > 0 else 0.0

    def money(self, amount: float) -> str:
        return format_currency(amount, self.currency_symbol)


@dataclass(frozen=True)
class InsightRule:
    """Named rule: returns an Insight when it applies, None otherwise"""

    name: str
    evaluate: Callable[[InsightContext], Optional[Insight]]


def _pace_ahead(ctx: InsightContext) -> Optional[Insight]:
    time_progress = ctx.progress.time_progress
    if ctx.monthly_budget > 0 and ctx.spend_progress > time_progress + ctx.thresholds.pace_deviation:
        return Insight(
            type="warning",
            message=(
                f"Pace Alert: You've spent {format_percent(ctx.spend_progress)}% of your budget "
                f"in {format_percent(time_progress)}% of the time."
            ),
        )
    return None


def _pace_behind(ctx: InsightContext) -> Optional[Insight]:
    time_progress = ctx.progress.time_progress
    if ctx.monthly_budget > 0 and ctx.spend_progress < time_progress - ctx.thresholds.pace_deviation:
        return Insight(
            type="positive",
            message="Great job! You're under budget. Consider allocating surplus to savings.",
        )
    return None


def _category_overflow(ctx: InsightContext) -> Optional[Insight]:
    # First category in configured order wins, even if a later one is worse
    for category, budget in ctx.category_budgets.items():
        spent = ctx.category_spend.get(category, 0.0)
        if budget > 0 and spent > budget:
            return Insight(
                type="danger",
                message=f"Alert: You've exceeded your {category} budget by {ctx.money(spent - budget)}.",
            )
    return None


def _category_near_limit(ctx: InsightContext) -> Optional[Insight]:
    near_limit = ctx.thresholds.near_limit
    for category, budget in ctx.category_budgets.items():
        spent = ctx.category_spend.get(category, 0.0)
        if budget > 0 and spent > budget * near_limit:
            return Insight(
                type="warning",
                message=f"Warning: You are at {format_percent(near_limit)}% of your {category} budget.",
            )
    return None


def _impulse_share(ctx: InsightContext) -> Optional[Insight]:
    tagged_total = sum(ctx.behavior.values())
    if tagged_total <= 0:
        return None
    share = ctx.behavior["Impulse"] / tagged_total
    if share > ctx.thresholds.impulse_share:
        return Insight(
            type="warning",
            message=f"Mindful Spending: {format_percent(share)}% of your spending is tagged as Impulse.",
        )
    return None


def _safe_daily_limit(ctx: InsightContext) -> Insight:
    days_remaining = ctx.progress.days_remaining
    daily_safe = max(0.0, (ctx.monthly_budget - ctx.total_spent) / max(1, days_remaining))
    return Insight(
        type="info",
        message=(
            f"Stay on track! Your daily safe limit is {ctx.money(daily_safe)} "
            f"for the next {days_remaining} days."
        ),
    )


INSIGHT_RULES: List[InsightRule] = [
    InsightRule("pace_ahead", _pace_ahead),
    InsightRule("pace_behind", _pace_behind),
    InsightRule("category_overflow", _category_overflow),
    InsightRule("category_near_limit", _category_near_limit),
    InsightRule("impulse_share", _impulse_share),
]

FALLBACK_RULE = InsightRule("safe_daily_limit", _safe_daily_limit)


def generate_insight(
    expenses: List[Expense],
    monthly_budget: float,
    category_budgets: Mapping[str, float],
    period: Period,
    today: date,
    ledger: Optional[List[Expense]] = None,
    thresholds: EngineThresholds = DEFAULT_THRESHOLDS,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> Insight:
    """
    Run the rule cascade and return the first insight that applies.

    Rules, in priority order:
    1. Spend progress ahead of time progress by more than pace_deviation
    2. Spend progress behind time progress by more than pace_deviation
    3. First category (configured order) over its budget
    4. First category (configured order) over near_limit of its budget
    5. Impulse-tagged share of spend above impulse_share
    6. Fallback: safe daily limit for the days remaining

    expenses is the period subset. The tag rule reads ledger when given so
    behavior is judged across period boundaries.
    """
    ctx = InsightContext(
        total_spent=total_amount(expenses),
        monthly_budget=monthly_budget,
        category_budgets=category_budgets,
        category_spend=sum_by_category(expenses),
        behavior=get_behavior_breakdown(expenses if ledger is None else ledger),
        progress=measure_progress(period, today),
        thresholds=thresholds,
        currency_symbol=currency_symbol,
    )

    for rule in INSIGHT_RULES:
        insight = rule.evaluate(ctx)
        if insight is not None:
            insight.rule = rule.name
            return insight

    insight = FALLBACK_RULE.evaluate(ctx)
    insight.rule = FALLBACK_RULE.name
    return insight
