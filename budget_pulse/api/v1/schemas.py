"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import Dict, List, Optional

from budget_pulse.domain.models import BudgetConfig, Expense, MetricsBundle, Period


class ExpenseSchema(BaseModel):
    """Single ledger entry"""

    amount: float = Field(..., description="Amount spent; value checks happen in the domain validators")
    category: str = Field(..., min_length=1)
    date: date
    tags: List[str] = Field(default_factory=list, description="First tag is the behavior tag")

    def to_domain(self) -> Expense:
        return Expense(amount=self.amount, category=self.category, date=self.date, tags=tuple(self.tags))


class PeriodSchema(BaseModel):
    """Inclusive budget period"""

    start_date: date
    end_date: date

    def to_domain(self) -> Period:
        return Period(start_date=self.start_date, end_date=self.end_date)


class LedgerRequest(BaseModel):
    """Request body for POST /v1/metrics and POST /v1/insight"""

    expenses: List[ExpenseSchema] = Field(default_factory=list, description="Full, unfiltered ledger")
    period: PeriodSchema
    monthly_budget: float = Field(0.0, ge=0, description="0 means unset")
    category_budgets: Dict[str, float] = Field(
        default_factory=dict,
        description="Category budgets; key order is the tie-break order for category insights",
    )
    now: Optional[date] = Field(None, description="Reference day; defaults to today")
    roll_over_period: bool = False

    def budget(self) -> BudgetConfig:
        return BudgetConfig(monthly_budget=self.monthly_budget, category_budgets=dict(self.category_budgets))


class InsightSchema(BaseModel):
    """Single prioritized insight"""

    type: str
    message: str
    rule: str


class MetricsResponse(BaseModel):
    """Response for POST /v1/metrics"""

    forecast: float
    velocity: float
    risk_score: float
    risk_band: str
    run_rate_index: float
    streak: int
    smart_daily_limit: float
    days_remaining: int
    total_spent: float
    remaining_budget: float
    behavior: Dict[str, float]
    insight: InsightSchema
    period: PeriodSchema
    computed_on: date

    @classmethod
    def from_bundle(cls, bundle: MetricsBundle) -> "MetricsResponse":
        return cls(
            forecast=bundle.forecast,
            velocity=bundle.velocity,
            risk_score=bundle.risk_score,
            risk_band=bundle.risk_band,
            run_rate_index=bundle.run_rate_index,
            streak=bundle.streak,
            smart_daily_limit=bundle.smart_daily_limit,
            days_remaining=bundle.days_remaining,
            total_spent=bundle.total_spent,
            remaining_budget=bundle.remaining_budget,
            behavior=bundle.behavior,
            insight=InsightSchema(
                type=bundle.insight.type,
                message=bundle.insight.message,
                rule=bundle.insight.rule,
            ),
            period=PeriodSchema(start_date=bundle.period.start_date, end_date=bundle.period.end_date),
            computed_on=bundle.computed_on,
        )


class RecoveryLimitRequest(BaseModel):
    """Request body for POST /v1/recovery-limit"""

    remaining_budget: float
    days_remaining: int


class RecoveryLimitResponse(BaseModel):
    """Response for POST /v1/recovery-limit"""

    smart_daily_limit: float
