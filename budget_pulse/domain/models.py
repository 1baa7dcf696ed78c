"""Domain models - pure Python dataclasses for the ledger and computed signals"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Literal, Optional

InsightType = Literal["danger", "warning", "positive", "info"]

BEHAVIOR_TAGS = ("Necessity", "Impulse", "Emergency", "Uncategorized")


@dataclass(frozen=True)
class Expense:
    """Single ledger entry, owned by the external ledger"""

    amount: float
    category: str
    date: date
    tags: tuple = ()  # first entry is the behavior tag, if any


@dataclass(frozen=True)
class Period:
    """Inclusive day range a budget cycle covers"""

    start_date: date
    end_date: date

    @property
    def total_days(self) -> int:
        return (self.end_date - self.start_date).days + 1


@dataclass
class BudgetConfig:
    """Overall and per-category budgets (0 means unset)"""

    monthly_budget: float = 0.0
    # Insertion order is the tie-break order for the category insight rules
    category_budgets: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class EngineThresholds:
    """Policy constants for the analytics engine"""

    pace_deviation: float = 0.15
    risk_low_breakpoint: float = 0.85
    risk_high_breakpoint: float = 1.0
    near_limit: float = 0.9
    impulse_share: float = 0.25
    velocity_window_days: int = 3
    streak_lookback_days: int = 365
    streak_limit_divisor: float = 30.0

    def __post_init__(self) -> None:
        # Windows and divisors are denominators in the engine
        if self.velocity_window_days <= 0:
            raise ValueError("velocity_window_days must be positive")
        if self.streak_limit_divisor <= 0:
            raise ValueError("streak_limit_divisor must be positive")
        if self.streak_lookback_days < 0:
            raise ValueError("streak_lookback_days must not be negative")
        if not 0 < self.risk_low_breakpoint < self.risk_high_breakpoint:
            raise ValueError("risk breakpoints must satisfy 0 < low < high")


DEFAULT_THRESHOLDS = EngineThresholds()


@dataclass(frozen=True)
class PeriodProgress:
    """Day counts for a period, measured against a single 'today'"""

    total_days: int
    days_passed: int  # clamped to >= 1
    days_remaining: int  # clamped to >= 0

    @property
    def time_progress(self) -> float:
        return self.days_passed / self.total_days if self.total_days > 0 else 0.0


@dataclass
class Insight:
    """Single prioritized nudge chosen by the rule cascade"""

    type: InsightType
    message: str
    rule: str = ""


@dataclass
class MetricsBundle:
    """Output of one engine computation"""

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
    insight: Insight
    period: Optional[Period] = None
    computed_on: Optional[date] = None


def total_amount(expenses: List[Expense]) -> float:
    """Sum of amounts over a set of expenses"""
    return sum(e.amount for e in expenses)
