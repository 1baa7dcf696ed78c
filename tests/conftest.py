"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from budget_pulse.api.main import create_app
from budget_pulse.domain.models import BudgetConfig, Expense, Period


# Fixed reference day so nothing depends on the wall clock
TODAY = date(2024, 1, 10)
JANUARY = Period(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31))


def make_expense(amount: float, day: date, category: str = "Food", tag: str | None = None) -> Expense:
    """Build an expense with an optional behavior tag"""
    return Expense(amount=amount, category=category, date=day, tags=(tag,) if tag else ())


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def january() -> Period:
    return JANUARY


@pytest.fixture
def sample_ledger() -> list[Expense]:
    """
    Ledger spanning the December/January boundary.

    January spend to date is 300; the December entry sits outside the period.
    """
    return [
        make_expense(500, date(2023, 12, 28), "Food"),
        make_expense(150, date(2024, 1, 2), "Food"),
        make_expense(120, date(2024, 1, 5), "Transport"),
        make_expense(30, date(2024, 1, 9), "Food"),
    ]


@pytest.fixture
def sample_budget() -> BudgetConfig:
    return BudgetConfig(monthly_budget=1000, category_budgets={"Food": 500})
