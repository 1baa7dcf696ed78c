"""Unit tests for streak and recovery limit"""

import pytest
from datetime import date
from budget_pulse.domain.discipline import (
    calculate_streak,
    generate_recovery_limit,
    group_spend_by_day,
)
from budget_pulse.domain.models import EngineThresholds
from tests.conftest import TODAY, make_expense


def test_streak_stops_at_first_day_over_limit():
    """Test [40, 60, 10] walking back from yesterday gives a streak of 1"""
    ledger = [
        make_expense(40, date(2024, 1, 9)),
        make_expense(60, date(2024, 1, 8)),
        make_expense(10, date(2024, 1, 7)),
    ]

    assert calculate_streak(ledger, 50, TODAY) == 1


def test_streak_spend_equal_to_limit_qualifies():
    """Test ties count as qualifying days"""
    ledger = [
        make_expense(50, date(2024, 1, 9)),
        make_expense(25, date(2024, 1, 8)),
        make_expense(25, date(2024, 1, 8)),
        make_expense(51, date(2024, 1, 7)),
    ]

    assert calculate_streak(ledger, 50, TODAY) == 2


def test_streak_sums_same_day_expenses():
    """Test per-day totals, not individual expenses, are compared"""
    ledger = [make_expense(30, date(2024, 1, 9)), make_expense(30, date(2024, 1, 9))]
    assert calculate_streak(ledger, 50, TODAY) == 0


def test_streak_ignores_today():
    """Test today's spend never breaks the streak"""
    ledger = [make_expense(1000, TODAY), make_expense(80, date(2024, 1, 6))]

    # Jan 9, 8, 7 are empty and qualify; Jan 6 breaks
    assert calculate_streak(ledger, 50, TODAY) == 3


def test_streak_empty_ledger_hits_lookback_cap():
    """Test empty days qualify until the lookback cap"""
    assert calculate_streak([], 50, TODAY) == 365
    assert calculate_streak([], 50, TODAY, EngineThresholds(streak_lookback_days=30)) == 30


def test_streak_spans_period_boundaries():
    """Test the full ledger is walked across month boundaries"""
    ledger = [make_expense(10, date(2023, 12, d)) for d in range(1, 32)]
    ledger.append(make_expense(500, date(2023, 11, 30)))

    # Jan 1-9 empty (9 days) + all of December (31 days)
    assert calculate_streak(ledger, 50, TODAY) == 40


@pytest.mark.parametrize("daily_limit", [0, -10])
def test_streak_without_limit_is_zero(daily_limit):
    """Test an unset limit never claims a streak"""
    assert calculate_streak([make_expense(1, date(2024, 1, 9))], daily_limit, TODAY) == 0


def test_group_spend_by_day():
    """Test grouping sums amounts per calendar day"""
    ledger = [
        make_expense(10, date(2024, 1, 9)),
        make_expense(15, date(2024, 1, 9)),
        make_expense(7, date(2024, 1, 3)),
    ]

    assert group_spend_by_day(ledger) == {date(2024, 1, 9): 25, date(2024, 1, 3): 7}


def test_recovery_limit_spreads_remaining_budget():
    """Test remaining budget divided evenly over remaining days"""
    assert generate_recovery_limit(500, 10) == 50


@pytest.mark.parametrize("remaining", [500, 0, -100])
def test_recovery_limit_no_days_left(remaining):
    """Test zero days remaining gives zero regardless of budget sign"""
    assert generate_recovery_limit(remaining, 0) == 0


def test_recovery_limit_overspent_is_zero():
    """Test a negative remaining budget never gives a negative limit"""
    assert generate_recovery_limit(-100, 5) == 0
