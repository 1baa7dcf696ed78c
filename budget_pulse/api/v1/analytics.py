"""POST /v1/metrics, /v1/insight, /v1/recovery-limit - budget analytics endpoints"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request

from budget_pulse.api.v1.schemas import (
    InsightSchema,
    LedgerRequest,
    MetricsResponse,
    RecoveryLimitRequest,
    RecoveryLimitResponse,
)
from budget_pulse.api.dependencies import get_request_id, get_settings, get_thresholds
from budget_pulse.config import Settings
from budget_pulse.domain.discipline import generate_recovery_limit
from budget_pulse.domain.engine import compute_metrics
from budget_pulse.domain.exceptions import DomainException
from budget_pulse.domain.insights import generate_insight
from budget_pulse.domain.models import EngineThresholds, Expense, Period
from budget_pulse.domain.periods import (
    filter_to_period,
    resolve_active_period,
    validate_expenses,
    validate_period,
)
from budget_pulse.infrastructure.observability.metrics import record_computation, validation_failure_counter
from budget_pulse.infrastructure.observability.logging import log_metrics_computed

router = APIRouter()


def _validated_inputs(request_body: LedgerRequest) -> tuple[list[Expense], Period]:
    """Run the upstream ledger and period validators"""
    ledger = validate_expenses(e.to_domain() for e in request_body.expenses)
    period = validate_period(request_body.period.to_domain())
    return ledger, period


@router.post("/metrics", response_model=MetricsResponse)
def create_metrics(
    request_body: LedgerRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
    thresholds: EngineThresholds = Depends(get_thresholds),
):
    """
    Compute the full metrics bundle for a ledger snapshot.

    Flow:
    1. Validate ledger amounts and period bounds
    2. Fix the reference day once (request 'now' or today)
    3. Run the engine over the full ledger
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        ledger, period = _validated_inputs(request_body)
        now = request_body.now or date.today()

        bundle = compute_metrics(
            ledger,
            period,
            request_body.budget(),
            now,
            thresholds=thresholds,
            currency_symbol=settings.currency_symbol,
            roll_over_period=request_body.roll_over_period,
        )

        duration_ms = (time.time() - start_time) * 1000
        record_computation(bundle.insight.type, bundle.insight.rule, bundle.risk_score, bundle.risk_band)
        log_metrics_computed(
            request_id,
            len(ledger),
            bundle.insight.type,
            bundle.insight.rule,
            bundle.risk_band,
            duration_ms,
        )

        return MetricsResponse.from_bundle(bundle)

    except DomainException as e:
        validation_failure_counter.inc()
        logging.warning(f"Invalid ledger input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/insight", response_model=InsightSchema)
def create_insight(
    request_body: LedgerRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
    thresholds: EngineThresholds = Depends(get_thresholds),
):
    """Run only the insight cascade for a ledger snapshot"""
    request_id = get_request_id(request)

    try:
        ledger, period = _validated_inputs(request_body)
    except DomainException as e:
        validation_failure_counter.inc()
        logging.warning(f"Invalid ledger input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    today = request_body.now or date.today()
    if request_body.roll_over_period:
        period = resolve_active_period(period, today)

    budget = request_body.budget()
    insight = generate_insight(
        filter_to_period(ledger, period),
        budget.monthly_budget,
        budget.category_budgets,
        period,
        today,
        ledger=ledger,
        thresholds=thresholds,
        currency_symbol=settings.currency_symbol,
    )
    return InsightSchema(type=insight.type, message=insight.message, rule=insight.rule)


@router.post("/recovery-limit", response_model=RecoveryLimitResponse)
def create_recovery_limit(request_body: RecoveryLimitRequest):
    """Spread a remaining budget over the remaining days"""
    limit = generate_recovery_limit(request_body.remaining_budget, request_body.days_remaining)
    return RecoveryLimitResponse(smart_daily_limit=limit)
