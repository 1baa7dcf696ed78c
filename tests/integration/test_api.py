"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def ledger_payload():
    """Ledger crossing the December/January boundary with a January period"""
    return {
        "expenses": [
            {"amount": 500, "category": "Food", "date": "2023-12-28"},
            {"amount": 150, "category": "Food", "date": "2024-01-02"},
            {"amount": 120, "category": "Transport", "date": "2024-01-05", "tags": ["Necessity"]},
            {"amount": 30, "category": "Food", "date": "2024-01-09"},
        ],
        "period": {"start_date": "2024-01-01", "end_date": "2024-01-31"},
        "monthly_budget": 1000,
        "category_budgets": {"Food": 500},
        "now": "2024-01-10",
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "budget_pulse_computations_total" in response.text


def test_compute_metrics_endpoint(client: TestClient, ledger_payload):
    """Test POST /v1/metrics returns the full bundle"""
    response = client.post("/v1/metrics", json=ledger_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["total_spent"] == 300
    assert data["forecast"] == pytest.approx(930.0)
    assert data["risk_band"] == "medium_risk"
    assert data["streak"] == 4
    assert data["days_remaining"] == 22
    assert data["computed_on"] == "2024-01-10"
    assert data["behavior"]["Necessity"] == 120
    assert data["insight"]["type"] == "info"
    assert response.headers["X-Request-ID"]


def test_request_id_is_echoed(client: TestClient, ledger_payload):
    """Test caller-supplied request IDs are kept"""
    response = client.post("/v1/metrics", json=ledger_payload, headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_insight_endpoint_respects_category_order(client: TestClient, ledger_payload):
    """Test JSON key order of category_budgets decides the tie-break"""
    ledger_payload["category_budgets"] = {"Transport": 100, "Food": 150}

    response = client.post("/v1/insight", json=ledger_payload)

    assert response.status_code == 200
    assert response.json() == {
        "type": "danger",
        "message": "Alert: You've exceeded your Transport budget by ₹20.",
        "rule": "category_overflow",
    }


def test_metrics_endpoint_rolls_over_period(client: TestClient, ledger_payload):
    """Test an ended period rolls over to the current month"""
    ledger_payload["period"] = {"start_date": "2023-12-01", "end_date": "2023-12-31"}
    ledger_payload["roll_over_period"] = True

    response = client.post("/v1/metrics", json=ledger_payload)

    assert response.status_code == 200
    assert response.json()["period"] == {"start_date": "2024-01-01", "end_date": "2024-01-31"}


def test_inverted_period_rejected(client: TestClient, ledger_payload):
    """Test period validation maps to 422"""
    ledger_payload["period"] = {"start_date": "2024-02-01", "end_date": "2024-01-01"}

    response = client.post("/v1/metrics", json=ledger_payload)

    assert response.status_code == 422
    assert "after end" in response.json()["detail"]


def test_negative_amount_rejected(client: TestClient, ledger_payload):
    """Test ledger validation maps to 422"""
    ledger_payload["expenses"][0]["amount"] = -5

    response = client.post("/v1/insight", json=ledger_payload)

    assert response.status_code == 422
    assert "negative" in response.json()["detail"]


def test_malformed_body_rejected(client: TestClient):
    """Test schema validation rejects missing period"""
    response = client.post("/v1/metrics", json={"expenses": []})
    assert response.status_code == 422


def test_recovery_limit_endpoint(client: TestClient):
    """Test POST /v1/recovery-limit"""
    response = client.post("/v1/recovery-limit", json={"remaining_budget": 500, "days_remaining": 10})
    assert response.json() == {"smart_daily_limit": 50.0}

    response = client.post("/v1/recovery-limit", json={"remaining_budget": 500, "days_remaining": 0})
    assert response.json() == {"smart_daily_limit": 0.0}
