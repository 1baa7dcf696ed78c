"""Prometheus metrics for monitoring insight mix, risk distribution and latency"""

from prometheus_client import Counter, Histogram

# Computation metrics
computation_counter = Counter(
    "budget_pulse_computations_total",
    "Total metrics bundles computed",
    ["insight_type"],  # danger | warning | positive | info
)

insight_rule_counter = Counter(
    "budget_pulse_insight_rule_total",
    "Insights surfaced by cascade rule",
    ["rule"],
)

risk_score_histogram = Histogram(
    "budget_pulse_risk_score",
    "Distribution of computed risk scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

risk_band_counter = Counter(
    "budget_pulse_risk_band_total",
    "Computations by risk band",
    ["band"],  # low_risk | medium_risk | high_risk
)

validation_failure_counter = Counter(
    "budget_pulse_validation_failures_total",
    "Requests rejected by ledger or period validation",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_computation(insight_type: str, insight_rule: str, risk_score: float, risk_band: str) -> None:
    """Record one engine computation"""
    computation_counter.labels(insight_type=insight_type).inc()
    insight_rule_counter.labels(rule=insight_rule).inc()
    risk_score_histogram.observe(risk_score)
    risk_band_counter.labels(band=risk_band).inc()
