"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "budget-pulse"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_metrics_computed(
    request_id: str,
    expense_count: int,
    insight_type: str,
    insight_rule: str,
    risk_band: str,
    duration_ms: float,
) -> None:
    """Log structured computation outcome for analysis"""
    logging.info(
        "Metrics computed",
        extra={
            "request_id": request_id,
            "step": "metrics_complete",
            "expense_count": expense_count,
            "insight_type": insight_type,
            "insight_rule": insight_rule,
            "risk_band": risk_band,
            "duration_ms": duration_ms,
        },
    )
