"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from budget_pulse.config import Settings, settings
from budget_pulse.domain.models import EngineThresholds


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide application settings"""
    return settings


def get_thresholds() -> EngineThresholds:
    """Provide engine policy constants from settings"""
    return settings.thresholds()
