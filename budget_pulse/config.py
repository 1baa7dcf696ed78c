"""Configuration management using Pydantic Settings"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from budget_pulse.domain.models import EngineThresholds


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "budget-pulse"
    log_level: str = "INFO"

    # Presentation
    currency_symbol: str = "₹"

    # Insight cascade
    pace_deviation_threshold: float = Field(0.15, ge=0, le=1)
    near_limit_threshold: float = Field(0.9, ge=0, le=1)
    impulse_share_threshold: float = Field(0.25, ge=0, le=1)

    # Risk score breakpoints (projected spend / budget)
    risk_low_breakpoint: float = Field(0.85, gt=0)
    risk_high_breakpoint: float = Field(1.0, gt=0)

    # Windows
    velocity_window_days: int = Field(3, gt=0)
    streak_lookback_days: int = Field(365, ge=0)
    streak_limit_divisor: float = Field(30.0, gt=0)  # monthly budget -> approximate daily limit

    @model_validator(mode="after")
    def check_breakpoint_order(self) -> "Settings":
        if self.risk_low_breakpoint >= self.risk_high_breakpoint:
            raise ValueError("risk_low_breakpoint must be below risk_high_breakpoint")
        return self

    def thresholds(self) -> EngineThresholds:
        """Policy constants handed to the engine"""
        return EngineThresholds(
            pace_deviation=self.pace_deviation_threshold,
            risk_low_breakpoint=self.risk_low_breakpoint,
            risk_high_breakpoint=self.risk_high_breakpoint,
            near_limit=self.near_limit_threshold,
            impulse_share=self.impulse_share_threshold,
            velocity_window_days=self.velocity_window_days,
            streak_lookback_days=self.streak_lookback_days,
            streak_limit_divisor=self.streak_limit_divisor,
        )


settings = Settings()
