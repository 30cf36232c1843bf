"""Engine settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class EngineSettings(BaseSettings):
    """Engine configuration loaded from ``ROI_*`` environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")

    # Projection bounds
    default_horizon_years: int = Field(default=30, ge=1, le=100)
    max_horizon_years: int = Field(default=100, ge=1, description="Largest horizon accepted by validation")

    # Chart views
    max_annualized_rate_pct: float = Field(default=500.0, gt=0, description="Clamp for annualized return %")
    default_inflation_rate: float = Field(default=0.03, ge=0, le=1)

    # Export
    export_dir: str = Field(default="results", description="Directory for exported projections")

    model_config = {
        "env_prefix": "ROI_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached engine settings."""
    return EngineSettings()
