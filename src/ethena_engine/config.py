"""Configuration system using pydantic-settings with environment variable loading."""

from decimal import Decimal
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeltaSettings(BaseSettings):
    """Hedge monitoring thresholds for the delta-neutral analyzer."""

    model_config = SettingsConfigDict(env_prefix="DELTA_")

    neutral_tolerance: Decimal = Field(default=Decimal("0.01"), ge=0)  # |delta| <= 1%
    rebalance_threshold: Decimal = Field(default=Decimal("0.02"), ge=0)  # 2% drift
    max_rebalance_interval: int = Field(default=86400, gt=0)  # seconds (24h)
    funding_intervals_per_year: int = Field(default=1095, gt=0)  # 3 per day * 365
    base_slippage: Decimal = Field(default=Decimal("0.001"), ge=0)  # 0.1%


class EngineSettings(BaseSettings):
    """Root engine settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["console", "json"] = "console"  # LOG_FORMAT
    delta: DeltaSettings = DeltaSettings()
