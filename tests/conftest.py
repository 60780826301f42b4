"""Shared test fixtures for the Ethena calculation engine."""

import pytest

from ethena_engine.config import DeltaSettings, EngineSettings


@pytest.fixture
def delta_settings() -> DeltaSettings:
    """Default hedge monitoring thresholds."""
    return DeltaSettings()


@pytest.fixture
def engine_settings(delta_settings: DeltaSettings) -> EngineSettings:
    """EngineSettings with debug logging and default delta thresholds."""
    return EngineSettings(log_level="DEBUG", delta=delta_settings)
