"""Tests for environment-driven engine settings."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from ethena_engine.config import DeltaSettings, EngineSettings


class TestDeltaSettings:
    def test_defaults(self, delta_settings: DeltaSettings) -> None:
        assert delta_settings.neutral_tolerance == Decimal("0.01")
        assert delta_settings.rebalance_threshold == Decimal("0.02")
        assert delta_settings.max_rebalance_interval == 86400
        assert delta_settings.funding_intervals_per_year == 1095
        assert delta_settings.base_slippage == Decimal("0.001")

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DELTA_REBALANCE_THRESHOLD", "0.05")
        monkeypatch.setenv("DELTA_MAX_REBALANCE_INTERVAL", "3600")
        settings = DeltaSettings()
        assert settings.rebalance_threshold == Decimal("0.05")
        assert settings.max_rebalance_interval == 3600

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DeltaSettings(rebalance_threshold=Decimal("-0.01"))

    def test_zero_interval_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DeltaSettings(funding_intervals_per_year=0)


class TestEngineSettings:
    def test_composes_delta_settings(self, engine_settings: EngineSettings) -> None:
        assert engine_settings.log_level == "DEBUG"
        assert engine_settings.delta.rebalance_threshold == Decimal("0.02")

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DELTA__NEUTRAL_TOLERANCE", "0.005")
        settings = EngineSettings()
        assert settings.delta.neutral_tolerance == Decimal("0.005")
        assert settings.delta.rebalance_threshold == Decimal("0.02")
