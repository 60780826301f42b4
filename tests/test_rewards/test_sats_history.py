"""Tests for parsing sats history rows."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from ethena_engine.exceptions import InvalidArgumentError
from ethena_engine.rewards import SatsActivity, parse_sats_history


class TestParseSatsHistory:
    def test_parses_rows_in_order(self) -> None:
        rows = [
            {"timestamp": 1704067200, "activity": "hold_usde", "amount": "12.5", "multiplier": "1.25"},
            {"timestamp": 1704153600, "activity": "stake_susde", "amount": 40, "multiplier": 2},
        ]
        entries = parse_sats_history(rows)
        assert [e.activity for e in entries] == [SatsActivity.HOLD_USDE, SatsActivity.STAKE_SUSDE]
        assert entries[0].date == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert entries[0].sats_earned == Decimal("12.5")
        assert entries[0].multiplier == Decimal("1.25")
        assert entries[1].sats_earned == Decimal("40")

    def test_multiplier_defaults_to_one(self) -> None:
        entries = parse_sats_history([{"timestamp": 0, "activity": "referral", "amount": "5"}])
        assert entries[0].multiplier == Decimal("1")

    def test_unknown_activity(self) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_sats_history([{"timestamp": 0, "activity": "mining", "amount": "1"}])

    def test_empty(self) -> None:
        assert parse_sats_history([]) == []
