"""Tests for JSON-ready conversion of engine results."""

import json
from datetime import datetime, timezone
from decimal import Decimal

from ethena_engine.delta import RebalanceAction, RebalancePlan, calculate_counterparty_risk
from ethena_engine.delta.models import ExchangeExposure
from ethena_engine.rewards import MULTIPLIER_TIERS, SatsActivity, SatsHistoryEntry
from ethena_engine.serialization import to_jsonable


class TestToJsonable:
    def test_dataclass_with_enum_and_decimal(self) -> None:
        plan = RebalancePlan(
            action=RebalanceAction.INCREASE_SHORT,
            amount=Decimal("500"),
            new_perp_value=Decimal("-1000"),
        )
        assert to_jsonable(plan) == {
            "action": "increase_short",
            "amount": "500",
            "new_perp_value": "-1000",
        }

    def test_nested_dataclass(self) -> None:
        risk = calculate_counterparty_risk(
            [ExchangeExposure("binance", Decimal("600")), ExchangeExposure("bybit", Decimal("400"))]
        )
        result = to_jsonable(risk)
        assert {k: Decimal(v) for k, v in result["distribution"].items()} == {
            "binance": Decimal("60"),
            "bybit": Decimal("40"),
        }
        assert result["largest_exposure"]["exchange"] == "binance"
        assert Decimal(result["largest_exposure"]["percent"]) == Decimal("60")
        assert Decimal(result["concentration"]) == Decimal("0.52")

    def test_read_only_mapping_with_enum_keys(self) -> None:
        result = to_jsonable(MULTIPLIER_TIERS)
        assert result["diamond"] == "5.0"
        assert result["base"] == "1.0"

    def test_datetime_is_iso(self) -> None:
        entry = SatsHistoryEntry(
            date=datetime(2024, 1, 1, tzinfo=timezone.utc),
            activity=SatsActivity.HOLD_USDE,
            sats_earned=Decimal("12.5"),
            multiplier=Decimal("1"),
        )
        assert to_jsonable(entry)["date"] == "2024-01-01T00:00:00+00:00"

    def test_lists_and_tuples_become_lists(self) -> None:
        assert to_jsonable((Decimal("1"), [Decimal("2")])) == ["1", ["2"]]

    def test_output_is_json_serializable(self) -> None:
        plan = RebalancePlan(RebalanceAction.NONE, Decimal("0"), Decimal("-1000"))
        assert json.loads(json.dumps(to_jsonable(plan)))["action"] == "none"

    def test_primitives_unchanged(self) -> None:
        assert to_jsonable(None) is None
        assert to_jsonable(3) == 3
        assert to_jsonable("x") == "x"
        assert to_jsonable(True) is True
