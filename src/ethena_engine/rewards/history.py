"""Parsing of sats history records returned by the points API."""

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from ethena_engine.exceptions import InvalidArgumentError
from ethena_engine.rewards.models import SatsActivity, SatsHistoryEntry
from ethena_engine.units import to_decimal


def parse_sats_history(history: Iterable[Mapping[str, Any]]) -> list[SatsHistoryEntry]:
    """Convert raw history rows into typed entries.

    Each row carries ``timestamp`` (epoch seconds), ``activity``, ``amount``
    and ``multiplier``. Order is preserved.

    Raises:
        InvalidArgumentError: If a row names an unknown activity.
    """
    entries: list[SatsHistoryEntry] = []
    for row in history:
        try:
            activity = SatsActivity(row["activity"])
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Unknown sats activity: {row['activity']!r}"
            ) from exc

        entries.append(
            SatsHistoryEntry(
                date=datetime.fromtimestamp(int(row["timestamp"]), tz=timezone.utc),
                activity=activity,
                sats_earned=to_decimal(row["amount"]),
                multiplier=to_decimal(row.get("multiplier", 1)),
            )
        )
    return entries
