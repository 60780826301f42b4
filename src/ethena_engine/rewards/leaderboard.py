"""Leaderboard position, rank movement and season countdown."""

import time
from decimal import Decimal
from typing import Iterable

from ethena_engine.rewards.models import RankChange, RankDirection, SeasonTimeRemaining
from ethena_engine.units import Numeric, to_decimal


def calculate_percentile(user_sats: Numeric, all_user_sats: Iterable[Numeric]) -> Decimal:
    """Share of the population with strictly fewer sats, as a percent.

    Ties are not counted, so the top holder of a fully tied leaderboard is at
    the 0th percentile. This is the points dashboard's definition, not a
    textbook percentile rank.

    Returns:
        Percent in [0, 100); Decimal("0") for an empty population.
    """
    value = to_decimal(user_sats)
    population = [to_decimal(s) for s in all_user_sats]
    if not population:
        return Decimal("0")

    below = sum(1 for s in population if s < value)
    return Decimal(below) / Decimal(len(population)) * Decimal("100")


def calculate_rank_change(previous_rank: int, current_rank: int) -> RankChange:
    """Leaderboard movement between two snapshots (lower rank is better)."""
    change = previous_rank - current_rank
    if change > 0:
        return RankChange(change=change, direction=RankDirection.UP, formatted=f"↑{change}")
    if change < 0:
        return RankChange(change=change, direction=RankDirection.DOWN, formatted=f"↓{-change}")
    return RankChange(change=0, direction=RankDirection.STABLE, formatted="-")


def get_season_time_remaining(end_time: int, now: int | None = None) -> SeasonTimeRemaining:
    """Countdown to the end of a points season.

    Args:
        end_time: Season end (epoch seconds).
        now: Evaluation time (defaults to the current time).

    Returns:
        Day/hour/minute breakdown; "Season Ended" with zeros once over.
    """
    current = int(time.time()) if now is None else now
    remaining = int(end_time - current)

    if remaining <= 0:
        return SeasonTimeRemaining(days=0, hours=0, minutes=0, formatted="Season Ended")

    days, rest = divmod(remaining, 86400)
    hours, rest = divmod(rest, 3600)
    minutes = rest // 60

    parts: list[str] = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0 or days > 0:
        parts.append(f"{hours}h")
    parts.append(f"{minutes}m")

    return SeasonTimeRemaining(
        days=days, hours=hours, minutes=minutes, formatted=" ".join(parts)
    )
