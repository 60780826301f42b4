"""Cooldown timing helpers and batch status evaluation."""

import time
from typing import Iterable, Mapping

from ethena_engine.cooldown.status import (
    DEFAULT_COOLDOWN_DURATION,
    CooldownStatus,
    CooldownWindow,
    calculate_cooldown_status,
)


def calculate_cooldown_end(
    start_time: int,
    duration: int = DEFAULT_COOLDOWN_DURATION,
) -> int:
    """Epoch second at which a cooldown started at ``start_time`` completes."""
    return start_time + duration


def calculate_optimal_cooldown_start(
    target_withdraw_time: int,
    duration: int = DEFAULT_COOLDOWN_DURATION,
) -> int:
    """Latest start time that still allows withdrawal at the target time.

    Starting any earlier forfeits staking yield for no benefit.
    """
    return target_withdraw_time - duration


def batch_cooldown_status(
    windows: Mapping[str, CooldownWindow] | Iterable[tuple[str, CooldownWindow]],
    now: int | None = None,
) -> dict[str, CooldownStatus]:
    """Evaluate cooldown status for many accounts at a single instant.

    All windows share one ``now`` so the results are mutually consistent.

    Args:
        windows: Account -> window mapping, or (account, window) pairs.
        now: Evaluation time (defaults to the current time).

    Returns:
        Account -> CooldownStatus. A repeated account keeps its last window.
    """
    current = int(time.time()) if now is None else now
    items = windows.items() if isinstance(windows, Mapping) else windows

    return {
        user: calculate_cooldown_status(
            window.start_time, window.end_time, window.locked_amount, current
        )
        for user, window in items
    }
