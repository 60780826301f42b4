"""Cooldown status for sUSDe unstaking.

Redeeming sUSDe for USDe requires a cooldown: the user locks shares, waits
out the cooldown window, then withdraws. Lock, withdrawal and cancellation
are external events. This module only classifies a window at query time:

    INACTIVE      no lock (start_time == 0 or nothing locked)
    LOCKED        lock active, now < end_time
    WITHDRAWABLE  lock active, now >= end_time

Timestamps are epoch seconds; amounts are integer base units.
"""

import time
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Final

#: Protocol cooldown duration (7 days).
DEFAULT_COOLDOWN_DURATION: Final[int] = 7 * 24 * 60 * 60

_SECONDS_PER_DAY = 86400
_SECONDS_PER_HOUR = 3600
_SECONDS_PER_MINUTE = 60
_PROGRESS_QUANTIZE = Decimal("0.01")
_HUNDRED = Decimal("100")


class CooldownState(str, Enum):
    """Lifecycle state of a cooldown window at a point in time."""

    INACTIVE = "inactive"
    LOCKED = "locked"
    WITHDRAWABLE = "withdrawable"


@dataclass(frozen=True)
class CooldownWindow:
    """On-chain cooldown record for one account."""

    start_time: int
    end_time: int
    locked_amount: int


@dataclass(frozen=True)
class CooldownStatus:
    """Derived cooldown state for display and withdrawal gating."""

    is_active: bool
    start_time: int
    end_time: int
    amount: int
    can_withdraw: bool
    remaining_seconds: int
    remaining_formatted: str
    progress: Decimal  # percent, 0-100
    state: CooldownState


@dataclass(frozen=True)
class CooldownValidation:
    """Result of checking a requested cooldown amount."""

    is_valid: bool
    max_amount: int
    error: str | None = None


def _now(now: int | None) -> int:
    return int(time.time()) if now is None else now


def calculate_cooldown_status(
    start_time: int,
    end_time: int,
    amount: int,
    now: int | None = None,
) -> CooldownStatus:
    """Derive cooldown status from the on-chain window.

    is_active = start_time > 0 and amount > 0
    can_withdraw = is_active and now >= end_time
    progress = clamp((now - start) / (end - start) * 100, 0, 100), rounded
    half-up to 2 places, 0 when the window has zero length.

    Args:
        start_time: Cooldown start (epoch seconds, 0 when none).
        end_time: Cooldown end (epoch seconds).
        amount: Locked amount in base units.
        now: Evaluation time (defaults to the current time).

    Returns:
        CooldownStatus for the window at ``now``.
    """
    current = _now(now)

    is_active = start_time > 0 and amount > 0
    can_withdraw = is_active and current >= end_time
    remaining_seconds = max(0, end_time - current)

    duration = end_time - start_time
    if duration > 0:
        raw = Decimal(current - start_time) / Decimal(duration) * _HUNDRED
        progress = min(max(raw, Decimal("0")), _HUNDRED)
    else:
        progress = Decimal("0")

    if not is_active:
        state = CooldownState.INACTIVE
    elif can_withdraw:
        state = CooldownState.WITHDRAWABLE
    else:
        state = CooldownState.LOCKED

    return CooldownStatus(
        is_active=is_active,
        start_time=start_time,
        end_time=end_time,
        amount=amount,
        can_withdraw=can_withdraw,
        remaining_seconds=remaining_seconds,
        remaining_formatted=format_duration(remaining_seconds),
        progress=progress.quantize(_PROGRESS_QUANTIZE, rounding=ROUND_HALF_UP),
        state=state,
    )


def classify_cooldown(window: CooldownWindow, now: int | None = None) -> CooldownState:
    """State of a cooldown window at ``now``."""
    return calculate_cooldown_status(
        window.start_time, window.end_time, window.locked_amount, now
    ).state


def format_duration(seconds: int) -> str:
    """Human-readable remaining time.

    "Ready" when nothing remains; otherwise "1d 2h 3m". Seconds are shown
    only for durations under a day ("1h 1m 5s").
    """
    if seconds <= 0:
        return "Ready"

    seconds = int(seconds)
    days = seconds // _SECONDS_PER_DAY
    hours = (seconds % _SECONDS_PER_DAY) // _SECONDS_PER_HOUR
    minutes = (seconds % _SECONDS_PER_HOUR) // _SECONDS_PER_MINUTE
    secs = seconds % _SECONDS_PER_MINUTE

    parts: list[str] = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 and days == 0:
        parts.append(f"{secs}s")

    return " ".join(parts) or "0s"


def is_cooldown_complete(end_time: int, now: int | None = None) -> bool:
    """True once ``now`` has reached the end of the cooldown window."""
    return _now(now) >= end_time


def validate_cooldown_amount(
    requested_amount: int,
    available_balance: int,
    existing_cooldown_amount: int,
) -> CooldownValidation:
    """Check a cooldown request against the unlocked balance.

    The ceiling is available_balance - existing_cooldown_amount.

    Returns:
        CooldownValidation; max_amount is always the ceiling.
    """
    available_for_cooldown = available_balance - existing_cooldown_amount

    if requested_amount <= 0:
        return CooldownValidation(
            is_valid=False,
            max_amount=available_for_cooldown,
            error="Amount must be >0",
        )

    if requested_amount > available_for_cooldown:
        return CooldownValidation(
            is_valid=False,
            max_amount=available_for_cooldown,
            error=f"Insufficient balance. Maximum available: {available_for_cooldown}",
        )

    return CooldownValidation(is_valid=True, max_amount=available_for_cooldown)
