"""Cooldown state machine for sUSDe unstaking.

Classifies a cooldown window as inactive, locked or withdrawable at query
time; the engine never tracks the lifecycle itself.
"""

from ethena_engine.cooldown.events import (
    CONTRACT_EVENTS,
    CooldownEvent,
    CooldownEventRecord,
    parse_cooldown_event,
)
from ethena_engine.cooldown.schedule import (
    batch_cooldown_status,
    calculate_cooldown_end,
    calculate_optimal_cooldown_start,
)
from ethena_engine.cooldown.status import (
    DEFAULT_COOLDOWN_DURATION,
    CooldownState,
    CooldownStatus,
    CooldownValidation,
    CooldownWindow,
    calculate_cooldown_status,
    classify_cooldown,
    format_duration,
    is_cooldown_complete,
    validate_cooldown_amount,
)

__all__ = [
    "CONTRACT_EVENTS",
    "DEFAULT_COOLDOWN_DURATION",
    "CooldownEvent",
    "CooldownEventRecord",
    "CooldownState",
    "CooldownStatus",
    "CooldownValidation",
    "CooldownWindow",
    "batch_cooldown_status",
    "calculate_cooldown_end",
    "calculate_cooldown_status",
    "calculate_optimal_cooldown_start",
    "classify_cooldown",
    "format_duration",
    "is_cooldown_complete",
    "parse_cooldown_event",
    "validate_cooldown_amount",
]
