"""Cooldown contract events, decoded into engine records.

The transport layer fetches and ABI-decodes sUSDe logs; this module only
maps an already-decoded event name and argument dict to a typed record.
"""

import time
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from ethena_engine.exceptions import InvalidArgumentError
from ethena_engine.logging import get_logger
from ethena_engine.units import to_decimal

logger = get_logger(__name__)


class CooldownEvent(str, Enum):
    """Cooldown lifecycle events tracked by workflow triggers."""

    INITIATED = "cooldown_initiated"
    COMPLETED = "cooldown_completed"
    CANCELLED = "cooldown_cancelled"
    EXPIRED = "cooldown_expired"


#: Contract event name -> lifecycle event. EXPIRED is derived, never emitted.
CONTRACT_EVENTS: Mapping[str, CooldownEvent] = MappingProxyType(
    {
        "CooldownStarted": CooldownEvent.INITIATED,
        "CooldownCompleted": CooldownEvent.COMPLETED,
        "CooldownCancelled": CooldownEvent.CANCELLED,
    }
)


@dataclass(frozen=True)
class CooldownEventRecord:
    event: CooldownEvent
    user: str
    amount: int  # base units
    timestamp: int  # epoch seconds


def _event_timestamp(event_name: str, raw: Any) -> int | None:
    """Epoch seconds from a log argument, or None when missing or unreadable."""
    if raw is None or raw == "":
        return None
    try:
        value = to_decimal(raw)
    except InvalidArgumentError:
        logger.debug("cooldown_event_bad_timestamp", event_name=event_name, timestamp=repr(raw))
        return None
    return int(value) or None


def parse_cooldown_event(
    event_name: str,
    args: Mapping[str, Any],
    now: int | None = None,
) -> CooldownEventRecord | None:
    """Map a decoded contract log to a CooldownEventRecord.

    Args:
        event_name: Solidity event name (e.g., "CooldownStarted").
        args: Decoded event arguments with ``user``, ``amount`` and
            optionally ``timestamp``.
        now: Fallback timestamp when the log carries none, or one that is
            zero or not a number.

    Returns:
        The parsed record, or None for events unrelated to cooldowns.

    Raises:
        InvalidArgumentError: If ``amount`` is not an integer value.
    """
    event = CONTRACT_EVENTS.get(event_name)
    if event is None:
        logger.debug("cooldown_event_ignored", event_name=event_name)
        return None

    try:
        amount = int(str(args.get("amount", "0")))
    except ValueError as exc:
        raise InvalidArgumentError(
            f"{event_name} amount is not an integer: {args.get('amount')!r}"
        ) from exc

    timestamp = _event_timestamp(event_name, args.get("timestamp"))
    if timestamp is None:
        timestamp = int(time.time()) if now is None else now

    return CooldownEventRecord(
        event=event,
        user=str(args.get("user", "")),
        amount=amount,
        timestamp=timestamp,
    )
