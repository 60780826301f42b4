"""Sats points program: activities, tiers and result records.

CRITICAL: Sats amounts and multipliers use Decimal. The constant tables are
read-only (tuples and MappingProxyType).
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class SatsActivity(str, Enum):
    """Activities that accrue sats."""

    HOLD_USDE = "hold_usde"
    STAKE_SUSDE = "stake_susde"
    PROVIDE_LIQUIDITY = "provide_liquidity"
    REFERRAL = "referral"
    EARLY_ADOPTER = "early_adopter"
    DEFI_INTEGRATION = "defi_integration"
    GOVERNANCE = "governance"
    SPECIAL_EVENT = "special_event"


class Tier(str, Enum):
    """Multiplier tiers, declared lowest to highest."""

    BASE = "base"
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"

    @property
    def rank(self) -> int:
        """Position in the tier ladder (base = 0). Use this, not str order."""
        return list(Tier).index(self)


class RankDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class TierLevel:
    """Entry of the tier table: minimum sats and earning multiplier."""

    tier: Tier
    threshold: Decimal
    multiplier: Decimal


#: Tier table, highest threshold first (search order).
TIER_LEVELS: tuple[TierLevel, ...] = (
    TierLevel(Tier.DIAMOND, Decimal("1000000"), Decimal("5.0")),
    TierLevel(Tier.PLATINUM, Decimal("500000"), Decimal("3.0")),
    TierLevel(Tier.GOLD, Decimal("100000"), Decimal("2.0")),
    TierLevel(Tier.SILVER, Decimal("25000"), Decimal("1.5")),
    TierLevel(Tier.BRONZE, Decimal("5000"), Decimal("1.25")),
    TierLevel(Tier.BASE, Decimal("0"), Decimal("1.0")),
)

MULTIPLIER_TIERS: Mapping[Tier, Decimal] = MappingProxyType(
    {level.tier: level.multiplier for level in reversed(TIER_LEVELS)}
)

#: Sats earned per $1000 of activity per day.
BASE_EARNING_RATES: Mapping[SatsActivity, Decimal] = MappingProxyType(
    {
        SatsActivity.HOLD_USDE: Decimal("10"),
        SatsActivity.STAKE_SUSDE: Decimal("20"),
        SatsActivity.PROVIDE_LIQUIDITY: Decimal("30"),
        SatsActivity.REFERRAL: Decimal("5"),
        SatsActivity.EARLY_ADOPTER: Decimal("15"),
        SatsActivity.DEFI_INTEGRATION: Decimal("25"),
        SatsActivity.GOVERNANCE: Decimal("10"),
        SatsActivity.SPECIAL_EVENT: Decimal("50"),
    }
)


@dataclass(frozen=True)
class ActivityStake:
    """USD value committed to one sats-earning activity."""

    activity: SatsActivity
    amount: Decimal  # USD value
    multiplier: Decimal = Decimal("1")


@dataclass(frozen=True)
class SatsBalance:
    """Snapshot of an account's sats from the points API."""

    total: Decimal
    breakdown: Mapping[SatsActivity, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class TierInfo:
    tier: Tier
    multiplier: Decimal
    next_tier: Tier | None = None
    sats_to_next_tier: Decimal | None = None


@dataclass(frozen=True)
class SatsProjection:
    projected_sats: Decimal
    projected_tier: Tier
    projected_multiplier: Decimal


@dataclass(frozen=True)
class RankChange:
    change: int  # previous - current; positive = moved up
    direction: RankDirection
    formatted: str


@dataclass(frozen=True)
class SeasonTimeRemaining:
    days: int
    hours: int
    minutes: int
    formatted: str


@dataclass(frozen=True)
class SatsHistoryEntry:
    date: datetime
    activity: SatsActivity
    sats_earned: Decimal
    multiplier: Decimal


@dataclass(frozen=True)
class PointsSummary:
    """Account-level points view combining balance, tier and leaderboard."""

    total_sats: Decimal
    breakdown: Mapping[SatsActivity, Decimal]
    tier: Tier
    current_multiplier: Decimal
    daily_earning_rate: Decimal
    rank: int | None = None
    percentile: Decimal | None = None
