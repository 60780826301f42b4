"""Sats accrual, tier lookup and projection.

Daily sats = sum over activities of (usd_amount / 1000) * base_rate * multiplier.
Tier multipliers are a step function of the sats balance, so compounding
projections are simulated day by day.
"""

from decimal import Decimal
from typing import Iterable

from ethena_engine.exceptions import InvalidArgumentError
from ethena_engine.rewards.leaderboard import calculate_percentile
from ethena_engine.rewards.models import (
    BASE_EARNING_RATES,
    TIER_LEVELS,
    ActivityStake,
    PointsSummary,
    SatsActivity,
    SatsBalance,
    SatsProjection,
    TierInfo,
)
from ethena_engine.units import Numeric, quantize_half_up, to_decimal

_PER_THOUSAND = Decimal("1000")
_PER_MILLION = Decimal("1000000")
_REFERRAL_TIER_BONUS = Decimal("0.25")


def calculate_daily_earnings(activities: Iterable[ActivityStake]) -> Decimal:
    """Total sats earned per day across all activities.

    Activities without a base rate contribute nothing.
    """
    total = Decimal("0")
    for stake in activities:
        base_rate = BASE_EARNING_RATES.get(stake.activity, Decimal("0"))
        total += to_decimal(stake.amount) / _PER_THOUSAND * base_rate * to_decimal(stake.multiplier)
    return total


def _activity_sats(
    activity: SatsActivity, usd_value: Numeric, days: Numeric, multiplier: Numeric
) -> Decimal:
    return (
        to_decimal(usd_value)
        / _PER_THOUSAND
        * BASE_EARNING_RATES[activity]
        * to_decimal(days)
        * to_decimal(multiplier)
    )


def calculate_holding_sats(usde_balance: Numeric, days: Numeric, multiplier: Numeric = 1) -> Decimal:
    """Sats from holding USDe for ``days``."""
    return _activity_sats(SatsActivity.HOLD_USDE, usde_balance, days, multiplier)


def calculate_staking_sats(susde_value: Numeric, days: Numeric, multiplier: Numeric = 1) -> Decimal:
    """Sats from staking sUSDe (USD value) for ``days``."""
    return _activity_sats(SatsActivity.STAKE_SUSDE, susde_value, days, multiplier)


def calculate_referral_sats(referred_volume: Numeric, referral_tier: int = 1) -> Decimal:
    """Sats from referred volume; each referral tier above 1 adds 25%."""
    tier_multiplier = Decimal("1") + Decimal(referral_tier - 1) * _REFERRAL_TIER_BONUS
    return (
        to_decimal(referred_volume)
        / _PER_THOUSAND
        * BASE_EARNING_RATES[SatsActivity.REFERRAL]
        * tier_multiplier
    )


def get_multiplier_tier(total_sats: Numeric) -> TierInfo:
    """Find the tier for a sats balance.

    Walks the tier table from the highest threshold down and returns the
    first tier whose threshold the balance meets. next_tier and
    sats_to_next_tier are None at diamond.

    Negative balances fall through to base with bronze as the next tier.
    """
    sats = to_decimal(total_sats)
    for i, level in enumerate(TIER_LEVELS):
        if sats >= level.threshold:
            if i == 0:
                return TierInfo(tier=level.tier, multiplier=level.multiplier)
            above = TIER_LEVELS[i - 1]
            return TierInfo(
                tier=level.tier,
                multiplier=level.multiplier,
                next_tier=above.tier,
                sats_to_next_tier=above.threshold - sats,
            )

    base, bronze = TIER_LEVELS[-1], TIER_LEVELS[-2]
    return TierInfo(
        tier=base.tier,
        multiplier=base.multiplier,
        next_tier=bronze.tier,
        sats_to_next_tier=bronze.threshold - sats,
    )


def project_sats_earnings(
    current_balance: Numeric,
    daily_earning_rate: Numeric,
    days: Numeric,
    include_compounding: bool = False,
) -> SatsProjection:
    """Project a sats balance ``days`` into the future.

    Without compounding: current + daily_rate * days.

    With compounding, each day looks up the tier multiplier for the running
    balance and adds daily_rate * multiplier, so tier upgrades reached
    mid-projection speed up accrual from the next day on. This is an
    explicit O(days) loop; the multiplier is a step function and has no
    closed form.

    Raises:
        InvalidArgumentError: If days is negative.
    """
    days_d = to_decimal(days)
    if days_d < Decimal("0"):
        raise InvalidArgumentError(f"days must be non-negative, got {days}")

    projected = to_decimal(current_balance)
    rate = to_decimal(daily_earning_rate)

    if include_compounding:
        for _ in range(int(days_d)):
            projected += rate * get_multiplier_tier(projected).multiplier
    else:
        projected += rate * days_d

    tier_info = get_multiplier_tier(projected)
    return SatsProjection(
        projected_sats=projected,
        projected_tier=tier_info.tier,
        projected_multiplier=tier_info.multiplier,
    )


def estimate_ena_rewards(
    user_sats: Numeric,
    total_season_sats: Numeric,
    rewards_pool: Numeric,
) -> Decimal:
    """Pro-rata share of the season's ENA pool.

    Returns:
        user_sats / total_season_sats * rewards_pool, or Decimal("0") when no
        sats were issued in the season.
    """
    total = to_decimal(total_season_sats)
    if total == Decimal("0"):
        return Decimal("0")
    return to_decimal(user_sats) / total * to_decimal(rewards_pool)


def format_sats(sats: Numeric) -> str:
    """Compact sats display: "1.50M", "2.35K", "999"."""
    value = to_decimal(sats)
    if value >= _PER_MILLION:
        return f"{quantize_half_up(value / _PER_MILLION, 2)}M"
    if value >= _PER_THOUSAND:
        return f"{quantize_half_up(value / _PER_THOUSAND, 2)}K"
    return str(quantize_half_up(value, 0))


def summarize_points(
    balance: SatsBalance,
    daily_earning_rate: Numeric,
    rank: int | None = None,
    population: Iterable[Numeric] | None = None,
) -> PointsSummary:
    """Account-level points view: tier, multiplier and optional percentile.

    Args:
        balance: Sats balance snapshot.
        daily_earning_rate: Current sats per day.
        rank: Leaderboard rank, if known.
        population: All participants' sats, for the percentile.
    """
    total = to_decimal(balance.total)
    tier_info = get_multiplier_tier(total)
    percentile = (
        calculate_percentile(total, population) if population is not None else None
    )
    return PointsSummary(
        total_sats=total,
        breakdown=dict(balance.breakdown),
        tier=tier_info.tier,
        current_multiplier=tier_info.multiplier,
        daily_earning_rate=to_decimal(daily_earning_rate),
        rank=rank,
        percentile=percentile,
    )
