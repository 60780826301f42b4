"""Rewards (sats) engine: point accrual, tiers, leaderboard and ENA estimates."""

from ethena_engine.rewards.history import parse_sats_history
from ethena_engine.rewards.leaderboard import (
    calculate_percentile,
    calculate_rank_change,
    get_season_time_remaining,
)
from ethena_engine.rewards.models import (
    BASE_EARNING_RATES,
    MULTIPLIER_TIERS,
    TIER_LEVELS,
    ActivityStake,
    PointsSummary,
    RankChange,
    RankDirection,
    SatsActivity,
    SatsBalance,
    SatsHistoryEntry,
    SatsProjection,
    SeasonTimeRemaining,
    Tier,
    TierInfo,
    TierLevel,
)
from ethena_engine.rewards.sats import (
    calculate_daily_earnings,
    calculate_holding_sats,
    calculate_referral_sats,
    calculate_staking_sats,
    estimate_ena_rewards,
    format_sats,
    get_multiplier_tier,
    project_sats_earnings,
    summarize_points,
)

__all__ = [
    "BASE_EARNING_RATES",
    "MULTIPLIER_TIERS",
    "TIER_LEVELS",
    "ActivityStake",
    "PointsSummary",
    "RankChange",
    "RankDirection",
    "SatsActivity",
    "SatsBalance",
    "SatsHistoryEntry",
    "SatsProjection",
    "SeasonTimeRemaining",
    "Tier",
    "TierInfo",
    "TierLevel",
    "calculate_daily_earnings",
    "calculate_holding_sats",
    "calculate_percentile",
    "calculate_rank_change",
    "calculate_referral_sats",
    "calculate_staking_sats",
    "estimate_ena_rewards",
    "format_sats",
    "get_multiplier_tier",
    "get_season_time_remaining",
    "parse_sats_history",
    "project_sats_earnings",
    "summarize_points",
]
