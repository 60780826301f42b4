"""Delta-neutral analyzer for the USDe spot/perp hedge.

Pure Decimal functions for delta, hedge ratio, rebalance sizing, funding,
liquidation, counterparty concentration and venue allocation, plus the
settings-driven HedgeMonitor.
"""

from ethena_engine.delta.analyzer import (
    DEFAULT_FUNDING_INTERVALS_PER_YEAR,
    DEFAULT_MAINTENANCE_MARGIN,
    DEFAULT_MAX_REBALANCE_INTERVAL,
    DEFAULT_NEUTRAL_TOLERANCE,
    DEFAULT_REBALANCE_THRESHOLD,
    aggregate_positions,
    calculate_annualized_funding,
    calculate_delta,
    calculate_funding_payment,
    calculate_hedge_ratio,
    calculate_liquidation_price,
    calculate_position_pnl,
    calculate_rebalance_amount,
    is_delta_neutral,
    needs_rebalance,
)
from ethena_engine.delta.exposure import (
    DEFAULT_BASE_SLIPPAGE,
    calculate_counterparty_risk,
    calculate_optimal_allocation,
    estimate_slippage,
)
from ethena_engine.delta.models import (
    AggregatedPosition,
    CounterpartyRisk,
    ExchangeExposure,
    ExchangeVenue,
    HedgeMetrics,
    LargestExposure,
    PerpPosition,
    PositionPnl,
    PositionSide,
    RebalanceAction,
    RebalanceCheck,
    RebalancePlan,
    VenueAllocation,
)
from ethena_engine.delta.monitor import HedgeMonitor

__all__ = [
    "DEFAULT_BASE_SLIPPAGE",
    "DEFAULT_FUNDING_INTERVALS_PER_YEAR",
    "DEFAULT_MAINTENANCE_MARGIN",
    "DEFAULT_MAX_REBALANCE_INTERVAL",
    "DEFAULT_NEUTRAL_TOLERANCE",
    "DEFAULT_REBALANCE_THRESHOLD",
    "AggregatedPosition",
    "CounterpartyRisk",
    "ExchangeExposure",
    "ExchangeVenue",
    "HedgeMetrics",
    "HedgeMonitor",
    "LargestExposure",
    "PerpPosition",
    "PositionPnl",
    "PositionSide",
    "RebalanceAction",
    "RebalanceCheck",
    "RebalancePlan",
    "VenueAllocation",
    "aggregate_positions",
    "calculate_annualized_funding",
    "calculate_counterparty_risk",
    "calculate_delta",
    "calculate_funding_payment",
    "calculate_hedge_ratio",
    "calculate_liquidation_price",
    "calculate_optimal_allocation",
    "calculate_position_pnl",
    "calculate_rebalance_amount",
    "estimate_slippage",
    "is_delta_neutral",
    "needs_rebalance",
]
