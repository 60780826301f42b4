"""Data models for delta-neutral hedge analysis.

CRITICAL: All monetary values use Decimal. Perp exposure is signed: negative
values are short exposure.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ethena_engine.units import to_decimal


class PositionSide(str, Enum):
    """Position direction."""

    LONG = "long"
    SHORT = "short"


class RebalanceAction(str, Enum):
    """Hedge adjustment needed to reach the target delta."""

    INCREASE_SHORT = "increase_short"
    DECREASE_SHORT = "decrease_short"
    NONE = "none"


@dataclass(frozen=True)
class PerpPosition:
    """Snapshot of a single perpetual position on one venue.

    Never mutated: each recomputation takes a fresh snapshot.
    """

    exchange: str
    symbol: str
    size: Decimal  # base asset quantity, non-negative
    side: PositionSide
    entry_price: Decimal
    current_price: Decimal
    leverage: Decimal = Decimal("1")

    def __post_init__(self) -> None:
        for name in ("size", "entry_price", "current_price", "leverage"):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))
        object.__setattr__(self, "side", PositionSide(self.side))

    @property
    def is_short(self) -> bool:
        return self.side is PositionSide.SHORT

    @property
    def exposure_value(self) -> Decimal:
        """Signed notional at the current price (negative for shorts)."""
        notional = self.size * self.current_price
        return -notional if self.is_short else notional


@dataclass(frozen=True)
class ExchangeExposure:
    """Notional held at one counterparty. Sign is ignored for risk."""

    exchange: str
    value: Decimal


@dataclass(frozen=True)
class ExchangeVenue:
    """A venue that can absorb part of a hedge."""

    id: str
    liquidity: Decimal
    funding_rate: Decimal
    max_position: Decimal


@dataclass(frozen=True)
class RebalancePlan:
    """Perp adjustment that moves the hedge to the target delta."""

    action: RebalanceAction
    amount: Decimal  # absolute USD notional to trade
    new_perp_value: Decimal


@dataclass(frozen=True)
class RebalanceCheck:
    """Whether a rebalance is due, and why."""

    should_rebalance: bool
    reason: str


@dataclass(frozen=True)
class PositionPnl:
    """Unrealized P&L of a single position."""

    pnl: Decimal
    pnl_percent: Decimal


@dataclass(frozen=True)
class AggregatedPosition:
    """Positions rolled up across venues."""

    total_long: Decimal
    total_short: Decimal
    net_position: Decimal
    weighted_entry_price: Decimal
    aggregate_pnl: Decimal


@dataclass(frozen=True)
class LargestExposure:
    exchange: str
    percent: Decimal


@dataclass(frozen=True)
class CounterpartyRisk:
    """Exposure distribution across counterparties.

    ``distribution`` maps exchange -> percent of total absolute exposure.
    ``concentration`` is the Herfindahl-Hirschman index on fractional shares.
    """

    distribution: dict[str, Decimal]
    concentration: Decimal
    largest_exposure: LargestExposure


@dataclass(frozen=True)
class VenueAllocation:
    exchange: str
    allocation: Decimal
    percent: Decimal


@dataclass(frozen=True)
class HedgeMetrics:
    """Full hedge health snapshot produced by HedgeMonitor."""

    delta_exposure: Decimal
    hedge_ratio: Decimal
    is_neutral: bool
    funding_yield: Decimal  # annualized
    slippage_risk: Decimal  # estimated slippage on the planned rebalance
    counterparty: CounterpartyRisk
    rebalance: RebalanceCheck
    plan: RebalancePlan
