"""Delta, hedge ratio, rebalance sizing and position P&L for the USDe hedge.

USDe is backed by long spot collateral hedged with short perpetuals. These
functions measure how close that book is to delta-neutral and what it takes
to restore neutrality.

Sign convention: perp_value is signed (negative = short). A delta of 0 is a
perfect hedge, positive is under-hedged (net long), negative is over-hedged.

Funding convention: positive funding rate = longs pay shorts, so the short
perp leg COLLECTS when the rate is positive.
"""

from decimal import Decimal
from typing import Iterable

from ethena_engine.delta.models import (
    AggregatedPosition,
    PerpPosition,
    PositionPnl,
    PositionSide,
    RebalanceAction,
    RebalanceCheck,
    RebalancePlan,
)
from ethena_engine.exceptions import InvalidArgumentError
from ethena_engine.units import HUNDRED, ONE, ZERO, Numeric, to_decimal

#: Rebalances smaller than this fraction of spot value are not worth trading.
MIN_REBALANCE_FRACTION = Decimal("0.001")

DEFAULT_NEUTRAL_TOLERANCE = Decimal("0.01")
DEFAULT_REBALANCE_THRESHOLD = Decimal("0.02")
DEFAULT_MAX_REBALANCE_INTERVAL = 86400  # seconds
DEFAULT_FUNDING_INTERVALS_PER_YEAR = 1095  # 3 per day * 365
DEFAULT_MAINTENANCE_MARGIN = Decimal("0.005")


def calculate_delta(spot_value: Numeric, perp_value: Numeric) -> Decimal:
    """Net delta as a fraction of spot exposure.

    Formula: (spot_value + perp_value) / spot_value

    Returns:
        Delta fraction, or Decimal("0") when there is no spot exposure.
    """
    spot = to_decimal(spot_value)
    if spot == ZERO:
        return ZERO
    return (spot + to_decimal(perp_value)) / spot


def calculate_hedge_ratio(short_position: Numeric, spot_position: Numeric) -> Decimal:
    """Short notional divided by spot notional (both as magnitudes).

    Returns:
        Hedge ratio, or Decimal("0") when spot_position is zero.
    """
    spot = to_decimal(spot_position)
    if spot == ZERO:
        return ZERO
    return to_decimal(short_position) / spot


def is_delta_neutral(delta: Numeric, tolerance: Numeric = DEFAULT_NEUTRAL_TOLERANCE) -> bool:
    """True when abs(delta) is within tolerance (inclusive)."""
    return abs(to_decimal(delta)) <= to_decimal(tolerance)


def calculate_rebalance_amount(
    spot_value: Numeric,
    perp_value: Numeric,
    target_delta: Numeric = ZERO,
) -> RebalancePlan:
    """Size the perp adjustment that brings the book to target_delta.

    target_perp = spot_value * (target_delta - 1)
    rebalance = target_perp - perp_value

    A negative rebalance means the perp must become more negative
    (INCREASE_SHORT). Adjustments below 0.1% of spot value are reported as
    NONE with a zero amount and the current perp value unchanged.

    Args:
        spot_value: Current spot notional.
        perp_value: Current signed perp notional.
        target_delta: Desired delta (default 0, fully hedged).

    Returns:
        RebalancePlan with action, absolute amount and resulting perp value.
    """
    spot = to_decimal(spot_value)
    perp = to_decimal(perp_value)
    target_perp = spot * (to_decimal(target_delta) - ONE)
    rebalance = target_perp - perp

    if abs(rebalance) < spot * MIN_REBALANCE_FRACTION:
        return RebalancePlan(action=RebalanceAction.NONE, amount=ZERO, new_perp_value=perp)

    action = RebalanceAction.INCREASE_SHORT if rebalance < ZERO else RebalanceAction.DECREASE_SHORT
    return RebalancePlan(action=action, amount=abs(rebalance), new_perp_value=target_perp)


def calculate_annualized_funding(
    funding_rate: Numeric,
    intervals_per_year: int = DEFAULT_FUNDING_INTERVALS_PER_YEAR,
) -> Decimal:
    """Compound a per-interval funding rate over a year.

    Formula: (1 + rate) ** intervals_per_year - 1

    Kept separate from ethena_engine.yields.funding_rate_to_apy, which
    annualizes through a daily APR instead. The two disagree slightly and
    callers depend on each.
    """
    if intervals_per_year <= 0:
        raise InvalidArgumentError(
            f"intervals_per_year must be positive, got {intervals_per_year}"
        )
    return (ONE + to_decimal(funding_rate)) ** int(intervals_per_year) - ONE


def calculate_position_pnl(
    entry_price: Numeric,
    current_price: Numeric,
    size: Numeric,
    is_short: bool,
) -> PositionPnl:
    """Unrealized P&L for one position.

    pnl = (current - entry) * size, negated for shorts
    pnl_percent = pnl / (entry * size) * 100

    Returns:
        PositionPnl. pnl_percent is Decimal("0") when the entry notional is
        zero.
    """
    entry = to_decimal(entry_price)
    qty = to_decimal(size)
    price_diff = to_decimal(current_price) - entry
    pnl = -price_diff * qty if is_short else price_diff * qty

    notional = entry * qty
    pnl_percent = pnl / notional * HUNDRED if notional != ZERO else ZERO
    return PositionPnl(pnl=pnl, pnl_percent=pnl_percent)


def calculate_liquidation_price(
    entry_price: Numeric,
    leverage: Numeric,
    is_short: bool,
    maintenance_margin: Numeric = DEFAULT_MAINTENANCE_MARGIN,
) -> Decimal:
    """Approximate isolated-margin liquidation price.

    margin_ratio = 1 / leverage
    long:  entry * (1 - margin_ratio + maintenance_margin)
    short: entry * (1 + margin_ratio - maintenance_margin)

    Higher leverage always moves the liquidation price closer to entry.

    Raises:
        InvalidArgumentError: If leverage is zero or negative.
    """
    lev = to_decimal(leverage)
    if lev <= ZERO:
        raise InvalidArgumentError(f"leverage must be positive, got {leverage}")

    entry = to_decimal(entry_price)
    margin_ratio = ONE / lev
    mm = to_decimal(maintenance_margin)

    if is_short:
        return entry * (ONE + margin_ratio - mm)
    return entry * (ONE - margin_ratio + mm)


def calculate_funding_payment(position_size: Numeric, funding_rate: Numeric, is_short: bool) -> Decimal:
    """Funding for one period on a notional position.

    Positive = income. Shorts receive when the rate is positive and pay when
    it is negative; longs are the mirror image.
    """
    raw_payment = to_decimal(position_size) * to_decimal(funding_rate)
    return raw_payment if is_short else -raw_payment


def needs_rebalance(
    current_delta: Numeric,
    rebalance_threshold: Numeric = DEFAULT_REBALANCE_THRESHOLD,
    seconds_since_rebalance: int | None = None,
    max_rebalance_interval: int = DEFAULT_MAX_REBALANCE_INTERVAL,
) -> RebalanceCheck:
    """Decide whether the hedge should be rebalanced now.

    Delta drift beyond the threshold takes precedence over the time-based
    trigger.

    Args:
        current_delta: Current delta fraction.
        rebalance_threshold: Maximum tolerated abs(delta).
        seconds_since_rebalance: Time since the last rebalance, if known.
        max_rebalance_interval: Rebalance at least this often (seconds).

    Returns:
        RebalanceCheck with a human-readable reason.
    """
    delta = to_decimal(current_delta)
    if abs(delta) > to_decimal(rebalance_threshold):
        return RebalanceCheck(
            should_rebalance=True,
            reason=f"Delta exposure {delta * HUNDRED:.2f}% exceeds threshold",
        )

    if seconds_since_rebalance is not None and seconds_since_rebalance > max_rebalance_interval:
        return RebalanceCheck(
            should_rebalance=True,
            reason="Maximum time since last rebalance exceeded",
        )

    return RebalanceCheck(
        should_rebalance=False,
        reason="Position within acceptable parameters",
    )


def aggregate_positions(positions: Iterable[PerpPosition]) -> AggregatedPosition:
    """Roll up positions across venues.

    total_long / total_short are current notionals split by side.
    weighted_entry_price = sum(entry * size) / sum(size), 0 when no size.
    aggregate_pnl sums calculate_position_pnl over every position.
    """
    total_long = ZERO
    total_short = ZERO
    weighted_entry = ZERO
    total_size = ZERO
    aggregate_pnl = ZERO

    for pos in positions:
        value = pos.size * pos.current_price
        if pos.side is PositionSide.LONG:
            total_long += value
        else:
            total_short += value

        weighted_entry += pos.entry_price * pos.size
        total_size += pos.size
        aggregate_pnl += calculate_position_pnl(
            pos.entry_price, pos.current_price, pos.size, pos.is_short
        ).pnl

    return AggregatedPosition(
        total_long=total_long,
        total_short=total_short,
        net_position=total_long - total_short,
        weighted_entry_price=weighted_entry / total_size if total_size > ZERO else ZERO,
        aggregate_pnl=aggregate_pnl,
    )
