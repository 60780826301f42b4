"""Yield aggregation over time: time-weighted averages and piecewise projection."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from ethena_engine.units import ONE, ZERO, Numeric, to_decimal
from ethena_engine.yields.converter import apy_to_daily_yield

_TWO = Decimal("2")


@dataclass(frozen=True)
class YieldObservation:
    """APY observed at a point in time (epoch seconds)."""

    timestamp: int
    apy: Decimal


@dataclass(frozen=True)
class YieldPeriod:
    """A projection segment: ``days`` held at a constant ``apy``."""

    days: Decimal
    apy: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "days", to_decimal(self.days))
        object.__setattr__(self, "apy", to_decimal(self.apy))


def calculate_time_weighted_yield(observations: Sequence[YieldObservation]) -> Decimal:
    """Time-weighted average yield over a series of observations.

    Each interval between consecutive observations contributes the mean of
    its two endpoint yields, weighted by the interval length (trapezoidal
    rule).

    Args:
        observations: Yield observations sorted by timestamp (oldest first).

    Returns:
        Time-weighted average APY. Decimal("0") for an empty series or when
        all observations share one timestamp; the single value for a series
        of length one.
    """
    if not observations:
        return ZERO
    if len(observations) == 1:
        return to_decimal(observations[0].apy)

    weighted_sum = ZERO
    total_time = ZERO
    for prev, curr in zip(observations, observations[1:]):
        elapsed = Decimal(curr.timestamp - prev.timestamp)
        average = (to_decimal(prev.apy) + to_decimal(curr.apy)) / _TWO
        weighted_sum += average * elapsed
        total_time += elapsed

    if total_time <= ZERO:
        return ZERO
    return weighted_sum / total_time


def project_future_value(principal: Numeric, periods: Sequence[YieldPeriod]) -> Decimal:
    """Project a balance across segments with different yields.

    Each segment compounds daily at its own APY; segments are applied in
    order.

    Args:
        principal: Starting amount.
        periods: Consecutive holding segments.

    Returns:
        Projected final value. Equal to principal when periods is empty.
    """
    value = to_decimal(principal)
    for period in periods:
        daily_rate = apy_to_daily_yield(period.apy)
        value *= (ONE + daily_rate) ** period.days
    return value
