"""Counterparty concentration, slippage and cross-venue hedge allocation.

The short perp leg of the USDe hedge is spread over several exchanges. These
functions quantify concentration risk (HHI), estimate execution slippage
with a linear impact model, and split a hedge across venues.
"""

from decimal import Decimal
from typing import Iterable, Sequence

from ethena_engine.delta.models import (
    CounterpartyRisk,
    ExchangeExposure,
    ExchangeVenue,
    LargestExposure,
    VenueAllocation,
)
from ethena_engine.logging import get_logger
from ethena_engine.units import HUNDRED, ONE, ZERO, Numeric, to_decimal

logger = get_logger(__name__)

DEFAULT_BASE_SLIPPAGE = Decimal("0.001")

#: Price impact per unit of size/liquidity in the linear model.
_IMPACT_COEFFICIENT = Decimal("0.1")


def calculate_counterparty_risk(exposures: Iterable[ExchangeExposure]) -> CounterpartyRisk:
    """Distribution and concentration of exposure across exchanges.

    Exposures on the same exchange are merged. Shares use absolute values,
    so long and short notionals both count as counterparty exposure.

    concentration = sum(share_i ** 2) over fractional shares, ranging from
    1/n (evenly spread) to 1 (single venue).

    Returns:
        CounterpartyRisk. An empty input yields an empty distribution, zero
        concentration and a blank largest exposure.
    """
    items = [(e.exchange, abs(to_decimal(e.value))) for e in exposures]
    total = sum((value for _, value in items), ZERO)

    distribution: dict[str, Decimal] = {}
    for exchange, value in items:
        percent = value / total * HUNDRED if total > ZERO else ZERO
        distribution[exchange] = distribution.get(exchange, ZERO) + percent

    concentration = sum(
        ((percent / HUNDRED) ** 2 for percent in distribution.values()), ZERO
    )

    if distribution:
        exchange, percent = max(distribution.items(), key=lambda item: item[1])
        largest = LargestExposure(exchange=exchange, percent=percent)
    else:
        largest = LargestExposure(exchange="", percent=ZERO)

    return CounterpartyRisk(
        distribution=distribution,
        concentration=concentration,
        largest_exposure=largest,
    )


def estimate_slippage(
    size: Numeric,
    liquidity: Numeric,
    base_slippage: Numeric = DEFAULT_BASE_SLIPPAGE,
) -> Decimal:
    """Estimate fractional slippage for a trade of ``size`` into ``liquidity``.

    Formula: base_slippage + (size / liquidity) * 0.1

    Returns:
        Slippage fraction, or Decimal("1") (total slippage) when there is no
        liquidity.
    """
    available = to_decimal(liquidity)
    if available == ZERO:
        return ONE
    return to_decimal(base_slippage) + to_decimal(size) / available * _IMPACT_COEFFICIENT


def calculate_optimal_allocation(
    total_size: Numeric,
    venues: Sequence[ExchangeVenue],
) -> list[VenueAllocation]:
    """Split a hedge across venues in proportion to their liquidity.

    Single greedy pass in input order: each venue gets
    min(liquidity share of total_size, max_position, remaining size).
    Size a cap prevents from being placed is NOT redistributed to later
    venues.

    Args:
        total_size: USD notional to allocate.
        venues: Candidate venues, in priority order.

    Returns:
        One VenueAllocation per venue, in input order. When total size or
        total liquidity is zero every allocation is zero.
    """
    size = to_decimal(total_size)
    total_liquidity = sum((to_decimal(v.liquidity) for v in venues), ZERO)

    if size <= ZERO or total_liquidity <= ZERO:
        return [
            VenueAllocation(exchange=v.id, allocation=ZERO, percent=ZERO) for v in venues
        ]

    allocations: list[VenueAllocation] = []
    remaining = size
    for venue in venues:
        optimal = to_decimal(venue.liquidity) / total_liquidity * size
        allocation = min(optimal, to_decimal(venue.max_position), remaining)
        remaining -= allocation
        allocations.append(
            VenueAllocation(
                exchange=venue.id,
                allocation=allocation,
                percent=allocation / size * HUNDRED,
            )
        )

    if remaining > ZERO:
        logger.info(
            "allocation_capped",
            total_size=str(size),
            unallocated=str(remaining),
            venues=len(venues),
        )

    return allocations
