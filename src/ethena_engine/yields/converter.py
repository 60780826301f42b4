"""Rate-space conversions and earnings projection for USDe / sUSDe yield.

Conversions between nominal (APR) and compounded (APY) rates, funding-rate
annualization, vault exchange-rate derived APY, and blended / net yield.

All computations use Decimal. Fractional powers (APY -> daily rate) are
correctly rounded to the active context precision, so conversions are exact
inverses to well within 1e-6.

Zero denominators are expected in a live system (a freshly deployed vault has
zero supply) and return documented fallback values instead of raising.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ethena_engine.exceptions import InvalidArgumentError
from ethena_engine.units import DAYS_PER_YEAR, ONE, ZERO, Numeric, to_decimal

#: Daily compounding, the convention for sUSDe yield quotes.
DEFAULT_PERIODS_PER_YEAR = 365

#: 8-hour funding intervals.
DEFAULT_FUNDING_INTERVALS_PER_DAY = 3


@dataclass(frozen=True)
class EarningsProjection:
    """Projected balance after holding a yield-bearing position."""

    final_amount: Decimal
    earnings: Decimal  # final_amount - principal
    daily_earnings: Decimal  # earnings / days


@dataclass(frozen=True)
class YieldSource:
    """One contributor to a blended yield.

    Weights are validated individually; they need not sum to 1.
    """

    name: str
    apy: Decimal
    weight: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "apy", to_decimal(self.apy))
        object.__setattr__(self, "weight", to_decimal(self.weight))
        if not ZERO <= self.weight <= ONE:
            raise InvalidArgumentError(
                f"Yield source {self.name!r} weight must be in [0, 1], got {self.weight}"
            )


def apr_to_apy(apr: Numeric, periods_per_year: int = DEFAULT_PERIODS_PER_YEAR) -> Decimal:
    """Convert a nominal annual rate to a compounded annual yield.

    Formula: apy = (1 + apr / n) ** n - 1

    Args:
        apr: Annual percentage rate as a fraction (0.10 = 10%).
        periods_per_year: Compounding periods per year (365 = daily).

    Returns:
        Annual percentage yield as a fraction.
    """
    n = _periods(periods_per_year)
    return (ONE + to_decimal(apr) / Decimal(n)) ** n - ONE


def apy_to_apr(apy: Numeric, periods_per_year: int = DEFAULT_PERIODS_PER_YEAR) -> Decimal:
    """Convert a compounded annual yield back to a nominal annual rate.

    Inverse of apr_to_apy: apr = n * ((1 + apy) ** (1 / n) - 1)

    Args:
        apy: Annual percentage yield as a fraction.
        periods_per_year: Compounding periods per year.

    Returns:
        Annual percentage rate as a fraction.

    Raises:
        InvalidArgumentError: If apy <= -1 (no real root exists).
    """
    n = Decimal(_periods(periods_per_year))
    growth = ONE + to_decimal(apy)
    if growth <= ZERO:
        raise InvalidArgumentError(f"APY must be greater than -1, got {apy}")
    return n * (growth ** (ONE / n) - ONE)


def funding_rate_to_apy(
    funding_rate: Numeric,
    intervals_per_day: int = DEFAULT_FUNDING_INTERVALS_PER_DAY,
) -> Decimal:
    """Annualize a per-interval perpetual funding rate.

    Scales to a daily rate (rate * intervals_per_day), treats that as a
    nominal APR (daily * 365) and compounds daily via apr_to_apy. Negative
    funding propagates to a negative APY.

    This route intentionally differs from
    ethena_engine.delta.calculate_annualized_funding, which compounds the raw
    per-interval rate directly. Callers depend on both.

    Args:
        funding_rate: Funding rate per interval (0.0001 = 0.01% per 8h).
        intervals_per_day: Funding settlements per day.

    Returns:
        Annualized yield as a fraction.
    """
    daily_rate = to_decimal(funding_rate) * Decimal(intervals_per_day)
    return apr_to_apy(daily_rate * DAYS_PER_YEAR)


def apy_to_daily_yield(apy: Numeric) -> Decimal:
    """Exact daily rate that compounds to the given APY over 365 days.

    Formula: (1 + apy) ** (1 / 365) - 1
    """
    growth = ONE + to_decimal(apy)
    if growth <= ZERO:
        raise InvalidArgumentError(f"APY must be greater than -1, got {apy}")
    return growth ** (ONE / DAYS_PER_YEAR) - ONE


def calculate_earnings(
    principal: Numeric,
    apy: Numeric,
    days: Numeric,
    compounding: bool = True,
) -> EarningsProjection:
    """Project the balance of a position held at a constant APY.

    With compounding, the exact daily rate (1 + apy) ** (1/365) - 1 is
    compounded ``days`` times, so 365 days at 10% APY returns exactly 10%.
    Without compounding, simple interest apy * days / 365 is applied.

    Args:
        principal: Starting amount.
        apy: Annual percentage yield as a fraction.
        days: Holding period in days. Must be positive.
        compounding: Compound daily (default) or accrue simple interest.

    Returns:
        EarningsProjection with final amount, total and per-day earnings.

    Raises:
        InvalidArgumentError: If days <= 0 (daily earnings undefined).
    """
    days_d = to_decimal(days)
    if days_d <= ZERO:
        raise InvalidArgumentError(f"days must be positive, got {days}")

    principal_d = to_decimal(principal)
    apy_d = to_decimal(apy)

    if compounding:
        daily_rate = apy_to_daily_yield(apy_d)
        final_amount = principal_d * (ONE + daily_rate) ** days_d
    else:
        final_amount = principal_d * (ONE + apy_d * days_d / DAYS_PER_YEAR)

    earnings = final_amount - principal_d
    return EarningsProjection(
        final_amount=final_amount,
        earnings=earnings,
        daily_earnings=earnings / days_d,
    )


def calculate_exchange_rate(total_assets: Numeric, total_supply: Numeric) -> Decimal:
    """sUSDe -> USDe exchange rate from vault totals.

    Both totals are in the same base units (wei), so the ratio is unitless.

    Returns:
        total_assets / total_supply, or exactly 1 when no shares exist yet.
    """
    supply = to_decimal(total_supply)
    if supply == ZERO:
        return ONE
    return to_decimal(total_assets) / supply


def calculate_rate_based_apy(start_rate: Numeric, end_rate: Numeric, days: Numeric) -> Decimal:
    """Derive APY from the change in the vault exchange rate over a window.

    period_return = (end - start) / start
    daily_return = period_return / days
    apy = apr_to_apy(daily_return * 365)

    Args:
        start_rate: Exchange rate at the start of the window.
        end_rate: Exchange rate at the end of the window.
        days: Window length in days.

    Returns:
        Annualized yield, or Decimal("0") when start_rate or days is zero
        (no signal).
    """
    start = to_decimal(start_rate)
    period_days = to_decimal(days)
    if start == ZERO or period_days == ZERO:
        return ZERO

    period_return = (to_decimal(end_rate) - start) / start
    daily_return = period_return / period_days
    return apr_to_apy(daily_return * DAYS_PER_YEAR)


def calculate_blended_yield(sources: Iterable[YieldSource]) -> Decimal:
    """Weighted sum of source APYs: sum(apy_i * weight_i).

    This is a sum, not an average. Pass weights summing to 1 for a true
    weighted average.
    """
    return sum((source.apy * source.weight for source in sources), ZERO)


def calculate_net_yield(gross_yield: Numeric, fee_rate: Numeric) -> Decimal:
    """Yield after a proportional fee: gross * (1 - fee_rate)."""
    return to_decimal(gross_yield) * (ONE - to_decimal(fee_rate))


def _periods(periods_per_year: int) -> int:
    if periods_per_year <= 0:
        raise InvalidArgumentError(
            f"periods_per_year must be positive, got {periods_per_year}"
        )
    return int(periods_per_year)
