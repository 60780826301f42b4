"""Yield converter: APR/APY conversion, funding annualization, earnings projection.

Pure Decimal functions; no I/O and no shared state.
"""

from ethena_engine.yields.converter import (
    DEFAULT_FUNDING_INTERVALS_PER_DAY,
    DEFAULT_PERIODS_PER_YEAR,
    EarningsProjection,
    YieldSource,
    apr_to_apy,
    apy_to_apr,
    apy_to_daily_yield,
    calculate_blended_yield,
    calculate_earnings,
    calculate_exchange_rate,
    calculate_net_yield,
    calculate_rate_based_apy,
    funding_rate_to_apy,
)
from ethena_engine.yields.formatting import format_large_number, format_yield, parse_yield
from ethena_engine.yields.history import (
    YieldObservation,
    YieldPeriod,
    calculate_time_weighted_yield,
    project_future_value,
)

__all__ = [
    "DEFAULT_FUNDING_INTERVALS_PER_DAY",
    "DEFAULT_PERIODS_PER_YEAR",
    "EarningsProjection",
    "YieldObservation",
    "YieldPeriod",
    "YieldSource",
    "apr_to_apy",
    "apy_to_apr",
    "apy_to_daily_yield",
    "calculate_blended_yield",
    "calculate_earnings",
    "calculate_exchange_rate",
    "calculate_net_yield",
    "calculate_rate_based_apy",
    "calculate_time_weighted_yield",
    "format_large_number",
    "format_yield",
    "funding_rate_to_apy",
    "parse_yield",
    "project_future_value",
]
