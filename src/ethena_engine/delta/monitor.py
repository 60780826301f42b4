"""Settings-driven hedge health assessment for the USDe backing book.

Composes the pure delta functions into a single HedgeMetrics snapshot using
thresholds from DeltaSettings, and logs when the hedge drifts far enough to
need a rebalance.
"""

from decimal import Decimal
from typing import Iterable

from ethena_engine.config import DeltaSettings
from ethena_engine.delta.analyzer import (
    calculate_annualized_funding,
    calculate_delta,
    calculate_hedge_ratio,
    calculate_rebalance_amount,
    is_delta_neutral,
    needs_rebalance,
)
from ethena_engine.delta.exposure import calculate_counterparty_risk, estimate_slippage
from ethena_engine.delta.models import ExchangeExposure, HedgeMetrics
from ethena_engine.logging import get_logger
from ethena_engine.units import Numeric, to_decimal

logger = get_logger(__name__)


class HedgeMonitor:
    """Assesses delta neutrality, funding yield and rebalance needs.

    Args:
        settings: Delta settings with tolerance, rebalance threshold,
            rebalance interval, funding intervals and base slippage.
    """

    def __init__(self, settings: DeltaSettings) -> None:
        self._settings = settings

    def assess(
        self,
        spot_value: Numeric,
        perp_value: Numeric,
        funding_rate: Numeric,
        exposures: Iterable[ExchangeExposure] = (),
        rebalance_liquidity: Numeric | None = None,
        seconds_since_rebalance: int | None = None,
    ) -> HedgeMetrics:
        """Build a hedge health snapshot.

        Args:
            spot_value: Spot collateral notional.
            perp_value: Signed perp notional (negative = short).
            funding_rate: Current per-interval funding rate.
            exposures: Per-exchange notionals for counterparty risk.
            rebalance_liquidity: Order book depth available for the
                rebalance trade. When omitted, slippage risk is the base
                slippage only.
            seconds_since_rebalance: Time since the last rebalance, if known.

        Returns:
            HedgeMetrics combining delta, hedge ratio, funding yield,
            slippage, counterparty risk and the rebalance decision.
        """
        spot = to_decimal(spot_value)
        perp = to_decimal(perp_value)

        delta = calculate_delta(spot, perp)
        hedge_ratio = calculate_hedge_ratio(abs(perp), spot)
        plan = calculate_rebalance_amount(spot, perp)
        rebalance = needs_rebalance(
            delta,
            rebalance_threshold=self._settings.rebalance_threshold,
            seconds_since_rebalance=seconds_since_rebalance,
            max_rebalance_interval=self._settings.max_rebalance_interval,
        )

        if rebalance_liquidity is None:
            slippage_risk: Decimal = self._settings.base_slippage
        else:
            slippage_risk = estimate_slippage(
                plan.amount, rebalance_liquidity, self._settings.base_slippage
            )

        metrics = HedgeMetrics(
            delta_exposure=delta,
            hedge_ratio=hedge_ratio,
            is_neutral=is_delta_neutral(delta, self._settings.neutral_tolerance),
            funding_yield=calculate_annualized_funding(
                funding_rate, self._settings.funding_intervals_per_year
            ),
            slippage_risk=slippage_risk,
            counterparty=calculate_counterparty_risk(exposures),
            rebalance=rebalance,
            plan=plan,
        )

        if rebalance.should_rebalance:
            logger.warning(
                "hedge_rebalance_due",
                reason=rebalance.reason,
                delta=str(delta),
                action=plan.action.value,
                amount=str(plan.amount),
                threshold=str(self._settings.rebalance_threshold),
            )

        return metrics
