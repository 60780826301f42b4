"""Financial calculation engine for Ethena Protocol integrations.

Four independent, stateless components:

- ethena_engine.yields: APR/APY conversion, funding annualization, earnings
- ethena_engine.delta: delta-neutral hedge analysis
- ethena_engine.cooldown: sUSDe unstaking cooldown state
- ethena_engine.rewards: sats points accrual, tiers and ENA estimates

The engine performs no I/O; callers supply already-fetched data.
"""

__version__ = "0.1.0"
