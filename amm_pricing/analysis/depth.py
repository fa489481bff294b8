"""Depth ladder: how quotes degrade as trade size grows."""

from decimal import Decimal
from typing import Sequence

import numpy as np
import pandas as pd

from amm_pricing.core.constants import BASIS_POINTS
from amm_pricing.core.pool import PoolSnapshot
from amm_pricing.engine import PricingEngine

LADDER_COLUMNS = [
    "amount_in",
    "amount_out",
    "price_impact_bps",
    "dynamic_fee_bps",
    "effective_price",
    "utilization_bps",
]


def geometric_sizes(
    reserve_in: int,
    n: int = 10,
    min_bps: int = 1,
    max_bps: int = 1_000,
) -> list[int]:
    """Trade sizes spaced geometrically between two fractions of the reserve.

    Sizes are de-duplicated after rounding, so fewer than ``n`` may be
    returned for shallow pools.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if not 0 < min_bps <= max_bps:
        raise ValueError(f"need 0 < min_bps <= max_bps, got {min_bps}, {max_bps}")

    fractions = np.geomspace(min_bps, max_bps, num=n) / BASIS_POINTS
    sizes = sorted({int(reserve_in * f) for f in fractions})
    return [s for s in sizes if s > 0]


def depth_ladder(
    pool: PoolSnapshot,
    sizes: Sequence[int],
    volatility_index: int | float | Decimal = 0,
    engine: PricingEngine | None = None,
) -> pd.DataFrame:
    """Quote every size against the same snapshot.

    Sizes the engine rejects are skipped. ``utilization_bps`` is the trade
    size as a share of ``reserve_in``.
    """
    engine = engine or PricingEngine()
    rows = []
    for size in sizes:
        outcome = engine.quote_exact_input(pool, size, volatility_index=volatility_index)
        if not outcome.ok:
            continue
        quote = outcome.value
        rows.append({
            "amount_in": quote.amount_in,
            "amount_out": quote.amount_out,
            "price_impact_bps": quote.price_impact_bps,
            "dynamic_fee_bps": quote.dynamic_fee_bps,
            "effective_price": quote.execution_price,
            "utilization_bps": size * BASIS_POINTS // pool.reserve_in,
        })
    return pd.DataFrame(rows, columns=LADDER_COLUMNS)
