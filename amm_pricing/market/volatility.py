"""Volatility index estimated from a price history.

The index feeds ``dynamic_fee_bps``: it is the standard deviation of log
returns in percent, optionally annualized by sqrt(periods_per_year):

    sigma = std(log(S[t+1] / S[t])) * sqrt(periods_per_year)
    index = round(sigma * 100), clamped to [0, MAX_VOLATILITY_INDEX]
"""

from typing import Sequence

import numpy as np

from amm_pricing.core.constants import MAX_VOLATILITY_INDEX


def realized_volatility(prices: Sequence[float], periods_per_year: float = 1.0) -> float:
    """Standard deviation of log returns, as a fraction.

    Args:
        prices: Positive prices, oldest first
        periods_per_year: Scaling for annualization (1 = per period)

    Returns:
        Volatility as a fraction (0.05 = 5%), 0.0 with fewer than two prices
    """
    arr = np.asarray(prices, dtype=float)
    if arr.size < 2:
        return 0.0
    if np.any(arr <= 0) or not np.all(np.isfinite(arr)):
        raise ValueError("prices must be positive and finite")

    log_returns = np.diff(np.log(arr))
    ddof = 1 if log_returns.size > 1 else 0
    sigma = float(np.std(log_returns, ddof=ddof))
    return sigma * float(np.sqrt(periods_per_year))


def volatility_index(prices: Sequence[float], periods_per_year: float = 1.0) -> int:
    """Integer volatility index for the dynamic fee engine."""
    sigma = realized_volatility(prices, periods_per_year)
    return int(min(max(round(sigma * 100), 0), MAX_VOLATILITY_INDEX))
