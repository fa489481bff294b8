"""Market inputs derived from price history."""

from amm_pricing.market.volatility import realized_volatility, volatility_index

__all__ = [
    "realized_volatility",
    "volatility_index",
]
