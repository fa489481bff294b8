"""Constant product AMM pricing and liquidity engine."""

from amm_pricing.core.errors import ErrorKind, Outcome, PricingError
from amm_pricing.core.pool import BurnPlan, LiquidityPlan, PoolSnapshot
from amm_pricing.core.trade import SwapQuote, TradeRecord
from amm_pricing.engine import PricingEngine

__all__ = [
    "ErrorKind",
    "Outcome",
    "PricingError",
    "BurnPlan",
    "LiquidityPlan",
    "PoolSnapshot",
    "SwapQuote",
    "TradeRecord",
    "PricingEngine",
]
