"""Core pricing components."""

from amm_pricing.core.errors import (
    ErrorKind,
    InsufficientAmountError,
    InsufficientLiquidityBurnedError,
    InsufficientLiquidityMintedError,
    InvalidInputError,
    Outcome,
    PoolDrainedError,
    PricingError,
)
from amm_pricing.core.pool import BurnPlan, LiquidityPlan, PoolSnapshot
from amm_pricing.core.trade import SwapQuote, TradeRecord
from amm_pricing.core.quote import get_amount_in, get_amount_out
from amm_pricing.core.impact import price_impact_bps, price_impact_for_output_bps
from amm_pricing.core.fees import dynamic_fee_bps, maximum_amount_in, minimum_amount_out
from amm_pricing.core.liquidity import (
    burn_amounts,
    liquidity_for_percentage,
    liquidity_mint,
    optimal_amounts,
    pool_share_bps,
)

__all__ = [
    "ErrorKind",
    "InsufficientAmountError",
    "InsufficientLiquidityBurnedError",
    "InsufficientLiquidityMintedError",
    "InvalidInputError",
    "Outcome",
    "PoolDrainedError",
    "PricingError",
    "BurnPlan",
    "LiquidityPlan",
    "PoolSnapshot",
    "SwapQuote",
    "TradeRecord",
    "get_amount_in",
    "get_amount_out",
    "price_impact_bps",
    "price_impact_for_output_bps",
    "dynamic_fee_bps",
    "maximum_amount_in",
    "minimum_amount_out",
    "burn_amounts",
    "liquidity_for_percentage",
    "liquidity_mint",
    "optimal_amounts",
    "pool_share_bps",
]
