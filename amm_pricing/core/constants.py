"""Protocol constants shared by every pricing module.

All fee and impact values are integer basis points:
- 10000 bps = 100%
- 30 bps = 0.30% (default swap fee)
"""

from decimal import Decimal

# Basis point scale (fees and price impact)
FEE_DENOMINATOR: int = 10_000
BASIS_POINTS: int = 10_000

DEFAULT_FEE_RATE_BPS: int = 30

# LP shares permanently locked on the first deposit
MINIMUM_LIQUIDITY: int = 1_000

# Dynamic fee: +0.1% fee per 1% impact, scaled by volatility, capped at 10%
MAX_DYNAMIC_FEE_BPS: int = 1_000
IMPACT_FEE_SCALE: int = 1_000
VOLATILITY_SCALE: int = 100
MAX_VOLATILITY_INDEX: int = 1_000

# Slippage
DEFAULT_SLIPPAGE_BPS: int = 50
HIGH_PRICE_IMPACT_BPS: int = 500

# MEV heuristics (timestamps in milliseconds)
MEV_SIZE_THRESHOLD_BPS: int = 500
MEV_FREQUENCY_WINDOW_MS: int = 60_000
MEV_FREQUENCY_LIMIT: int = 3
MEV_SANDWICH_WINDOW_MS: int = 10_000

# Rewards
SECONDS_PER_YEAR: int = 31_536_000
SECONDS_PER_DAY: int = 86_400
MAX_BOOST: Decimal = Decimal("2.5")

# Lock period (days) -> reward bonus
LOCK_BONUSES: dict[int, Decimal] = {
    30: Decimal("1"),
    90: Decimal("1.1"),
    180: Decimal("1.25"),
    365: Decimal("1.5"),
}
