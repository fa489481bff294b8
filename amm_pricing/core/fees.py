"""Dynamic fee and slippage bounds.

The dynamic fee scales the pool's base fee by price impact and
market volatility:

    fee = base * (1 + impact / 1000) * (1 + volatility / 100)

so a trade with 1% impact (100 bps) pays 10% more fee, and a volatility
index of 50 adds another 50%. The result is capped at 1000 bps (10%).
"""

from decimal import ROUND_FLOOR, Decimal

from amm_pricing.core.constants import (
    BASIS_POINTS,
    DEFAULT_SLIPPAGE_BPS,
    IMPACT_FEE_SCALE,
    MAX_DYNAMIC_FEE_BPS,
    MAX_VOLATILITY_INDEX,
    VOLATILITY_SCALE,
)
from amm_pricing.core.errors import InvalidInputError, require_int


def _clamp(value: Decimal, low: int, high: int) -> Decimal:
    if value.is_nan():
        return Decimal(low)
    return max(Decimal(low), min(value, Decimal(high)))


def dynamic_fee_bps(
    base_fee_rate_bps: int,
    price_impact_bps: int,
    volatility_index: int | float | Decimal = 0,
) -> int:
    """Adjusted fee rate for a trade, in basis points.

    Never raises for out-of-range numbers: the base fee and impact are
    clamped to [0, 10000] and volatility to [0, MAX_VOLATILITY_INDEX].
    Evaluated exactly and rounded down, so the result is monotonic
    non-decreasing in both impact and volatility.
    """
    base = _clamp(Decimal(base_fee_rate_bps), 0, BASIS_POINTS)
    impact = _clamp(Decimal(price_impact_bps), 0, BASIS_POINTS)
    volatility = _clamp(Decimal(str(volatility_index)), 0, MAX_VOLATILITY_INDEX)

    impact_multiplier = 1 + impact / IMPACT_FEE_SCALE
    volatility_multiplier = 1 + volatility / VOLATILITY_SCALE
    fee = base * impact_multiplier * volatility_multiplier

    capped = min(fee, Decimal(MAX_DYNAMIC_FEE_BPS))
    return int(capped.to_integral_value(rounding=ROUND_FLOOR))


def _check_slippage(amount: int, slippage_bps: int) -> None:
    require_int("amount", amount)
    require_int("slippage_bps", slippage_bps)
    if amount < 0:
        raise InvalidInputError(f"amount must be >= 0, got {amount}")
    if not 0 <= slippage_bps <= BASIS_POINTS:
        raise InvalidInputError(f"slippage_bps must be in [0, {BASIS_POINTS}], got {slippage_bps}")


def minimum_amount_out(amount_out: int, slippage_bps: int = DEFAULT_SLIPPAGE_BPS) -> int:
    """Least output the caller should accept, rounded down."""
    _check_slippage(amount_out, slippage_bps)
    return amount_out * (BASIS_POINTS - slippage_bps) // BASIS_POINTS


def maximum_amount_in(amount_in: int, slippage_bps: int = DEFAULT_SLIPPAGE_BPS) -> int:
    """Most input the caller should pay for an exact output, rounded up."""
    _check_slippage(amount_in, slippage_bps)
    numerator = amount_in * (BASIS_POINTS + slippage_bps)
    return -(-numerator // BASIS_POINTS)
