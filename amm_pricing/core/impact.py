"""Price impact in basis points."""

from amm_pricing.core.constants import BASIS_POINTS, DEFAULT_FEE_RATE_BPS
from amm_pricing.core.errors import InvalidInputError, PoolDrainedError, require_int
from amm_pricing.core.quote import get_amount_out


def price_impact_bps(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    fee_rate_bps: int = DEFAULT_FEE_RATE_BPS,
) -> int:
    """Share of ``reserve_out`` an exact-input trade removes, in bps.

    impact = amount_out * 10000 // reserve_out, clamped to 10000.
    Fails exactly where ``get_amount_out`` fails.
    """
    amount_out = get_amount_out(amount_in, reserve_in, reserve_out, fee_rate_bps)
    return min(amount_out * BASIS_POINTS // reserve_out, BASIS_POINTS)


def price_impact_for_output_bps(amount_out: int, reserve_out: int) -> int:
    """Same ratio for an exact-output trade, where the output is known."""
    require_int("amount_out", amount_out)
    require_int("reserve_out", reserve_out)
    if amount_out <= 0 or reserve_out <= 0:
        raise InvalidInputError(
            f"amount_out and reserve_out must be positive, got {amount_out}, {reserve_out}"
        )
    if amount_out >= reserve_out:
        raise PoolDrainedError(f"amount_out {amount_out} would drain reserve_out {reserve_out}")
    return min(amount_out * BASIS_POINTS // reserve_out, BASIS_POINTS)
