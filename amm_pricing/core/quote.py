"""Constant product swap math (x * y = k) with fee-on-input.

Uniswap v2 style, in integer token units:

    amount_in_with_fee = amount_in * (10000 - fee)
    amount_out = amount_in_with_fee * reserve_out
                 // (reserve_in * 10000 + amount_in_with_fee)

Output rounds down and required input rounds up (+1), so the pool is
never under-compensated in either direction. Every product is formed
before the single division.
"""

from amm_pricing.core.constants import DEFAULT_FEE_RATE_BPS, FEE_DENOMINATOR
from amm_pricing.core.errors import InvalidInputError, PoolDrainedError, require_int


def _check_reserves(reserve_in: int, reserve_out: int) -> None:
    require_int("reserve_in", reserve_in)
    require_int("reserve_out", reserve_out)
    if reserve_in <= 0 or reserve_out <= 0:
        raise InvalidInputError(
            f"reserves must be positive, got reserve_in={reserve_in} reserve_out={reserve_out}"
        )


def _check_fee(fee_rate_bps: int, *, allow_full: bool) -> None:
    require_int("fee_rate_bps", fee_rate_bps)
    upper_ok = fee_rate_bps <= FEE_DENOMINATOR if allow_full else fee_rate_bps < FEE_DENOMINATOR
    if fee_rate_bps < 0 or not upper_ok:
        raise InvalidInputError(f"fee_rate_bps out of range: {fee_rate_bps}")


def get_amount_out(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    fee_rate_bps: int = DEFAULT_FEE_RATE_BPS,
) -> int:
    """Output amount for an exact input.

    Args:
        amount_in: Tokens paid in, smallest unit
        reserve_in: Pool reserve of the input token
        reserve_out: Pool reserve of the output token
        fee_rate_bps: Fee in basis points, 0-10000

    Returns:
        Tokens received, rounded down

    Raises:
        InvalidInputError: non-positive amount or reserve, or bad fee
    """
    require_int("amount_in", amount_in)
    if amount_in <= 0:
        raise InvalidInputError(f"amount_in must be positive, got {amount_in}")
    _check_reserves(reserve_in, reserve_out)
    _check_fee(fee_rate_bps, allow_full=True)

    amount_in_with_fee = amount_in * (FEE_DENOMINATOR - fee_rate_bps)
    numerator = amount_in_with_fee * reserve_out
    denominator = reserve_in * FEE_DENOMINATOR + amount_in_with_fee
    return numerator // denominator


def get_amount_in(
    amount_out: int,
    reserve_in: int,
    reserve_out: int,
    fee_rate_bps: int = DEFAULT_FEE_RATE_BPS,
) -> int:
    """Input amount required for an exact output.

    Rounds up by adding one after the floor division, so
    ``get_amount_out(get_amount_in(y, ...), ...) >= y``.

    Raises:
        PoolDrainedError: amount_out >= reserve_out
        InvalidInputError: non-positive amount or reserve, or fee >= 100%
    """
    require_int("amount_out", amount_out)
    if amount_out <= 0:
        raise InvalidInputError(f"amount_out must be positive, got {amount_out}")
    _check_reserves(reserve_in, reserve_out)
    if amount_out >= reserve_out:
        raise PoolDrainedError(
            f"amount_out {amount_out} would drain reserve_out {reserve_out}"
        )
    _check_fee(fee_rate_bps, allow_full=False)

    numerator = reserve_in * amount_out * FEE_DENOMINATOR
    denominator = (reserve_out - amount_out) * (FEE_DENOMINATOR - fee_rate_bps)
    return numerator // denominator + 1


def spot_price(reserve_in: int, reserve_out: int) -> float:
    """Marginal price (out per in) before fees. Display only."""
    if reserve_in == 0:
        return 0.0
    return reserve_out / reserve_in
