"""Liquidity deposit and withdrawal math.

Deposits are matched to the pool ratio before minting:

    amount_b_optimal = amount_a_desired * reserve_b // reserve_a

The first deposit mints sqrt(a * b) shares, of which MINIMUM_LIQUIDITY
are locked forever so the share price of an empty pool cannot be
inflated. Later deposits mint the smaller of the two proportional
contributions, which penalizes imbalanced deposits.
"""

import math

from amm_pricing.core.constants import BASIS_POINTS, MINIMUM_LIQUIDITY
from amm_pricing.core.errors import (
    InsufficientAmountError,
    InsufficientLiquidityBurnedError,
    InsufficientLiquidityMintedError,
    InvalidInputError,
    require_int,
)
from amm_pricing.core.pool import BurnPlan


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        require_int(name, value)
        if value < 0:
            raise InvalidInputError(f"{name} must be >= 0, got {value}")


def optimal_amounts(
    amount_a_desired: int,
    amount_b_desired: int,
    reserve_a: int,
    reserve_b: int,
    amount_a_min: int = 0,
    amount_b_min: int = 0,
) -> tuple[int, int]:
    """Deposit pair that matches the pool ratio without exceeding either desired amount.

    Returns:
        (amount_a, amount_b) to actually deposit

    Raises:
        InsufficientAmountError: the matched amount falls below its minimum
        InvalidInputError: negative input, or exactly one reserve is zero
    """
    _require_non_negative(
        amount_a_desired=amount_a_desired,
        amount_b_desired=amount_b_desired,
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        amount_a_min=amount_a_min,
        amount_b_min=amount_b_min,
    )

    # New pool: the first depositor sets the price
    if reserve_a == 0 and reserve_b == 0:
        return amount_a_desired, amount_b_desired
    if reserve_a == 0 or reserve_b == 0:
        raise InvalidInputError(
            f"one-sided pool cannot be priced: reserve_a={reserve_a} reserve_b={reserve_b}"
        )

    amount_b_optimal = amount_a_desired * reserve_b // reserve_a
    if amount_b_optimal <= amount_b_desired:
        if amount_b_optimal < amount_b_min:
            raise InsufficientAmountError(
                f"amount_b {amount_b_optimal} below minimum {amount_b_min}"
            )
        return amount_a_desired, amount_b_optimal

    amount_a_optimal = amount_b_desired * reserve_a // reserve_b
    if amount_a_optimal > amount_a_desired or amount_a_optimal < amount_a_min:
        raise InsufficientAmountError(
            f"amount_a {amount_a_optimal} outside [{amount_a_min}, {amount_a_desired}]"
        )
    return amount_a_optimal, amount_b_desired


def liquidity_mint(
    amount_a: int,
    amount_b: int,
    reserve_a: int,
    reserve_b: int,
    total_supply: int,
) -> int:
    """LP shares minted for a deposit, rounded down.

    Raises:
        InsufficientLiquidityMintedError: the deposit mints nothing
        InvalidInputError: negative input, or supply exists over a zero reserve
    """
    _require_non_negative(
        amount_a=amount_a,
        amount_b=amount_b,
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        total_supply=total_supply,
    )

    if total_supply == 0:
        liquidity = math.isqrt(amount_a * amount_b) - MINIMUM_LIQUIDITY
    else:
        if reserve_a == 0 or reserve_b == 0:
            raise InvalidInputError("total_supply is positive but a reserve is zero")
        liquidity = min(
            amount_a * total_supply // reserve_a,
            amount_b * total_supply // reserve_b,
        )

    if liquidity <= 0:
        raise InsufficientLiquidityMintedError(
            f"deposit of ({amount_a}, {amount_b}) mints {liquidity} shares"
        )
    return liquidity


def pool_share_bps(liquidity: int, total_supply_after: int) -> int:
    """Share of total supply held by ``liquidity``, in bps (floor)."""
    _require_non_negative(liquidity=liquidity, total_supply_after=total_supply_after)
    if total_supply_after == 0:
        return 0
    return min(liquidity * BASIS_POINTS // total_supply_after, BASIS_POINTS)


def liquidity_for_percentage(position_liquidity: int, percentage_bps: int) -> int:
    """Shares to burn when removing ``percentage_bps`` of a position."""
    _require_non_negative(position_liquidity=position_liquidity, percentage_bps=percentage_bps)
    if percentage_bps > BASIS_POINTS:
        raise InvalidInputError(f"percentage_bps must be <= {BASIS_POINTS}, got {percentage_bps}")
    return position_liquidity * percentage_bps // BASIS_POINTS


def burn_amounts(
    liquidity: int,
    reserve_a: int,
    reserve_b: int,
    total_supply: int,
) -> BurnPlan:
    """Tokens returned for burning ``liquidity`` shares (pro rata, floor).

    Raises:
        InsufficientLiquidityBurnedError: either side would round to zero
        InvalidInputError: liquidity not in (0, total_supply]
    """
    _require_non_negative(
        liquidity=liquidity,
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        total_supply=total_supply,
    )
    if liquidity == 0 or liquidity > total_supply:
        raise InvalidInputError(
            f"liquidity must be in (0, {total_supply}], got {liquidity}"
        )

    amount_a = liquidity * reserve_a // total_supply
    amount_b = liquidity * reserve_b // total_supply
    if amount_a == 0 or amount_b == 0:
        raise InsufficientLiquidityBurnedError(
            f"burning {liquidity} shares returns ({amount_a}, {amount_b})"
        )
    return BurnPlan(amount_a=amount_a, amount_b=amount_b)
