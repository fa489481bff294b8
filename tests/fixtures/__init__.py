"""Test fixtures for pricing and liquidity tests."""

from tests.fixtures.pool_fixtures import (
    PoolProfile,
    SwapCheck,
    check_swap,
    create_pool,
    create_pool_set,
    get_reserves,
    make_trades,
)

__all__ = [
    "PoolProfile",
    "SwapCheck",
    "check_swap",
    "create_pool",
    "create_pool_set",
    "get_reserves",
    "make_trades",
]
