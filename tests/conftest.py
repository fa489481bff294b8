"""Pytest configuration and shared fixtures for pricing engine tests.

This module provides:
- Pytest markers for test categorization
- Shared pool snapshot fixtures
- Seeds for the randomized property tests
"""

import random

import pytest

from amm_pricing.core.pool import PoolSnapshot
from amm_pricing.engine import PricingEngine
from tests.fixtures.pool_fixtures import PoolProfile, create_pool, create_pool_set


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "economic: Core economic property tests (invariant growth, monotonicity)"
    )
    config.addinivalue_line(
        "markers", "edge_case: Edge case and stress tests with extreme inputs"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests spanning multiple components"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on location and name."""
    for item in items:
        if "edge_case" in item.nodeid or "edge_case" in item.name:
            item.add_marker(pytest.mark.edge_case)

        if any(keyword in item.nodeid for keyword in ["invariant", "property"]):
            item.add_marker(pytest.mark.economic)

        if any(keyword in item.nodeid for keyword in ["engine", "cli"]):
            item.add_marker(pytest.mark.integration)


# ============================================================================
# Pool Fixtures
# ============================================================================


@pytest.fixture
def balanced_pool() -> PoolSnapshot:
    """Balanced 10M/10M pool with a 30bps base fee."""
    return create_pool(PoolProfile.BALANCED)


@pytest.fixture
def deep_pool() -> PoolSnapshot:
    """Pool with 18-decimal token magnitudes."""
    return create_pool(PoolProfile.DEEP)


@pytest.fixture
def pool_set() -> list[PoolSnapshot]:
    """One pool per balance profile, 30bps base fee."""
    return create_pool_set()


@pytest.fixture
def engine() -> PricingEngine:
    """Engine with default settings (30bps base fee, 50bps slippage)."""
    return PricingEngine()


# ============================================================================
# Seed Fixtures
# ============================================================================


@pytest.fixture
def fixed_seed() -> int:
    """Fixed random seed for deterministic tests.

    Returns:
        42
    """
    return 42


@pytest.fixture
def rng(fixed_seed) -> random.Random:
    """Seeded generator for property tests."""
    return random.Random(fixed_seed)


@pytest.fixture
def random_seeds() -> list[int]:
    """Multiple random seeds for testing consistency across seeds.

    Returns:
        List of 5 seeds: [42, 123, 456, 789, 1337]
    """
    return [42, 123, 456, 789, 1337]
