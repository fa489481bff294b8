"""Yield farming and LP reward metrics."""

from amm_pricing.rewards.yields import (
    apy,
    boosted_rewards,
    impermanent_loss,
    lock_bonus,
    pending_rewards,
)

__all__ = [
    "apy",
    "boosted_rewards",
    "impermanent_loss",
    "lock_bonus",
    "pending_rewards",
]
