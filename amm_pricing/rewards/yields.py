"""Farming yield, reward boost and LP value metrics.

Prices are not integer token units, so everything here is Decimal.
Numeric inputs are converted with ``Decimal(str(x))`` so float inputs
keep their printed value rather than their binary expansion.
"""

from decimal import Decimal
from typing import Union

from amm_pricing.core.constants import LOCK_BONUSES, MAX_BOOST, SECONDS_PER_DAY, SECONDS_PER_YEAR

Number = Union[int, float, Decimal]


def _dec(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def apy(
    reward_rate_per_second: Number,
    reward_token_price: Number,
    total_staked: Number,
    staking_token_price: Number,
) -> Decimal:
    """Annual yield as a percentage (12.5 means 12.5%).

    Returns 0 when nothing is staked instead of dividing by zero.
    """
    yearly_reward_value = _dec(reward_rate_per_second) * SECONDS_PER_YEAR * _dec(reward_token_price)
    staked_value = _dec(total_staked) * _dec(staking_token_price)
    if staked_value == 0:
        return Decimal("0")
    return yearly_reward_value / staked_value * 100


def boosted_rewards(
    base_rewards: Number,
    governance_staked: Number,
    lp_staked: Number,
    max_boost: Number = MAX_BOOST,
) -> Decimal:
    """Rewards boosted by governance stake relative to LP stake.

    boost = min(1 + governance / lp, max_boost); no boost without LP stake.
    """
    base = _dec(base_rewards)
    lp = _dec(lp_staked)
    if lp == 0:
        return base
    boost = min(1 + _dec(governance_staked) / lp, _dec(max_boost))
    return base * boost


def lock_bonus(lock_period_days: int) -> Decimal:
    """Reward multiplier for a staking lock period. Unknown periods get 1x."""
    return LOCK_BONUSES.get(lock_period_days, Decimal("1"))


def pending_rewards(
    staked: Number,
    elapsed_seconds: Number,
    annual_rate: Number,
    lock_period_days: int = 30,
) -> Decimal:
    """Rewards accrued since the last claim.

    Daily reward is ``staked * annual_rate / 365``, accrued for the
    elapsed (fractional) days and multiplied by the lock bonus.
    """
    elapsed = _dec(elapsed_seconds)
    if elapsed <= 0:
        return Decimal("0")
    daily_reward = _dec(staked) * _dec(annual_rate) / 365
    elapsed_days = elapsed / SECONDS_PER_DAY
    return daily_reward * elapsed_days * lock_bonus(lock_period_days)


def impermanent_loss(price_ratio: Number) -> Decimal:
    """Value of an LP position relative to holding, minus one.

    IL = 2 * sqrt(r) / (1 + r) - 1, where r = current price / entry price.
    Always <= 0; zero when the price has not moved.
    """
    r = _dec(price_ratio)
    if r <= 0:
        raise ValueError(f"price_ratio must be > 0, got {price_ratio}")
    return 2 * r.sqrt() / (1 + r) - 1
