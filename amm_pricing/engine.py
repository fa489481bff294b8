"""Swap quote pipeline and liquidity planning.

Composes the pure pricing stages into the results a request handler
needs. A swap quote runs:

    price impact (base fee) -> dynamic fee -> amount out (dynamic fee)
        -> slippage bound -> MEV heuristics -> warnings

Every method returns an ``Outcome`` instead of raising, so callers can
branch on ``outcome.kind``. The engine holds only immutable settings and
never mutates the pool; applying a quote atomically against the
authoritative reserves is the caller's job.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from amm_pricing.config import DEFAULT_SETTINGS, EngineSettings
from amm_pricing.core.constants import MINIMUM_LIQUIDITY
from amm_pricing.core.errors import Outcome, PricingError
from amm_pricing.core.fees import dynamic_fee_bps, maximum_amount_in, minimum_amount_out
from amm_pricing.core.impact import price_impact_bps, price_impact_for_output_bps
from amm_pricing.core.liquidity import burn_amounts, liquidity_mint, optimal_amounts, pool_share_bps
from amm_pricing.core.pool import BurnPlan, LiquidityPlan, PoolSnapshot
from amm_pricing.core.quote import get_amount_in, get_amount_out
from amm_pricing.core.trade import SwapQuote, TradeRecord
from amm_pricing.risk.mev import explain_mev_risk

HIGH_IMPACT_WARNING = "High price impact detected - consider reducing trade size"


@dataclass(frozen=True)
class PricingEngine:
    """Stateless facade over the pricing stages.

    Safe to share between threads: it holds nothing but settings.
    """
    settings: EngineSettings = DEFAULT_SETTINGS

    def _slippage(self, slippage_bps: Optional[int]) -> int:
        return self.settings.slippage_bps if slippage_bps is None else slippage_bps

    def _warnings(self, impact_bps: int, mev_reasons: list[str]) -> tuple[str, ...]:
        warnings = []
        if impact_bps > self.settings.high_impact_bps:
            warnings.append(HIGH_IMPACT_WARNING)
        warnings.extend(mev_reasons)
        return tuple(warnings)

    def price_exact_input(
        self,
        pool: PoolSnapshot,
        amount_in: int,
        volatility_index: int | float | Decimal = 0,
        recent_trades: Iterable[TradeRecord] = (),
        user: str = "",
        now: int = 0,
        slippage_bps: Optional[int] = None,
    ) -> SwapQuote:
        """Quote an exact-input swap. Raises ``PricingError`` on bad input."""
        impact = price_impact_bps(
            amount_in, pool.reserve_in, pool.reserve_out, pool.base_fee_rate_bps
        )
        fee = dynamic_fee_bps(pool.base_fee_rate_bps, impact, volatility_index)
        amount_out = get_amount_out(amount_in, pool.reserve_in, pool.reserve_out, fee)
        min_out = minimum_amount_out(amount_out, self._slippage(slippage_bps))
        mev = explain_mev_risk(amount_in, pool.reserve_in, recent_trades, user, now)

        return SwapQuote(
            amount_in=amount_in,
            amount_out=amount_out,
            price_impact_bps=impact,
            dynamic_fee_bps=fee,
            minimum_amount_out=min_out,
            mev_risk=mev.at_risk,
            warnings=self._warnings(impact, mev.reasons),
        )

    def price_exact_output(
        self,
        pool: PoolSnapshot,
        amount_out: int,
        volatility_index: int | float | Decimal = 0,
        recent_trades: Iterable[TradeRecord] = (),
        user: str = "",
        now: int = 0,
        slippage_bps: Optional[int] = None,
    ) -> SwapQuote:
        """Quote an exact-output swap. Raises ``PricingError`` on bad input."""
        impact = price_impact_for_output_bps(amount_out, pool.reserve_out)
        fee = dynamic_fee_bps(pool.base_fee_rate_bps, impact, volatility_index)
        amount_in = get_amount_in(amount_out, pool.reserve_in, pool.reserve_out, fee)
        max_in = maximum_amount_in(amount_in, self._slippage(slippage_bps))
        mev = explain_mev_risk(amount_in, pool.reserve_in, recent_trades, user, now)

        return SwapQuote(
            amount_in=amount_in,
            amount_out=amount_out,
            price_impact_bps=impact,
            dynamic_fee_bps=fee,
            minimum_amount_out=amount_out,
            mev_risk=mev.at_risk,
            exact_output=True,
            maximum_amount_in=max_in,
            warnings=self._warnings(impact, mev.reasons),
        )

    def quote_exact_input(self, pool: PoolSnapshot, amount_in: int, **kwargs) -> Outcome[SwapQuote]:
        """Result-value form of ``price_exact_input``."""
        try:
            return Outcome.success(self.price_exact_input(pool, amount_in, **kwargs))
        except PricingError as e:
            return Outcome.failure(e)

    def quote_exact_output(self, pool: PoolSnapshot, amount_out: int, **kwargs) -> Outcome[SwapQuote]:
        """Result-value form of ``price_exact_output``."""
        try:
            return Outcome.success(self.price_exact_output(pool, amount_out, **kwargs))
        except PricingError as e:
            return Outcome.failure(e)

    def plan_deposit(
        self,
        amount_a_desired: int,
        amount_b_desired: int,
        reserve_a: int,
        reserve_b: int,
        total_supply: int,
        amount_a_min: int = 0,
        amount_b_min: int = 0,
    ) -> Outcome[LiquidityPlan]:
        """Match a deposit to the pool ratio and compute the shares it mints."""
        try:
            amount_a, amount_b = optimal_amounts(
                amount_a_desired, amount_b_desired, reserve_a, reserve_b,
                amount_a_min, amount_b_min,
            )
            minted = liquidity_mint(amount_a, amount_b, reserve_a, reserve_b, total_supply)
        except PricingError as e:
            return Outcome.failure(e)

        # First deposit also creates the locked minimum
        supply_after = total_supply + minted + (MINIMUM_LIQUIDITY if total_supply == 0 else 0)
        return Outcome.success(LiquidityPlan(
            amount_a=amount_a,
            amount_b=amount_b,
            liquidity_minted=minted,
            pool_share_bps=pool_share_bps(minted, supply_after),
        ))

    def plan_withdrawal(
        self,
        liquidity: int,
        reserve_a: int,
        reserve_b: int,
        total_supply: int,
    ) -> Outcome[BurnPlan]:
        """Token amounts returned for burning LP shares."""
        try:
            return Outcome.success(burn_amounts(liquidity, reserve_a, reserve_b, total_supply))
        except PricingError as e:
            return Outcome.failure(e)
