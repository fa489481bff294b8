"""Integration tests for the quote pipeline and liquidity planning.

Tests verify:
1. The exact-input and exact-output pipelines end to end
2. Failures come back as Outcome values with the right ErrorKind
3. Warnings and MEV flags are attached to quotes
4. Settings overrides flow through the engine
"""

import pytest

from amm_pricing.config import EngineSettings
from amm_pricing.core.errors import ErrorKind, InvalidInputError, Outcome
from amm_pricing.core.pool import PoolSnapshot
from amm_pricing.core.quote import get_amount_out
from amm_pricing.core.trade import TradeRecord
from amm_pricing.engine import HIGH_IMPACT_WARNING, PricingEngine
from tests.fixtures.pool_fixtures import check_swap, make_trades


@pytest.fixture
def small_pool():
    return PoolSnapshot(reserve_in=10_000, reserve_out=10_000, base_fee_rate_bps=30)


class TestExactInput:

    def test_full_pipeline(self, engine, small_pool):
        quote = engine.quote_exact_input(small_pool, 1_000).unwrap()

        assert quote.price_impact_bps == 906
        assert quote.dynamic_fee_bps == 57
        assert quote.amount_out == 904
        assert quote.minimum_amount_out == 899
        assert quote.mev_risk is True
        assert quote.exact_output is False
        assert quote.maximum_amount_in is None
        assert HIGH_IMPACT_WARNING in quote.warnings
        assert quote.warnings[0] == HIGH_IMPACT_WARNING

    def test_fee_amount(self, engine, small_pool):
        quote = engine.quote_exact_input(small_pool, 1_000).unwrap()
        assert quote.fee_amount == 5
        assert quote.execution_price == pytest.approx(0.904)

    def test_small_trade_has_no_warnings(self, engine, balanced_pool):
        quote = engine.quote_exact_input(balanced_pool, 1_000).unwrap()
        assert quote.dynamic_fee_bps == 30
        assert quote.mev_risk is False
        assert quote.warnings == ()

    def test_custom_slippage(self, engine, small_pool):
        quote = engine.quote_exact_input(small_pool, 1_000, slippage_bps=0).unwrap()
        assert quote.minimum_amount_out == quote.amount_out

    def test_volatility_raises_fee(self, engine, balanced_pool):
        calm = engine.quote_exact_input(balanced_pool, 100_000).unwrap()
        stormy = engine.quote_exact_input(balanced_pool, 100_000, volatility_index=100).unwrap()
        assert stormy.dynamic_fee_bps > calm.dynamic_fee_bps
        assert stormy.amount_out < calm.amount_out

    def test_sandwich_warning(self, engine, balanced_pool):
        now = 1_000_000
        trades = [TradeRecord(amount=5, timestamp=now - 1_000, user="bob")]
        quote = engine.quote_exact_input(balanced_pool, 1_000, recent_trades=trades, user="alice", now=now).unwrap()
        assert quote.mev_risk is True
        assert len(quote.warnings) == 1

    def test_frequent_trader_flagged(self, engine, balanced_pool):
        now = 1_000_000
        # Three earlier trades; the one being quoted is the fourth
        trades = make_trades("alice", 3, now)
        quote = engine.quote_exact_input(balanced_pool, 1_000, recent_trades=trades, user="alice", now=now).unwrap()
        assert quote.mev_risk is True
        assert quote.warnings == ("Frequent trading detected - potential sandwich attack risk",)

    def test_frequency_and_sandwich_warnings_together(self, engine, balanced_pool):
        now = 1_000_000
        trades = make_trades("alice", 3, now - 10_000) + [TradeRecord(amount=5, timestamp=now - 1_000, user="bob")]
        quote = engine.quote_exact_input(balanced_pool, 1_000, recent_trades=trades, user="alice", now=now).unwrap()
        assert len(quote.warnings) == 2

    def test_constant_product_does_not_decrease(self, engine, pool_set):
        for pool in pool_set:
            amount_in = pool.reserve_in // 20
            quote = engine.quote_exact_input(pool, amount_in).unwrap()
            assert check_swap(pool, quote.amount_in, quote.amount_out).growth >= 0

    def test_pool_is_not_mutated(self, engine, small_pool):
        engine.quote_exact_input(small_pool, 1_000)
        assert small_pool.reserve_in == 10_000
        assert small_pool.reserve_out == 10_000


class TestExactOutput:

    def test_full_pipeline(self, engine, small_pool):
        quote = engine.quote_exact_output(small_pool, 906).unwrap()

        assert quote.price_impact_bps == 906
        assert quote.dynamic_fee_bps == 57
        assert quote.amount_in == 1_002
        assert quote.amount_out == 906
        assert quote.minimum_amount_out == 906
        assert quote.maximum_amount_in == 1_008
        assert quote.exact_output is True

    def test_drain_reported(self, engine, small_pool):
        outcome = engine.quote_exact_output(small_pool, 10_000)
        assert not outcome.ok
        assert outcome.kind == ErrorKind.POOL_DRAINED

    def test_quote_covers_requested_output(self, engine, deep_pool):
        want = 10**21
        quote = engine.quote_exact_output(deep_pool, want).unwrap()
        received = get_amount_out(
            quote.amount_in, deep_pool.reserve_in, deep_pool.reserve_out, quote.dynamic_fee_bps
        )
        assert received >= want


class TestFailures:

    @pytest.mark.parametrize("amount", [0, -100])
    def test_non_positive_amount(self, engine, small_pool, amount):
        outcome = engine.quote_exact_input(small_pool, amount)
        assert not outcome.ok
        assert outcome.kind == ErrorKind.INVALID_INPUT
        assert outcome.value is None

    def test_empty_pool(self, engine):
        outcome = engine.quote_exact_input(PoolSnapshot(reserve_in=0, reserve_out=0), 1_000)
        assert outcome.kind == ErrorKind.INVALID_INPUT

    def test_float_amount_raises(self, engine, small_pool):
        with pytest.raises(TypeError):
            engine.quote_exact_input(small_pool, 1_000.0)

    def test_price_methods_raise(self, engine, small_pool):
        with pytest.raises(InvalidInputError):
            engine.price_exact_input(small_pool, 0)

    def test_unwrap_reraises(self, engine, small_pool):
        outcome = engine.quote_exact_input(small_pool, 0)
        with pytest.raises(InvalidInputError):
            outcome.unwrap()


class TestOutcome:

    def test_requires_exactly_one_side(self):
        with pytest.raises(ValueError):
            Outcome()
        with pytest.raises(ValueError):
            Outcome(value=1, error=InvalidInputError("x"))

    def test_success(self):
        outcome = Outcome.success(5)
        assert outcome.ok
        assert outcome.kind is None
        assert outcome.unwrap() == 5


class TestLiquidityPlanning:

    def test_first_deposit(self, engine):
        plan = engine.plan_deposit(10**6, 10**6, 0, 0, 0).unwrap()
        assert plan.liquidity_minted == 999_000
        assert plan.pool_share_bps == 9_990

    def test_proportional_deposit(self, engine):
        plan = engine.plan_deposit(100, 200, 1_000, 2_000, 1_000).unwrap()
        assert (plan.amount_a, plan.amount_b) == (100, 200)
        assert plan.liquidity_minted == 100
        assert plan.pool_share_bps == 909

    def test_deposit_below_minimum(self, engine):
        outcome = engine.plan_deposit(100, 150, 1_000, 2_000, 1_000, amount_a_min=80)
        assert outcome.kind == ErrorKind.INSUFFICIENT_AMOUNT

    def test_dust_first_deposit(self, engine):
        outcome = engine.plan_deposit(1_000, 1_000, 0, 0, 0)
        assert outcome.kind == ErrorKind.INSUFFICIENT_LIQUIDITY_MINTED

    def test_withdrawal(self, engine):
        plan = engine.plan_withdrawal(100, 1_000, 2_000, 1_000).unwrap()
        assert (plan.amount_a, plan.amount_b) == (100, 200)

    def test_dust_withdrawal(self, engine):
        outcome = engine.plan_withdrawal(1, 10, 10, 1_000)
        assert outcome.kind == ErrorKind.INSUFFICIENT_LIQUIDITY_BURNED


class TestSettings:

    def test_slippage_setting_used(self, small_pool):
        engine = PricingEngine(EngineSettings(base_fee_rate_bps=30, slippage_bps=100, high_impact_bps=500))
        quote = engine.quote_exact_input(small_pool, 1_000).unwrap()
        assert quote.minimum_amount_out == 904 * 9_900 // 10_000

    def test_high_impact_threshold_setting_used(self, small_pool):
        engine = PricingEngine(EngineSettings(base_fee_rate_bps=30, slippage_bps=50, high_impact_bps=10_000))
        quote = engine.quote_exact_input(small_pool, 1_000).unwrap()
        assert HIGH_IMPACT_WARNING not in quote.warnings

    def test_invalid_setting_rejected(self):
        with pytest.raises(ValueError):
            EngineSettings(base_fee_rate_bps=30, slippage_bps=10_001, high_impact_bps=500)
