"""Command-line interface for pricing swaps and deposits."""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Optional

from amm_pricing.analysis.charts import create_depth_chart
from amm_pricing.analysis.depth import depth_ladder, geometric_sizes
from amm_pricing.config import EngineSettings, load_settings
from amm_pricing.core.pool import PoolSnapshot
from amm_pricing.engine import PricingEngine
from amm_pricing.rewards.yields import apy, boosted_rewards

logger = logging.getLogger(__name__)


def _engine() -> tuple[PricingEngine, EngineSettings]:
    settings = load_settings()
    return PricingEngine(settings=settings), settings


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid decimal value: {value!r}")


def quote_command(args: argparse.Namespace) -> int:
    """Quote a swap against the given reserves."""
    engine, settings = _engine()
    fee = args.fee if args.fee is not None else settings.base_fee_rate_bps
    try:
        pool = PoolSnapshot(reserve_in=args.reserve_in, reserve_out=args.reserve_out, base_fee_rate_bps=fee)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    logger.debug("Quoting %s %d against %s", "exact-out" if args.exact_out else "exact-in", args.amount, pool)
    if args.exact_out:
        outcome = engine.quote_exact_output(
            pool, args.amount, volatility_index=args.volatility, slippage_bps=args.slippage
        )
    else:
        outcome = engine.quote_exact_input(
            pool, args.amount, volatility_index=args.volatility, slippage_bps=args.slippage
        )

    if not outcome.ok:
        logger.warning("Quote rejected (%s): %s", outcome.kind.value, outcome.error)
        print(f"Quote failed [{outcome.kind.value}]: {outcome.error}")
        return 1

    quote = outcome.value
    print(f"Amount in:       {quote.amount_in}")
    print(f"Amount out:      {quote.amount_out}")
    print(f"Price impact:    {quote.price_impact_bps} bps")
    print(f"Dynamic fee:     {quote.dynamic_fee_bps} bps")
    if quote.exact_output:
        print(f"Maximum in:      {quote.maximum_amount_in}")
    else:
        print(f"Minimum out:     {quote.minimum_amount_out}")
    print(f"MEV risk:        {'yes' if quote.mev_risk else 'no'}")
    for warning in quote.warnings:
        print(f"  - {warning}")
    return 0


def deposit_command(args: argparse.Namespace) -> int:
    """Plan a liquidity deposit."""
    engine, _ = _engine()
    outcome = engine.plan_deposit(
        args.amount_a, args.amount_b, args.reserve_a, args.reserve_b, args.total_supply,
        args.min_a, args.min_b,
    )
    if not outcome.ok:
        logger.warning("Deposit rejected (%s): %s", outcome.kind.value, outcome.error)
        print(f"Deposit failed [{outcome.kind.value}]: {outcome.error}")
        return 1

    plan = outcome.value
    print(f"Deposit A:        {plan.amount_a}")
    print(f"Deposit B:        {plan.amount_b}")
    print(f"Liquidity minted: {plan.liquidity_minted}")
    print(f"Pool share:       {Decimal(plan.pool_share_bps) / 100:.2f}%")
    return 0


def withdraw_command(args: argparse.Namespace) -> int:
    """Plan a liquidity withdrawal."""
    engine, _ = _engine()
    outcome = engine.plan_withdrawal(args.liquidity, args.reserve_a, args.reserve_b, args.total_supply)
    if not outcome.ok:
        logger.warning("Withdrawal rejected (%s): %s", outcome.kind.value, outcome.error)
        print(f"Withdrawal failed [{outcome.kind.value}]: {outcome.error}")
        return 1

    print(f"Receive A: {outcome.value.amount_a}")
    print(f"Receive B: {outcome.value.amount_b}")
    return 0


def apy_command(args: argparse.Namespace) -> int:
    """Report farming APY, optionally boosted by governance stake."""
    base_apy = apy(args.reward_rate, args.reward_price, args.total_staked, args.staking_price)
    print(f"Base APY:    {base_apy:.2f}%")
    if args.governance_staked is not None:
        lp_staked = args.lp_staked if args.lp_staked is not None else args.total_staked
        boosted = boosted_rewards(base_apy, args.governance_staked, lp_staked)
        print(f"Boosted APY: {boosted:.2f}%")
    return 0


def ladder_command(args: argparse.Namespace) -> int:
    """Print a depth ladder for the given reserves."""
    engine, settings = _engine()
    fee = args.fee if args.fee is not None else settings.base_fee_rate_bps
    try:
        pool = PoolSnapshot(reserve_in=args.reserve_in, reserve_out=args.reserve_out, base_fee_rate_bps=fee)
        sizes = geometric_sizes(pool.reserve_in, n=args.steps, max_bps=args.max_bps)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    ladder = depth_ladder(pool, sizes, volatility_index=args.volatility, engine=engine)
    logger.debug("Ladder has %d rows out of %d sizes", len(ladder), len(sizes))
    print(ladder.to_string(index=False))
    if args.chart:
        create_depth_chart(ladder).write_html(args.chart)
        print(f"Chart written to {args.chart}")
    return 0


def _add_reserve_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--reserve-in", type=int, required=True, help="Reserve of the token paid in")
    parser.add_argument("--reserve-out", type=int, required=True, help="Reserve of the token received")
    parser.add_argument(
        "--fee",
        type=int,
        default=None,
        help="Base fee in bps (defaults to AMM_BASE_FEE_BPS or 30)",
    )
    parser.add_argument(
        "--volatility",
        type=_decimal,
        default=Decimal("0"),
        help="Volatility index fed to the dynamic fee",
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="AMM pricing engine - quote swaps, plan deposits, estimate yield",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  amm-quote quote 1000000 --reserve-in 100000000 --reserve-out 200000000
  amm-quote quote 5000 --exact-out --reserve-in 100000000 --reserve-out 200000000
  amm-quote deposit 100 200 --reserve-a 1000 --reserve-b 2000 --total-supply 1000
  amm-quote ladder --reserve-in 100000000 --reserve-out 200000000 --steps 8
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Quote command
    quote_parser = subparsers.add_parser("quote", help="Quote a swap")
    quote_parser.add_argument("amount", type=int, help="Amount in (or amount out with --exact-out)")
    _add_reserve_args(quote_parser)
    quote_parser.add_argument("--exact-out", action="store_true", help="Treat amount as the exact output")
    quote_parser.add_argument(
        "--slippage",
        type=int,
        default=None,
        help="Slippage tolerance in bps (defaults to AMM_SLIPPAGE_BPS or 50)",
    )
    quote_parser.set_defaults(func=quote_command)

    # Deposit command
    deposit_parser = subparsers.add_parser("deposit", help="Plan a liquidity deposit")
    deposit_parser.add_argument("amount_a", type=int, help="Desired amount of token A")
    deposit_parser.add_argument("amount_b", type=int, help="Desired amount of token B")
    deposit_parser.add_argument("--reserve-a", type=int, default=0)
    deposit_parser.add_argument("--reserve-b", type=int, default=0)
    deposit_parser.add_argument("--total-supply", type=int, default=0)
    deposit_parser.add_argument("--min-a", type=int, default=0, help="Minimum acceptable amount of A")
    deposit_parser.add_argument("--min-b", type=int, default=0, help="Minimum acceptable amount of B")
    deposit_parser.set_defaults(func=deposit_command)

    # Withdraw command
    withdraw_parser = subparsers.add_parser("withdraw", help="Plan a liquidity withdrawal")
    withdraw_parser.add_argument("liquidity", type=int, help="LP shares to burn")
    withdraw_parser.add_argument("--reserve-a", type=int, required=True)
    withdraw_parser.add_argument("--reserve-b", type=int, required=True)
    withdraw_parser.add_argument("--total-supply", type=int, required=True)
    withdraw_parser.set_defaults(func=withdraw_command)

    # APY command
    apy_parser = subparsers.add_parser("apy", help="Estimate farming APY")
    apy_parser.add_argument("--reward-rate", type=_decimal, required=True, help="Reward tokens per second")
    apy_parser.add_argument("--reward-price", type=_decimal, required=True)
    apy_parser.add_argument("--total-staked", type=_decimal, required=True)
    apy_parser.add_argument("--staking-price", type=_decimal, required=True)
    apy_parser.add_argument("--governance-staked", type=_decimal, default=None)
    apy_parser.add_argument("--lp-staked", type=_decimal, default=None)
    apy_parser.set_defaults(func=apy_command)

    # Ladder command
    ladder_parser = subparsers.add_parser("ladder", help="Quote a range of trade sizes")
    _add_reserve_args(ladder_parser)
    ladder_parser.add_argument("--steps", type=int, default=10)
    ladder_parser.add_argument("--max-bps", type=int, default=1_000, help="Largest size as bps of reserve")
    ladder_parser.add_argument("--chart", default=None, metavar="PATH", help="Also write an HTML depth chart")
    ladder_parser.set_defaults(func=ladder_command)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except ValueError as e:
        # Bad environment overrides surface here
        logger.error("Invalid configuration: %s", e)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
