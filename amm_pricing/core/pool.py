"""Pool snapshot and liquidity plan data classes."""

from dataclasses import dataclass

from amm_pricing.core.constants import BASIS_POINTS, DEFAULT_FEE_RATE_BPS
from amm_pricing.core.errors import require_int


@dataclass(frozen=True)
class PoolSnapshot:
    """Immutable view of a pool's reserves for a single pricing call.

    Reserves are oriented for the trade being priced: ``reserve_in`` is the
    token the trader pays, ``reserve_out`` the token they receive. The engine
    never mutates a snapshot; the caller applies results to the real pool.
    """
    reserve_in: int
    reserve_out: int
    total_supply: int = 0
    base_fee_rate_bps: int = DEFAULT_FEE_RATE_BPS

    def __post_init__(self) -> None:
        for name in ("reserve_in", "reserve_out", "total_supply", "base_fee_rate_bps"):
            require_int(name, getattr(self, name))
        if self.reserve_in < 0:
            raise ValueError(f"reserve_in must be >= 0, got {self.reserve_in}")
        if self.reserve_out < 0:
            raise ValueError(f"reserve_out must be >= 0, got {self.reserve_out}")
        if self.total_supply < 0:
            raise ValueError(f"total_supply must be >= 0, got {self.total_supply}")
        if not 0 <= self.base_fee_rate_bps <= BASIS_POINTS:
            raise ValueError(
                f"base_fee_rate_bps must be in [0, {BASIS_POINTS}], got {self.base_fee_rate_bps}"
            )

    @property
    def k(self) -> int:
        """The constant product invariant."""
        return self.reserve_in * self.reserve_out

    def flipped(self) -> "PoolSnapshot":
        """Snapshot oriented for a trade in the opposite direction."""
        return PoolSnapshot(
            reserve_in=self.reserve_out,
            reserve_out=self.reserve_in,
            total_supply=self.total_supply,
            base_fee_rate_bps=self.base_fee_rate_bps,
        )

    def after_swap(self, amount_in: int, amount_out: int) -> "PoolSnapshot":
        """Reserves the pool would hold once a quoted swap is applied."""
        return PoolSnapshot(
            reserve_in=self.reserve_in + amount_in,
            reserve_out=self.reserve_out - amount_out,
            total_supply=self.total_supply,
            base_fee_rate_bps=self.base_fee_rate_bps,
        )


@dataclass(frozen=True)
class LiquidityPlan:
    """Deposit amounts actually used and the LP shares they mint."""
    amount_a: int
    amount_b: int
    liquidity_minted: int
    pool_share_bps: int  # Depositor's share of supply after the mint


@dataclass(frozen=True)
class BurnPlan:
    """Token amounts returned for burning LP shares."""
    amount_a: int
    amount_b: int
