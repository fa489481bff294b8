"""Trade data classes."""

from dataclasses import dataclass, field
from typing import Optional

from amm_pricing.core.constants import FEE_DENOMINATOR


@dataclass(frozen=True)
class TradeRecord:
    """A past trade, supplied by the caller for risk assessment.

    The engine never stores these; callers keep a bounded window
    (see ``amm_pricing.risk.mev.TradeWindow``).
    """
    amount: int
    timestamp: int  # Milliseconds since epoch
    user: str

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"amount must be >= 0, got {self.amount}")


@dataclass(frozen=True)
class SwapQuote:
    """A fully priced swap, produced fresh per call.

    For exact-input quotes ``amount_in`` is what the caller asked for and
    ``minimum_amount_out`` bounds slippage. For exact-output quotes
    ``amount_out`` is fixed and ``maximum_amount_in`` bounds slippage.
    """
    amount_in: int
    amount_out: int
    price_impact_bps: int
    dynamic_fee_bps: int
    minimum_amount_out: int
    mev_risk: bool
    exact_output: bool = False
    maximum_amount_in: Optional[int] = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def fee_amount(self) -> int:
        """Input tokens withheld as the dynamic fee (floor)."""
        return self.amount_in * self.dynamic_fee_bps // FEE_DENOMINATOR

    @property
    def execution_price(self) -> float:
        """Output per unit input. Display only, never used for settlement."""
        if self.amount_in == 0:
            return 0.0
        return self.amount_out / self.amount_in
