"""Naive MEV (front-running / sandwich) risk classification.

Best-effort heuristics only. A ``False`` result does not mean a trade is
safe, and nothing here should be used as a security boundary. Three
independent triggers, any one of which flags a trade:

- size: the trade is more than 5% of the input reserve
- frequency: counting this one, the user made more than 3 trades in the last 60s
- sandwich: the latest trade was by someone else within the last 10s
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from amm_pricing.core.constants import (
    BASIS_POINTS,
    MEV_FREQUENCY_LIMIT,
    MEV_FREQUENCY_WINDOW_MS,
    MEV_SANDWICH_WINDOW_MS,
    MEV_SIZE_THRESHOLD_BPS,
)
from amm_pricing.core.trade import TradeRecord


@dataclass(frozen=True)
class MevAssessment:
    """Which heuristics fired for a trade."""
    size: bool
    frequency: bool
    sandwich: bool

    @property
    def at_risk(self) -> bool:
        return self.size or self.frequency or self.sandwich

    @property
    def reasons(self) -> list[str]:
        reasons = []
        if self.size:
            reasons.append("MEV risk detected - large trade may be front-run")
        if self.frequency:
            reasons.append("Frequent trading detected - potential sandwich attack risk")
        if self.sandwich:
            reasons.append("Recent trade by another account - possible sandwich in progress")
        return reasons


class TradeWindow:
    """Caller-owned ring buffer of recent trades.

    Keeps at most ``maxlen`` records; the oldest are dropped first.
    Iterates oldest to newest. Record a trade after assessing it, so the
    window only ever holds history.
    """

    def __init__(self, maxlen: int = 256, trades: Iterable[TradeRecord] = ()):
        if maxlen <= 0:
            raise ValueError(f"maxlen must be > 0, got {maxlen}")
        self._trades: deque[TradeRecord] = deque(trades, maxlen=maxlen)

    def record(self, trade: TradeRecord) -> None:
        self._trades.append(trade)

    def since(self, cutoff: int) -> list[TradeRecord]:
        """Trades with timestamp >= cutoff."""
        return [t for t in self._trades if t.timestamp >= cutoff]

    def __iter__(self) -> Iterator[TradeRecord]:
        return iter(self._trades)

    def __len__(self) -> int:
        return len(self._trades)


def _is_large(amount_in: int, reserve_in: int) -> bool:
    # amount_in > reserve_in * 5%, without leaving integers
    return amount_in * BASIS_POINTS > reserve_in * MEV_SIZE_THRESHOLD_BPS


def _latest(trades: Sequence[TradeRecord]) -> Optional[TradeRecord]:
    latest = None
    for trade in trades:
        # >= so that a later entry wins a timestamp tie
        if latest is None or trade.timestamp >= latest.timestamp:
            latest = trade
    return latest


def explain_mev_risk(
    amount_in: int,
    reserve_in: int,
    recent_trades: Iterable[TradeRecord],
    user: str,
    now: int,
) -> MevAssessment:
    """Evaluate each heuristic separately.

    Args:
        amount_in: Size of the trade being assessed
        reserve_in: Pool reserve of the input token
        recent_trades: Earlier trades, any order, excluding this one
        user: Identifier of the trader being assessed
        now: Current time in milliseconds
    """
    trades = list(recent_trades)

    # The trade being assessed counts toward the limit
    user_recent = 1 + sum(
        1 for t in trades
        if t.user == user and now - t.timestamp < MEV_FREQUENCY_WINDOW_MS
    )

    latest = _latest(trades)
    sandwich = (
        latest is not None
        and latest.user != user
        and now - latest.timestamp < MEV_SANDWICH_WINDOW_MS
    )

    return MevAssessment(
        size=_is_large(amount_in, reserve_in),
        frequency=user_recent > MEV_FREQUENCY_LIMIT,
        sandwich=sandwich,
    )


def assess_mev_risk(
    amount_in: int,
    reserve_in: int,
    recent_trades: Iterable[TradeRecord],
    user: str,
    now: int,
) -> bool:
    """True if any MEV heuristic flags the trade. Never raises."""
    return explain_mev_risk(amount_in, reserve_in, recent_trades, user, now).at_risk
