"""Pricing error taxonomy and explicit result values.

Low-level math functions raise a ``PricingError`` subclass. The engine
converts those into ``Outcome`` values so callers can branch on
``ErrorKind`` without try/except.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Kind of pricing failure. Every kind is a pure function of input."""
    INVALID_INPUT = "invalid_input"
    INSUFFICIENT_AMOUNT = "insufficient_amount"
    INSUFFICIENT_LIQUIDITY_MINTED = "insufficient_liquidity_minted"
    INSUFFICIENT_LIQUIDITY_BURNED = "insufficient_liquidity_burned"
    POOL_DRAINED = "pool_drained"


class PricingError(ValueError):
    """Base class for deterministic pricing failures."""
    kind: ErrorKind = ErrorKind.INVALID_INPUT


class InvalidInputError(PricingError):
    """Non-positive amount or reserve, or an out-of-range rate."""
    kind = ErrorKind.INVALID_INPUT


class PoolDrainedError(InvalidInputError):
    """Requested exact output meets or exceeds the available reserve."""
    kind = ErrorKind.POOL_DRAINED


class InsufficientAmountError(PricingError):
    """Optimal deposit amount falls below the caller's minimum."""
    kind = ErrorKind.INSUFFICIENT_AMOUNT


class InsufficientLiquidityMintedError(PricingError):
    """Deposit would mint zero or negative liquidity shares."""
    kind = ErrorKind.INSUFFICIENT_LIQUIDITY_MINTED


class InsufficientLiquidityBurnedError(PricingError):
    """Withdrawal would return nothing on one side of the pool."""
    kind = ErrorKind.INSUFFICIENT_LIQUIDITY_BURNED


def require_int(name: str, value: object) -> None:
    """Reject floats and bools at the integer amount boundary."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a computed value or the pricing error that prevented it."""
    value: Optional[T] = None
    error: Optional[PricingError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error kind, or None on success."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: PricingError) -> "Outcome[T]":
        return cls(error=error)
