"""Engine settings shared by the CLI and request handlers."""

from dataclasses import dataclass
import os

from amm_pricing.core.constants import (
    BASIS_POINTS,
    DEFAULT_FEE_RATE_BPS,
    DEFAULT_SLIPPAGE_BPS,
    HIGH_PRICE_IMPACT_BPS,
)


@dataclass(frozen=True)
class EngineSettings:
    base_fee_rate_bps: int
    slippage_bps: int
    high_impact_bps: int

    def __post_init__(self) -> None:
        for name in ("base_fee_rate_bps", "slippage_bps", "high_impact_bps"):
            value = getattr(self, name)
            if not 0 <= value <= BASIS_POINTS:
                raise ValueError(f"{name} must be in [0, {BASIS_POINTS}], got {value}")


DEFAULT_SETTINGS = EngineSettings(
    base_fee_rate_bps=DEFAULT_FEE_RATE_BPS,
    slippage_bps=DEFAULT_SLIPPAGE_BPS,
    high_impact_bps=HIGH_PRICE_IMPACT_BPS,
)


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


def load_settings() -> EngineSettings:
    """Resolve settings from environment, falling back to the defaults."""
    return EngineSettings(
        base_fee_rate_bps=_env_int("AMM_BASE_FEE_BPS", DEFAULT_SETTINGS.base_fee_rate_bps),
        slippage_bps=_env_int("AMM_SLIPPAGE_BPS", DEFAULT_SETTINGS.slippage_bps),
        high_impact_bps=_env_int("AMM_HIGH_IMPACT_BPS", DEFAULT_SETTINGS.high_impact_bps),
    )
