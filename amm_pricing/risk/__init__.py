"""Trade risk heuristics."""

from amm_pricing.risk.mev import MevAssessment, TradeWindow, assess_mev_risk, explain_mev_risk

__all__ = [
    "MevAssessment",
    "TradeWindow",
    "assess_mev_risk",
    "explain_mev_risk",
]
