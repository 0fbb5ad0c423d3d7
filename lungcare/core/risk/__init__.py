"""
Risk Scoring Layer

Pure function from a patient profile and diagnosis label to recurrence,
complication and survival scores in [0, 1].

Usage:
    from lungcare.core.risk import compute_risk_scores

    scores = compute_risk_scores(profile, "adenocarcinoma")
"""
from .aggregator import compute_risk_scores, summarise
from .base import RiskLevel, RiskScores, risk_level

__all__ = [
    "compute_risk_scores",
    "summarise",
    "RiskLevel",
    "RiskScores",
    "risk_level",
]
