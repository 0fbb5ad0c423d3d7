"""
Risk Scoring: Base Types
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Display bands for risks (lower is better)
RISK_LOW_MAX      = 0.3
RISK_MODERATE_MAX = 0.6

# Display bands for survival (higher is better)
SURVIVAL_HIGH_MIN     = 0.7
SURVIVAL_MODERATE_MIN = 0.4

# Critical-finding cut-offs
CRITICAL_RISK     = 0.7
CRITICAL_SURVIVAL = 0.3


class RiskLevel(str, Enum):
    LOW      = "low"
    MODERATE = "moderate"
    HIGH     = "high"


def risk_level(value: float, higher_is_better: bool = False) -> RiskLevel:
    """
    Band a score for display.

    Risks:    ≤ 0.3 low, ≤ 0.6 moderate, otherwise high.
    Survival: ≥ 0.7 high, ≥ 0.4 moderate, otherwise low.
    """
    if higher_is_better:
        if value >= SURVIVAL_HIGH_MIN:
            return RiskLevel.HIGH
        if value >= SURVIVAL_MODERATE_MIN:
            return RiskLevel.MODERATE
        return RiskLevel.LOW

    if value <= RISK_LOW_MAX:
        return RiskLevel.LOW
    if value <= RISK_MODERATE_MAX:
        return RiskLevel.MODERATE
    return RiskLevel.HIGH


def format_percentage(value: float) -> str:
    return f"{int(value * 100 + 0.5)}%"


@dataclass(frozen=True)
class RiskScores:
    """Outcome scores, each clamped to [0, 1]."""
    recurrence_risk: float
    complication_risk: float
    survival_probability: float

    @property
    def has_critical_findings(self) -> bool:
        return (
            self.recurrence_risk > CRITICAL_RISK
            or self.complication_risk > CRITICAL_RISK
            or self.survival_probability < CRITICAL_SURVIVAL
        )

    @property
    def levels(self) -> dict:
        return {
            "recurrence_risk": risk_level(self.recurrence_risk),
            "complication_risk": risk_level(self.complication_risk),
            "survival_probability": risk_level(self.survival_probability, higher_is_better=True),
        }

    def to_dict(self) -> dict:
        return {
            "recurrence_risk": round(self.recurrence_risk, 4),
            "complication_risk": round(self.complication_risk, 4),
            "survival_probability": round(self.survival_probability, 4),
        }
