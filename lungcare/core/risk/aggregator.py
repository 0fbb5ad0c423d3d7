"""
Risk Aggregator

Rule-based outcome scoring from a patient profile and a diagnosis label.

Every score starts from a fixed base and collects additive adjustments:

    component            recurrence   complication   survival
    ─────────────────    ──────────   ────────────   ────────
    base                    0.30          0.30         0.70
    age > 70               +0.15         +0.20        -0.25
    60 < age ≤ 70          +0.10         +0.15        -0.15
    age < 50               -0.05         -0.05        +0.10
    smoking    (per pt)    +0.04         +0.04        -0.04
    7 risk factors (each)  +0.02         +0.02        -0.02
    obesity    (per pt)       -          +0.025       -0.0125
    balanced diet (per pt) -0.015           -         +0.015
    11 symptoms (each)     +0.015        +0.015       -0.015

"per pt" means per point above the scale floor, i.e. (value - 1).
The diagnosis label then adds its own row (DIAGNOSIS_ADJUSTMENTS) and the
three scores are clamped independently to [0, 1].

Pure and deterministic. Never raises: a missing age or an unrecognised
label simply contributes nothing.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np

from lungcare.core.mapping.base import SCALE_MIN, SYMPTOM_FIELDS, PatientProfile
from lungcare.utils import get_logger
from .base import RiskScores, format_percentage

logger = get_logger(__name__)

Effect = Tuple[float, float, float]     # (recurrence, complication, survival)

BASE_SCORES: Effect = (0.3, 0.3, 0.7)

# ── Age bands ────────────────────────────────────────────────────────────────
AGE_SENIOR        = 70    # age >  70
AGE_OLDER         = 60    # 60 < age <= 70
AGE_YOUNGER       = 50    # age <  50

AGE_SENIOR_EFFECT:  Effect = (0.15, 0.20, -0.25)
AGE_OLDER_EFFECT:   Effect = (0.10, 0.15, -0.15)
AGE_YOUNGER_EFFECT: Effect = (-0.05, -0.05, 0.10)

# ── Scale-field weights: (field, effect per point above SCALE_MIN) ───────────
_HARMFUL = np.array([1.0, 1.0, -1.0])

SCALE_FIELD_EFFECTS: Tuple[Tuple[str, np.ndarray], ...] = (
    ("smoking",              0.04 * _HARMFUL),
    ("air_pollution",        0.02 * _HARMFUL),
    ("alcohol_use",          0.02 * _HARMFUL),
    ("dust_allergy",         0.02 * _HARMFUL),
    ("occupational_hazards", 0.02 * _HARMFUL),
    ("genetic_risk",         0.02 * _HARMFUL),
    ("chronic_lung_disease", 0.02 * _HARMFUL),
    ("passive_smoker",       0.02 * _HARMFUL),
    ("obesity",              0.025 * np.array([0.0, 1.0, -0.5])),
    ("balanced_diet",        0.015 * np.array([-1.0, 0.0, 1.0])),     # protective
) + tuple((name, 0.015 * _HARMFUL) for name in SYMPTOM_FIELDS)

# ── Diagnosis label adjustments (case-insensitive exact match) ───────────────
DIAGNOSIS_ADJUSTMENTS: Tuple[Tuple[Tuple[str, ...], Effect], ...] = (
    (("small cell lung cancer",),               (0.20, 0.00, -0.20)),
    (("adenocarcinoma",),                       (0.05, 0.00, 0.00)),
    (("squamous cell carcinoma", "squamous"),   (0.08, 0.00, -0.05)),
    (("large cell carcinoma",),                 (0.12, 0.00, -0.10)),
    (("normal",),                               (-0.20, -0.20, 0.30)),
)


def _age_effect(age: Optional[int]) -> np.ndarray:
    if age is None:
        return np.zeros(3)
    if age > AGE_SENIOR:
        return np.array(AGE_SENIOR_EFFECT)
    if age > AGE_OLDER:
        return np.array(AGE_OLDER_EFFECT)
    if age < AGE_YOUNGER:
        return np.array(AGE_YOUNGER_EFFECT)
    return np.zeros(3)


def _scale_field_effect(profile: PatientProfile) -> np.ndarray:
    points = np.array(
        [getattr(profile, name) - SCALE_MIN for name, _ in SCALE_FIELD_EFFECTS],
        dtype=float,
    )
    weights = np.vstack([effect for _, effect in SCALE_FIELD_EFFECTS])
    return points @ weights


def _diagnosis_effect(label: Optional[str]) -> np.ndarray:
    if not label:
        return np.zeros(3)
    normalised = label.strip().lower()
    for labels, effect in DIAGNOSIS_ADJUSTMENTS:
        if normalised in labels:
            return np.array(effect)
    logger.debug(f"RiskAggregator: no adjustment for diagnosis label {label!r}")
    return np.zeros(3)


def compute_risk_scores(
    profile: PatientProfile,
    diagnosis_label: Optional[str] = None,
) -> RiskScores:
    """Recurrence, complication and survival scores for ``profile``."""
    scores = (
        np.array(BASE_SCORES)
        + _age_effect(profile.age)
        + _scale_field_effect(profile)
        + _diagnosis_effect(diagnosis_label)
    )
    recurrence, complication, survival = np.clip(scores, 0.0, 1.0)

    return RiskScores(
        recurrence_risk=float(recurrence),
        complication_risk=float(complication),
        survival_probability=float(survival),
    )


def summarise(
    profile: PatientProfile,
    scores: RiskScores,
    diagnosis_label: Optional[str] = None,
) -> Dict:
    """
    Compact summary suitable for JSON responses.

    Example output:
    {
        "diagnosis": "adenocarcinoma",
        "scores": {"recurrence_risk": 0.55, ...},
        "percentages": {"recurrence_risk": "55%", ...},
        "levels": {"recurrence_risk": "moderate", ...},
        "critical_findings": false,
        "elevated_factor_count": 3
    }
    """
    scores_dict = scores.to_dict()
    return {
        "diagnosis": diagnosis_label or "",
        "scores": scores_dict,
        "percentages": {
            name: format_percentage(getattr(scores, name)) for name in scores_dict
        },
        "levels": {name: level.value for name, level in scores.levels.items()},
        "critical_findings": scores.has_critical_findings,
        "elevated_factor_count": profile.elevated_factor_count(),
    }
