"""
Severity Scaler

Turns an entity's text into a 1-9 severity for a resolved scale field.

Resolution order (first hit wins):
    1. Exact phrase in the severity lexicon.
    2. First integer in the text, read through unit heuristics:
         pack-years        → smoking history bands
         kg (symptom only) → weight-loss amount bands
       Any other number falls through.
    3. Qualifier keywords anywhere in the text.
    4. Treatment mentioning oxygen.
    5. Confidence-based default for high-confidence symptom / history.
    6. No value.

Ages are never scaled here; the merger writes them as an identity field.
"""
from __future__ import annotations

import re
from typing import Optional, Tuple

from .base import EntityCategory, is_scale_value
from .gate import CONFIDENCE_HIGH
from .lexicon import lookup_severity

# ── Numeric bands: (minimum, severity), highest minimum first ────────────────
PACK_YEAR_BANDS: Tuple[Tuple[int, int], ...] = (
    (40, 9),
    (30, 8),
    (20, 7),
    (10, 6),
    (5,  5),
)
PACK_YEAR_FLOOR = 4

WEIGHT_LOSS_KG_BANDS: Tuple[Tuple[int, int], ...] = (
    (10, 8),
    (5,  6),
    (2,  4),
)
WEIGHT_LOSS_KG_FLOOR = 3

# ── Qualifier keywords, checked in this order ────────────────────────────────
KEYWORD_SEVERITY: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (("persistent", "chronic"), 7),
    (("severe", "intense"),     8),
    (("mild", "slight"),        3),
    (("moderate",),             5),
)

TREATMENT_OXYGEN_SEVERITY = 8

# Defaults for confidence > CONFIDENCE_HIGH with no other cue
HIGH_CONFIDENCE_DEFAULTS = {
    EntityCategory.SYMPTOM: 6,
    EntityCategory.HISTORY: 5,
}

_FIRST_INT = re.compile(r"\d+", re.ASCII)


def _band(number: int, bands: Tuple[Tuple[int, int], ...], floor: int) -> int:
    for minimum, severity in bands:
        if number >= minimum:
            return severity
    return floor


def _numeric_severity(lowered: str, kind: EntityCategory) -> Optional[int]:
    match = _FIRST_INT.search(lowered)
    if match is None:
        return None
    number = int(match.group(0))

    if "pack" in lowered and "year" in lowered:
        return _band(number, PACK_YEAR_BANDS, PACK_YEAR_FLOOR)
    if "kg" in lowered and kind is EntityCategory.SYMPTOM:
        return _band(number, WEIGHT_LOSS_KG_BANDS, WEIGHT_LOSS_KG_FLOOR)
    return None


def _keyword_severity(lowered: str) -> Optional[int]:
    for keywords, severity in KEYWORD_SEVERITY:
        if any(keyword in lowered for keyword in keywords):
            return severity
    return None


def scale_value(text: str, category: str, confidence: float) -> Optional[int]:
    """
    Severity in [1, 9] for the entity text, or None when no rule applies.

    A result outside [1, 9] is reported as None so callers never write it.
    """
    lowered = text.lower().strip()
    kind = EntityCategory.parse(category)

    value = lookup_severity(lowered)
    if value is None:
        value = _numeric_severity(lowered, kind)
    if value is None:
        value = _keyword_severity(lowered)
    if value is None and kind is EntityCategory.TREATMENT and "oxygen" in lowered:
        value = TREATMENT_OXYGEN_SEVERITY
    if value is None and confidence > CONFIDENCE_HIGH:
        value = HIGH_CONFIDENCE_DEFAULTS.get(kind)

    return value if is_scale_value(value) else None
