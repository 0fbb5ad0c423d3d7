"""
Confidence Gate

Decides what happens to an entity based on the extractor's confidence.

    confidence < LOW       → discarded
    confidence >= LOW      → auto-applied to the profile
    confidence >= MEDIUM   → also offered as a reviewable suggestion

The two eligibility checks are independent: a MEDIUM-or-better entity is
auto-applied *and* suggested. HIGH is not a gate boundary; the severity
scaler uses it for its confidence-based default.
"""
from __future__ import annotations

from enum import Enum

CONFIDENCE_LOW    = 0.4
CONFIDENCE_MEDIUM = 0.6
CONFIDENCE_HIGH   = 0.8


class Disposition(str, Enum):
    DISCARD           = "discard"
    APPLY             = "apply"
    APPLY_AND_SUGGEST = "apply_and_suggest"


def is_apply_eligible(confidence: float) -> bool:
    return confidence >= CONFIDENCE_LOW


def is_suggestion_eligible(confidence: float) -> bool:
    return confidence >= CONFIDENCE_MEDIUM


def disposition(confidence: float) -> Disposition:
    """Combined view of both eligibility checks; tags the merger's log records."""
    if not is_apply_eligible(confidence):
        return Disposition.DISCARD
    if is_suggestion_eligible(confidence):
        return Disposition.APPLY_AND_SUGGEST
    return Disposition.APPLY
