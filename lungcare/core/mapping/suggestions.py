"""
Suggestion Generator

Independent pass over an entity batch that proposes (field, value) pairs
for manual review. Only entities at or above MEDIUM confidence qualify.

Suggestions are not deduplicated against fields the merger already wrote:
a MEDIUM-or-better entity is both auto-applied and suggested.

Condition / diagnosis entities are also read for a scale field here
("severe COPD" → chronic_lung_disease), since the merger only takes a
cancer type from them. Age and gender never produce suggestions.
"""
from __future__ import annotations

import math
from typing import Iterable, List, Optional

from lungcare.utils import get_logger
from .base import Entity, EntityCategory, Suggestion
from .gate import is_suggestion_eligible
from .resolver import resolve_condition_field, resolve_field
from .scaler import scale_value

logger = get_logger(__name__)

DEMOGRAPHIC_CATEGORIES = frozenset({EntityCategory.AGE, EntityCategory.GENDER})
CONDITION_CATEGORIES = frozenset({EntityCategory.CONDITION, EntityCategory.DIAGNOSIS})


def confidence_percent(confidence: float) -> int:
    """Whole percentage, halves rounded up (0.625 → 63)."""
    return int(math.floor(confidence * 100 + 0.5))


def format_reasoning(entity: Entity) -> str:
    return f'Detected "{entity.text}" with {confidence_percent(entity.confidence)}% confidence'


def _suggested_field(entity: Entity) -> Optional[str]:
    kind = entity.kind
    if kind in DEMOGRAPHIC_CATEGORIES:
        return None
    if kind in CONDITION_CATEGORIES:
        return resolve_condition_field(entity.category, entity.text)
    return resolve_field(entity.category, entity.text)


def generate_suggestions(entities: Iterable[Entity]) -> List[Suggestion]:
    suggestions: List[Suggestion] = []

    for entity in entities:
        try:
            if not is_suggestion_eligible(entity.confidence):
                continue
            field_name = _suggested_field(entity)
            if field_name is None:
                continue
            value = scale_value(entity.text, entity.category, entity.confidence)
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning(f"Suggestions: skipping malformed entity {entity!r}: {exc}")
            continue

        if value is None:
            continue

        suggestions.append(Suggestion(
            field=field_name,
            suggested_value=value,
            confidence=entity.confidence,
            reasoning=format_reasoning(entity),
        ))

    if suggestions:
        logger.info(f"Suggestions: {len(suggestions)} pending review")
    return suggestions
