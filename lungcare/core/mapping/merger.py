"""
Profile Merger

Applies gated entities onto a patient profile, in input order.

  - age / gender / condition / diagnosis entities write identity fields
    directly (no severity scaling).
  - Every other entity goes through resolve_field + scale_value; the write
    happens only when both succeed.
  - Later entities for the same field overwrite earlier ones, and every
    automated write (re)adds the field to the profile's provenance.

Nothing here raises for bad entity data; an entity that cannot be mapped
simply has no effect.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

from lungcare.utils import get_logger
from .base import (
    Entity, EntityCategory, IDENTITY_CATEGORIES, PatientProfile, SCALE_FIELDS, is_scale_value,
)
from .gate import Disposition, disposition
from .resolver import classify_gender, parse_age, resolve_cancer_type, resolve_field
from .scaler import scale_value

logger = get_logger(__name__)

FieldWrite = Tuple[str, Any]


@dataclass
class MappingResult:
    """Outcome of one batch: the new profile plus an audit of what was written."""
    profile: PatientProfile
    applied: List[FieldWrite] = field(default_factory=list)
    skipped: int = 0

    @property
    def applied_fields(self) -> List[str]:
        return [name for name, _ in self.applied]


def _write(profile: PatientProfile, name: str, value: Any) -> Optional[FieldWrite]:
    if name in SCALE_FIELDS and not is_scale_value(value):
        return None
    setattr(profile, name, value)
    profile.provenance.add(name)
    return name, value


def _resolve_identity(entity: Entity) -> Optional[FieldWrite]:
    kind = entity.kind
    if kind is EntityCategory.AGE:
        age = parse_age(entity.text)
        return ("age", age) if age is not None else None
    if kind is EntityCategory.GENDER:
        gender = classify_gender(entity.text)
        return ("gender", gender) if gender is not None else None
    cancer_type = resolve_cancer_type(entity.text)
    return ("cancer_type", cancer_type) if cancer_type is not None else None


def merge_entity(profile: PatientProfile, entity: Entity) -> Optional[FieldWrite]:
    """
    Apply a single (already gated) entity to ``profile`` in place.

    Returns the (field, value) written, or None when the entity had no effect.
    """
    if entity.kind in IDENTITY_CATEGORIES:
        resolved = _resolve_identity(entity)
        if resolved is None:
            return None
        return _write(profile, *resolved)

    field_name = resolve_field(entity.category, entity.text)
    if field_name is None:
        logger.debug(f"Merger: no field for {entity.category!r} / {entity.text!r}")
        return None

    value = scale_value(entity.text, entity.category, entity.confidence)
    if value is None:
        logger.debug(f"Merger: no severity for {entity.text!r} ({field_name})")
        return None

    return _write(profile, field_name, value)


def map_entities(entities: Iterable[Entity], profile: PatientProfile) -> MappingResult:
    """
    Map a batch of entities onto a copy of ``profile``.

    The input profile is not modified, so the same batch against the same
    baseline always yields the same result.
    """
    result = MappingResult(profile=profile.copy())

    for entity in entities:
        try:
            verdict = disposition(entity.confidence)
            if verdict is Disposition.DISCARD:
                logger.debug(
                    f"Merger: discarded {entity.category!r} / {entity.text!r} "
                    f"(confidence {entity.confidence:.2f})"
                )
                result.skipped += 1
                continue
            written = merge_entity(result.profile, entity)
        except (AttributeError, TypeError, ValueError) as exc:
            # Isolate malformed entities; the rest of the batch still applies
            logger.warning(f"Merger: skipping malformed entity {entity!r}: {exc}")
            written = None

        if written is None:
            result.skipped += 1
        else:
            result.applied.append(written)
            logger.debug(f"Merger: {written[0]}={written[1]!r} [{verdict.value}]")

    logger.info(
        f"Merger: {len(result.applied)} field write(s), {result.skipped} entity(ies) skipped"
        + (f": {', '.join(result.applied_fields)}" if result.applied else "")
    )
    return result
