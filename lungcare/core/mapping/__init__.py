"""
Entity Mapping Layer

Turns confidence-weighted NER entities into a structured patient profile.

Usage:
    from lungcare.core.mapping import Entity, PatientProfile, map_entities

    result = map_entities(entities, PatientProfile())
    result.profile.smoking, result.profile.provenance
"""
from .base import (
    CANCER_TYPES,
    RISK_FACTOR_FIELDS,
    SCALE_FIELDS,
    SYMPTOM_FIELDS,
    Entity,
    EntityCategory,
    Gender,
    PatientProfile,
    Suggestion,
)
from .gate import CONFIDENCE_HIGH, CONFIDENCE_LOW, CONFIDENCE_MEDIUM, Disposition, disposition
from .merger import MappingResult, map_entities, merge_entity
from .payload import EntityPayload, parse_entities
from .resolver import (
    classify_gender, parse_age, resolve_cancer_type, resolve_condition_field, resolve_field,
)
from .scaler import scale_value
from .suggestions import generate_suggestions

__all__ = [
    "CANCER_TYPES",
    "RISK_FACTOR_FIELDS",
    "SCALE_FIELDS",
    "SYMPTOM_FIELDS",
    "Entity",
    "EntityCategory",
    "Gender",
    "PatientProfile",
    "Suggestion",
    "CONFIDENCE_HIGH",
    "CONFIDENCE_LOW",
    "CONFIDENCE_MEDIUM",
    "Disposition",
    "disposition",
    "MappingResult",
    "map_entities",
    "merge_entity",
    "EntityPayload",
    "parse_entities",
    "classify_gender",
    "parse_age",
    "resolve_cancer_type",
    "resolve_condition_field",
    "resolve_field",
    "scale_value",
    "generate_suggestions",
]
