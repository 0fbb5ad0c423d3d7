"""
Entity Mapping: Base Types

Data contracts shared by the mapping pipeline: the extracted entity coming
from the upstream NER service, the working patient profile it is merged
into, and the reviewable suggestion produced alongside.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Set, Tuple

from lungcare.utils import FieldValueError, UnknownFieldError

# ── Scale fields ──────────────────────────────────────────────────────────────
SCALE_MIN = 1
SCALE_MAX = 9
SCALE_DEFAULT = 1

RISK_FACTOR_FIELDS: Tuple[str, ...] = (
    "air_pollution",
    "alcohol_use",
    "dust_allergy",
    "occupational_hazards",
    "genetic_risk",
    "chronic_lung_disease",
    "balanced_diet",
    "obesity",
    "smoking",
    "passive_smoker",
)

SYMPTOM_FIELDS: Tuple[str, ...] = (
    "chest_pain",
    "coughing_of_blood",
    "fatigue",
    "weight_loss",
    "shortness_of_breath",
    "wheezing",
    "swallowing_difficulty",
    "clubbing_of_finger_nails",
    "frequent_cold",
    "dry_cough",
    "snoring",
)

SCALE_FIELDS: Tuple[str, ...] = RISK_FACTOR_FIELDS + SYMPTOM_FIELDS

IDENTITY_FIELDS: Tuple[str, ...] = ("age", "gender", "cancer_type")

PROFILE_FIELDS: Tuple[str, ...] = IDENTITY_FIELDS + SCALE_FIELDS

# Canonical labels a profile's cancer_type may hold (besides "")
CANCER_TYPES: Tuple[str, ...] = (
    "adenocarcinoma",
    "squamous",
    "large cell carcinoma",
    "small cell lung cancer",
    "normal",
)


def is_scale_value(value: Any) -> bool:
    """True when ``value`` is an int inside [SCALE_MIN, SCALE_MAX]."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and SCALE_MIN <= value <= SCALE_MAX
    )


class EntityCategory(str, Enum):
    """
    Categories the mapping pipeline dispatches on.

    AGE / GENDER / CONDITION / DIAGNOSIS write identity fields directly.
    SYMPTOM / HISTORY / TREATMENT have their own fallback synonym tables.
    Any other label from the NER service parses to UNKNOWN and goes through
    the generic synonym lookup only.
    """
    AGE       = "age"
    GENDER    = "gender"
    CONDITION = "condition"
    DIAGNOSIS = "diagnosis"
    SYMPTOM   = "symptom"
    HISTORY   = "history"
    TREATMENT = "treatment"
    UNKNOWN   = "unknown"

    @classmethod
    def parse(cls, label: Any) -> "EntityCategory":
        try:
            return cls(str(label).strip().lower())
        except ValueError:
            return cls.UNKNOWN


IDENTITY_CATEGORIES = frozenset({
    EntityCategory.AGE,
    EntityCategory.GENDER,
    EntityCategory.CONDITION,
    EntityCategory.DIAGNOSIS,
})


class Gender(str, Enum):
    UNKNOWN = "unknown"
    MALE    = "male"
    FEMALE  = "female"
    OTHER   = "other"


@dataclass(frozen=True)
class Entity:
    """
    One extracted observation from clinical free text.

    ``category`` keeps the raw label because the field resolver matches the
    label text itself against its synonym table.
    """
    category: str        # e.g. "symptom", "history", "chest pain"
    text: str            # e.g. "persistent dry cough"
    confidence: float    # 0-1, as reported by the extractor

    @property
    def kind(self) -> EntityCategory:
        return EntityCategory.parse(self.category)


@dataclass(frozen=True)
class Suggestion:
    """A reviewable (field, value) proposal derived from one entity."""
    field: str
    suggested_value: int
    confidence: float
    reasoning: str

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "suggested_value": self.suggested_value,
            "confidence": round(self.confidence, 2),
            "reasoning": self.reasoning,
        }


@dataclass
class PatientProfile:
    """
    Structured patient record for one analysis session.

    All 21 scale fields hold an int in [1, 9]. ``provenance`` lists the
    fields whose current value was written by the automated mapping rather
    than entered by the user.
    """
    # ── Identity / demographics ───────────────────────────────────────────
    age: Optional[int] = None
    gender: Gender = Gender.UNKNOWN
    cancer_type: str = ""

    # ── Risk factors ──────────────────────────────────────────────────────
    air_pollution: int = SCALE_DEFAULT
    alcohol_use: int = SCALE_DEFAULT
    dust_allergy: int = SCALE_DEFAULT
    occupational_hazards: int = SCALE_DEFAULT
    genetic_risk: int = SCALE_DEFAULT
    chronic_lung_disease: int = SCALE_DEFAULT
    balanced_diet: int = SCALE_DEFAULT
    obesity: int = SCALE_DEFAULT
    smoking: int = SCALE_DEFAULT
    passive_smoker: int = SCALE_DEFAULT

    # ── Symptoms ──────────────────────────────────────────────────────────
    chest_pain: int = SCALE_DEFAULT
    coughing_of_blood: int = SCALE_DEFAULT
    fatigue: int = SCALE_DEFAULT
    weight_loss: int = SCALE_DEFAULT
    shortness_of_breath: int = SCALE_DEFAULT
    wheezing: int = SCALE_DEFAULT
    swallowing_difficulty: int = SCALE_DEFAULT
    clubbing_of_finger_nails: int = SCALE_DEFAULT
    frequent_cold: int = SCALE_DEFAULT
    dry_cough: int = SCALE_DEFAULT
    snoring: int = SCALE_DEFAULT

    # ── Provenance ────────────────────────────────────────────────────────
    provenance: Set[str] = field(default_factory=set)

    def __post_init__(self):
        # Constructed profiles obey the same field rules as manual edits
        for name in PROFILE_FIELDS:
            setattr(self, name, _validate_field(name, getattr(self, name)))
        self.provenance = set(self.provenance)

    def copy(self) -> "PatientProfile":
        return replace(self, provenance=set(self.provenance))

    def scale_values(self) -> Dict[str, int]:
        """Scale fields in declaration order."""
        return {name: getattr(self, name) for name in SCALE_FIELDS}

    def elevated_factor_count(self, threshold: int = 5) -> int:
        """Number of scale fields strictly above ``threshold``."""
        return sum(1 for value in self.scale_values().values() if value > threshold)

    def set_field(self, name: str, value: Any) -> None:
        """
        Direct user edit of one field.

        Validates the value, writes it and drops ``name`` from provenance.
        Raises UnknownFieldError / FieldValueError and leaves the profile
        untouched when the edit is rejected.
        """
        if name not in PROFILE_FIELDS:
            raise UnknownFieldError(f"Patient profile has no field '{name}'", field=name)

        setattr(self, name, _validate_field(name, value))
        self.provenance.discard(name)

    def to_dict(self) -> dict:
        return {
            "age": self.age,
            "gender": self.gender.value,
            "cancer_type": self.cancer_type,
            **self.scale_values(),
            "provenance": sorted(self.provenance),
        }


def _parse_gender(value: Any) -> Gender:
    if isinstance(value, Gender):
        return value
    try:
        return Gender(str(value).strip().lower())
    except ValueError:
        raise FieldValueError(
            f"'gender' must be one of {[g.value for g in Gender]}",
            field="gender", value=value,
        ) from None


def _parse_cancer_type(value: Any) -> str:
    label = str(value).strip().lower() if value is not None else ""
    if label and label not in CANCER_TYPES:
        raise FieldValueError(
            f"'cancer_type' must be empty or one of {list(CANCER_TYPES)}",
            field="cancer_type", value=value,
        )
    return label


def _validate_field(name: str, value: Any) -> Any:
    """Checked (and for gender / cancer_type, normalised) value for ``name``."""
    if name in SCALE_FIELDS:
        if not is_scale_value(value):
            raise FieldValueError(
                f"'{name}' must be an integer between {SCALE_MIN} and {SCALE_MAX}",
                field=name, value=value,
            )
        return value
    if name == "age":
        if value is not None and (
            not isinstance(value, int) or isinstance(value, bool) or value < 0
        ):
            raise FieldValueError("'age' must be a non-negative integer or None",
                                  field=name, value=value)
        return value
    if name == "gender":
        return _parse_gender(value)
    return _parse_cancer_type(value)
