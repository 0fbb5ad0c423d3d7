"""
Field Resolver

Maps an entity's category / text onto a canonical patient-profile field.

Lookup order (first hit wins):
    1. Identity categories (age, gender, condition, diagnosis) are not
       resolved here; the merger handles them with parse_age,
       classify_gender and resolve_cancer_type.
    2. The category label itself, exact then substring, against
       FIELD_SYNONYMS.
    3. The entity text, substring, against FIELD_SYNONYMS.
    4. The category-specific table for symptom / history / treatment.
    5. Otherwise no field.

Every table is an ordered tuple of (term, field); table order decides ties.
"""
from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

from .base import EntityCategory, Gender, IDENTITY_CATEGORIES
from .lexicon import lookup_cancer_type

SynonymTable = Tuple[Tuple[str, str], ...]

# ── Generic synonyms (category label or entity text) ─────────────────────────
FIELD_SYNONYMS: SynonymTable = (
    # Risk factors
    ("air pollution",         "air_pollution"),
    ("alcohol",               "alcohol_use"),
    ("dust allergy",          "dust_allergy"),
    ("occupational hazards",  "occupational_hazards"),
    ("genetic risk",          "genetic_risk"),
    ("chronic lung disease",  "chronic_lung_disease"),
    ("copd",                  "chronic_lung_disease"),
    ("balanced diet",         "balanced_diet"),
    ("diet",                  "balanced_diet"),
    ("obesity",               "obesity"),
    ("smoking",               "smoking"),
    ("passive smoker",        "passive_smoker"),
    ("secondhand smoke",      "passive_smoker"),

    # Symptoms
    ("chest pain",            "chest_pain"),
    ("coughing blood",        "coughing_of_blood"),
    ("hemoptysis",            "coughing_of_blood"),
    ("fatigue",               "fatigue"),
    ("weight loss",           "weight_loss"),
    ("shortness of breath",   "shortness_of_breath"),
    ("dyspnea",               "shortness_of_breath"),
    ("wheezing",              "wheezing"),
    ("swallowing difficulty", "swallowing_difficulty"),
    ("dysphagia",             "swallowing_difficulty"),
    ("clubbing",              "clubbing_of_finger_nails"),
    ("finger clubbing",       "clubbing_of_finger_nails"),
    ("frequent cold",         "frequent_cold"),
    ("colds",                 "frequent_cold"),
    ("dry cough",             "dry_cough"),
    ("cough",                 "dry_cough"),
    ("snoring",               "snoring"),
)

# First occurrence wins for duplicated terms
_EXACT_INDEX: Dict[str, str] = {}
for _term, _field in FIELD_SYNONYMS:
    _EXACT_INDEX.setdefault(_term, _field)

# ── Category-specific fallbacks (entity text only) ───────────────────────────
SYMPTOM_SYNONYMS: SynonymTable = (
    ("chest pain",    "chest_pain"),
    ("pain",          "chest_pain"),
    ("blood",         "coughing_of_blood"),
    ("hemoptysis",    "coughing_of_blood"),
    ("fatigue",       "fatigue"),
    ("tired",         "fatigue"),
    ("weight loss",   "weight_loss"),
    ("losing weight", "weight_loss"),
    ("shortness",     "shortness_of_breath"),
    ("breath",        "shortness_of_breath"),
    ("dyspnea",       "shortness_of_breath"),
    ("wheez",         "wheezing"),
    ("swallow",       "swallowing_difficulty"),
    ("clubbing",      "clubbing_of_finger_nails"),
    ("finger",        "clubbing_of_finger_nails"),
    ("cold",          "frequent_cold"),
    ("cough",         "dry_cough"),
    ("snor",          "snoring"),
    ("consolidation", "chest_pain"),    # radiological finding, reported with chest symptoms
)

HISTORY_SYNONYMS: SynonymTable = (
    ("smok",         "smoking"),
    ("tobacco",      "smoking"),
    ("cigarette",    "smoking"),
    ("alcohol",      "alcohol_use"),
    ("drink",        "alcohol_use"),
    ("pollution",    "air_pollution"),
    ("dust",         "dust_allergy"),
    ("occupational", "occupational_hazards"),
    ("work",         "occupational_hazards"),
    ("asbestos",     "occupational_hazards"),
    ("diet",         "balanced_diet"),
    ("nutrition",    "balanced_diet"),
    ("genetic",      "genetic_risk"),
    ("family",       "genetic_risk"),
    ("hereditary",   "genetic_risk"),
)

# Oxygen therapy implies severe respiratory symptoms
TREATMENT_SYNONYMS: SynonymTable = (
    ("oxygen", "shortness_of_breath"),
)

# ── Registry: category → fallback table ──────────────────────────────────────
_CATEGORY_TABLES: Dict[EntityCategory, SynonymTable] = {
    EntityCategory.SYMPTOM:   SYMPTOM_SYNONYMS,
    EntityCategory.HISTORY:   HISTORY_SYNONYMS,
    EntityCategory.TREATMENT: TREATMENT_SYNONYMS,
}

_LEADING_INT = re.compile(r"\d+", re.ASCII)


def _scan(table: SynonymTable, haystack: str) -> Optional[str]:
    for term, field_name in table:
        if term in haystack:
            return field_name
    return None


def _generic_lookup(category: str, text: str) -> Optional[str]:
    label = str(category).strip().lower()
    lowered = text.lower()

    field_name = _EXACT_INDEX.get(label)
    if field_name is None:
        field_name = _scan(FIELD_SYNONYMS, label)
    if field_name is None:
        field_name = _scan(FIELD_SYNONYMS, lowered)
    return field_name


def resolve_field(category: str, text: str) -> Optional[str]:
    """
    Profile field for an entity, or None when nothing matches.

    Returns None for identity categories; those never map to a scale field.
    """
    kind = EntityCategory.parse(category)
    if kind in IDENTITY_CATEGORIES:
        return None

    field_name = _generic_lookup(category, text)
    if field_name is None and kind in _CATEGORY_TABLES:
        field_name = _scan(_CATEGORY_TABLES[kind], text.lower())
    return field_name


def resolve_condition_field(category: str, text: str) -> Optional[str]:
    """
    Scale field named by a condition / diagnosis entity ("severe COPD").

    Only the generic table is consulted. The merger writes these entities
    as a cancer type; this lookup feeds the reviewable suggestions.
    """
    return _generic_lookup(category, text)


# ── Identity helpers ─────────────────────────────────────────────────────────

def parse_age(text: str) -> Optional[int]:
    """First integer in the text ("68-year-old male" → 68)."""
    match = _LEADING_INT.search(text)
    if match is None:
        return None
    return int(match.group(0))


def classify_gender(text: str) -> Optional[Gender]:
    """
    MALE when the text mentions "male" but not "female", FEMALE when it
    mentions "female", otherwise None.
    """
    lowered = text.lower()
    if "male" in lowered and "female" not in lowered:
        return Gender.MALE
    if "female" in lowered:
        return Gender.FEMALE
    return None


def resolve_cancer_type(text: str) -> Optional[str]:
    return lookup_cancer_type(text)
