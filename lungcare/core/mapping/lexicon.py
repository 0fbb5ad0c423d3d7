"""
Severity Lexicon and Cancer-Type Synonyms

Static phrase tables used by the mapping pipeline.

  - SEVERITY_LEXICON maps a whole (lower-cased, trimmed) phrase to a 1-9
    severity level. Only exact matches count; partial phrases are handled
    by the keyword rules in scaler.py.
  - CANCER_TYPE_SYNONYMS maps a phrase found anywhere in a condition /
    diagnosis entity to the canonical cancer-type label. First match in
    table order wins, so longer phrases precede their prefixes.

Both tables are tuples of pairs so their order is fixed.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

# ── Severity lexicon ─────────────────────────────────────────────────────────
SEVERITY_LEXICON: Tuple[Tuple[str, int], ...] = (
    # Intensity
    ("absent",            1),
    ("none",              1),
    ("never",             1),
    ("minimal",           2),
    ("very mild",         2),
    ("mild",              3),
    ("slight",            3),
    ("light",             3),
    ("moderate",          5),
    ("medium",            5),
    ("average",           5),
    ("significant",       6),
    ("considerable",      6),
    ("severe",            7),
    ("heavy",             7),
    ("intense",           7),
    ("very severe",       8),
    ("extreme",           9),
    ("critical",          9),
    ("maximum",           9),

    # Frequency
    ("rarely",            2),
    ("occasionally",      3),
    ("sometimes",         4),
    ("often",             6),
    ("frequently",        7),
    ("very often",        8),
    ("constantly",        9),
    ("always",            9),

    # Smoking status
    ("former smoker",     4),
    ("ex-smoker",         4),
    ("quit smoking",      4),
    ("current smoker",    8),
    ("active smoker",     8),
    ("heavy smoker",      9),
    ("chain smoker",      9),

    # Diet quality (higher = better diet)
    ("poor diet",         3),
    ("unhealthy diet",    3),
    ("fair diet",         5),
    ("good diet",         7),
    ("healthy diet",      7),
    ("excellent diet",    8),
    ("very healthy diet", 9),

    # Body weight
    ("underweight",       3),
    ("normal weight",     5),
    ("overweight",        6),
    ("obese",             8),
    ("morbidly obese",    9),
)

# Exact-match index; phrases are unique so order does not matter here
_SEVERITY_INDEX: Dict[str, int] = dict(SEVERITY_LEXICON)


def lookup_severity(phrase: str) -> Optional[int]:
    """Severity for an exact lexicon phrase, or None."""
    return _SEVERITY_INDEX.get(phrase.strip().lower())


# ── Cancer types ─────────────────────────────────────────────────────────────
CANCER_TYPE_SYNONYMS: Tuple[Tuple[str, str], ...] = (
    ("adenocarcinoma",          "adenocarcinoma"),
    ("squamous cell carcinoma", "squamous"),
    ("squamous",                "squamous"),
    ("large cell carcinoma",    "large cell carcinoma"),
    ("large cell",              "large cell carcinoma"),
    ("small cell",              "small cell lung cancer"),
    ("normal",                  "normal"),
    ("no cancer",               "normal"),
    ("benign",                  "normal"),
)


def lookup_cancer_type(text: str) -> Optional[str]:
    """Canonical cancer-type label for the first synonym found in ``text``."""
    lowered = text.lower()
    for phrase, label in CANCER_TYPE_SYNONYMS:
        if phrase in lowered:
            return label
    return None
