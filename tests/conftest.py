"""
Pytest Configuration and Fixtures

Shared fixtures for the mapping and risk-scoring tests.
"""
import pytest
from pathlib import Path
from typing import List
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lungcare.core.mapping import Entity, PatientProfile


@pytest.fixture
def baseline_profile() -> PatientProfile:
    """Profile with every field at its default."""
    return PatientProfile()


@pytest.fixture
def clinical_note_entities() -> List[Entity]:
    """Entities as extracted from a typical referral note."""
    return [
        Entity("age", "68-year-old male", 0.95),
        Entity("gender", "Male", 0.98),
        Entity("history", "current smoker", 0.85),
        Entity("history", "40 pack-year smoking history", 0.9),
        Entity("symptom", "persistent dry cough", 0.88),
        Entity("symptom", "weight loss of 6 kg", 0.82),
        Entity("symptom", "mild wheezing", 0.5),
        Entity("treatment", "home oxygen", 0.75),
        Entity("diagnosis", "Adenocarcinoma of the right upper lobe", 0.9),
        Entity("symptom", "fatigue", 0.3),
    ]


@pytest.fixture
def raw_ner_payload() -> List[dict]:
    """Entity list in the extraction service's wire format."""
    return [
        {"entity": "age", "value": "72", "confidence": 0.95},
        {"entity": "history", "value": "former smoker", "confidence": 0.9},
        {"entity": "symptom", "value": "severe chest pain", "confidence": 0.55},
    ]
