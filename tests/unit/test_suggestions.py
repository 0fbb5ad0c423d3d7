"""
Unit Tests for the Suggestion Generator

Covers the MEDIUM gate, reasoning text, and the deliberate overlap with
auto-applied fields.
"""
import pytest

from lungcare.core.mapping import Entity, Suggestion, generate_suggestions, map_entities
from lungcare.core.mapping.suggestions import confidence_percent


class TestGenerateSuggestions:
    """Tests for generate_suggestions."""

    def test_between_low_and_medium_applies_without_suggestion(self, baseline_profile):
        """Confidence 0.5: written to the profile, not suggested."""
        entities = [Entity("history", "current smoker", 0.5)]

        assert map_entities(entities, baseline_profile).profile.smoking == 8
        assert generate_suggestions(entities) == []

    def test_medium_confidence_is_applied_and_suggested(self, baseline_profile):
        """Confidence 0.7: written to the profile and also suggested."""
        entities = [Entity("history", "current smoker", 0.7)]

        assert map_entities(entities, baseline_profile).profile.smoking == 8
        assert generate_suggestions(entities) == [
            Suggestion(
                field="smoking",
                suggested_value=8,
                confidence=0.7,
                reasoning='Detected "current smoker" with 70% confidence',
            )
        ]

    def test_note_entities(self, clinical_note_entities):
        suggestions = generate_suggestions(clinical_note_entities)

        assert [(s.field, s.suggested_value) for s in suggestions] == [
            ("smoking", 8),
            ("smoking", 9),
            ("dry_cough", 7),
            ("weight_loss", 6),
            ("shortness_of_breath", 8),
        ]
        assert suggestions[3].reasoning == 'Detected "weight loss of 6 kg" with 82% confidence'

    def test_same_field_not_deduplicated(self):
        entities = [
            Entity("symptom", "mild cough", 0.7),
            Entity("symptom", "severe cough", 0.9),
        ]
        assert [s.suggested_value for s in generate_suggestions(entities)] == [3, 8]

    @pytest.mark.parametrize("category,text", [
        ("age", "68-year-old male"),
        ("gender", "Female"),
    ])
    def test_demographic_entities_not_suggested(self, category, text):
        assert generate_suggestions([Entity(category, text, 0.95)]) == []

    def test_condition_with_risk_factor_is_suggested(self, baseline_profile):
        """A COPD condition is reviewable even though the merger ignores it."""
        entities = [Entity("condition", "severe COPD", 0.9)]

        assert [(s.field, s.suggested_value) for s in generate_suggestions(entities)] == [
            ("chronic_lung_disease", 8),
        ]
        assert map_entities(entities, baseline_profile).profile == baseline_profile

    def test_cancer_diagnosis_alone_is_not_suggested(self):
        entities = [Entity("diagnosis", "Adenocarcinoma of the right upper lobe", 0.95)]
        assert generate_suggestions(entities) == []

    def test_requires_field_and_value(self):
        entities = [
            Entity("lab", "hemoglobin 12", 0.95),       # no field
            Entity("symptom", "cough", 0.7),            # no severity cue
        ]
        assert generate_suggestions(entities) == []

    def test_to_dict(self):
        suggestion = generate_suggestions([Entity("symptom", "severe chest pain", 0.912)])[0]
        assert suggestion.to_dict() == {
            "field": "chest_pain",
            "suggested_value": 8,
            "confidence": 0.91,
            "reasoning": 'Detected "severe chest pain" with 91% confidence',
        }


class TestConfidencePercent:
    """Half-up rounding of the reasoning percentage."""

    @pytest.mark.parametrize("confidence,expected", [
        (0.6, 60),
        (0.625, 63),
        (0.994, 99),
        (1.0, 100),
    ])
    def test_rounding(self, confidence, expected):
        assert confidence_percent(confidence) == expected


def test_malformed_entities_are_isolated():
    entities = [
        Entity("symptom", None, 0.9),
        Entity("symptom", "severe cough", None),
        Entity("symptom", "severe cough", 0.9),
    ]
    assert [s.field for s in generate_suggestions(entities)] == ["dry_cough"]
