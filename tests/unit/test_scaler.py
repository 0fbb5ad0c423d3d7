"""
Unit Tests for the Severity Lexicon and Severity Scaler
"""
import pytest

from lungcare.core.mapping import scale_value
from lungcare.core.mapping.base import SCALE_MAX, SCALE_MIN
from lungcare.core.mapping.lexicon import SEVERITY_LEXICON, lookup_severity


class TestSeverityLexicon:
    """Tests for the static phrase → severity table."""

    def test_levels_in_range(self):
        for phrase, level in SEVERITY_LEXICON:
            assert SCALE_MIN <= level <= SCALE_MAX, phrase

    def test_phrases_unique(self):
        phrases = [phrase for phrase, _ in SEVERITY_LEXICON]
        assert len(phrases) == len(set(phrases))

    def test_lookup_normalises(self):
        assert lookup_severity("  Current Smoker ") == 8
        assert lookup_severity("obese") == 8
        assert lookup_severity("obese patient") is None


class TestScaleValue:
    """Tests for scale_value resolution order."""

    @pytest.mark.parametrize("text,expected", [
        ("current smoker", 8),
        ("former smoker", 4),
        ("  Mild  ", 3),
        ("severe", 7),          # exact lexicon beats the "severe" keyword rule
        ("very severe", 8),
        ("never", 1),
        ("constantly", 9),
        ("poor diet", 3),
        ("healthy diet", 7),
        ("underweight", 3),
        ("morbidly obese", 9),
    ])
    def test_exact_lexicon(self, text, expected):
        assert scale_value(text, "history", 0.5) == expected

    @pytest.mark.parametrize("text,expected", [
        ("45 pack-years", 9),
        ("40 pack years", 9),
        ("30 pack-year history", 8),
        ("20 pack years", 7),
        ("10 pack-years", 6),
        ("5 pack-years", 5),
        ("2 pack year", 4),
    ])
    def test_pack_years(self, text, expected):
        assert scale_value(text, "history", 0.5) == expected

    @pytest.mark.parametrize("text,expected", [
        ("lost 12 kg", 8),
        ("6 kg over 3 months", 6),
        ("3 kg", 4),
        ("1 kg", 3),
    ])
    def test_weight_loss_kg(self, text, expected):
        assert scale_value(text, "symptom", 0.5) == expected

    def test_non_ascii_digits_are_not_numbers(self):
        """Arabic-Indic "40" is not read as a pack-year count."""
        assert scale_value("٤٠ pack-years", "history", 0.5) is None

    def test_kg_only_for_symptoms(self):
        """Weight amounts outside a symptom entity are not scaled."""
        assert scale_value("lost 12 kg", "history", 0.5) is None

    def test_unitless_number_falls_through(self):
        """A bare number is ignored and the keyword rules still apply."""
        assert scale_value("3 month persistent cough", "symptom", 0.5) == 7
        assert scale_value("8", "smoking", 0.95) is None

    def test_age_numbers_not_scaled(self):
        assert scale_value("68", "age", 0.95) is None

    @pytest.mark.parametrize("text,expected", [
        ("persistent cough", 7),
        ("chronic bronchitis", 7),
        ("severe persistent cough", 7),     # persistent/chronic checked first
        ("severe chest pain", 8),
        ("intense fatigue", 8),
        ("slight wheeze", 3),
        ("mild dyspnea", 3),
        ("moderate dyspnea", 5),
    ])
    def test_keywords(self, text, expected):
        assert scale_value(text, "symptom", 0.5) == expected

    def test_treatment_oxygen(self):
        assert scale_value("home oxygen", "treatment", 0.5) == 8
        assert scale_value("home oxygen", "symptom", 0.5) is None

    def test_high_confidence_defaults(self):
        """Confidence strictly above HIGH supplies a default per category."""
        assert scale_value("cough", "symptom", 0.85) == 6
        assert scale_value("asbestos", "history", 0.9) == 5
        assert scale_value("cough", "symptom", 0.8) is None
        assert scale_value("cough", "treatment", 0.95) is None
        assert scale_value("cough", "lab", 0.95) is None

    def test_no_cue(self):
        assert scale_value("cough", "symptom", 0.5) is None
        assert scale_value("", "symptom", 0.5) is None

    def test_results_always_in_range(self):
        """Every rule path yields an int in [1, 9] or None."""
        texts = [phrase for phrase, _ in SEVERITY_LEXICON] + [
            "0 pack-years", "999 pack-years", "0 kg", "500 kg", "home oxygen",
            "persistent", "moderate", "unremarkable", "12",
        ]
        for text in texts:
            for category in ("symptom", "history", "treatment", "lab", "smoking"):
                for confidence in (0.4, 0.81, 1.0):
                    value = scale_value(text, category, confidence)
                    assert value is None or SCALE_MIN <= value <= SCALE_MAX
