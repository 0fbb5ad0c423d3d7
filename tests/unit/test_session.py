"""
Unit Tests for AnalysisSession

Covers batch ingestion, manual edits, suggestion handling and scoring
on a single session's state.
"""
import pytest

from lungcare.core.mapping import Entity, Gender, PatientProfile
from lungcare.core.risk import compute_risk_scores
from lungcare.core.session import AnalysisSession
from lungcare.utils import FieldValueError, SuggestionNotFoundError, UnknownFieldError


@pytest.fixture
def session(clinical_note_entities) -> AnalysisSession:
    """Session after ingesting the referral-note entities."""
    session = AnalysisSession()
    session.ingest(clinical_note_entities)
    return session


class TestIngest:
    """Tests for entity batch ingestion."""

    def test_profile_and_suggestions(self, session):
        assert session.profile.smoking == 9
        assert len(session.suggestions) == 5

    def test_raw_payload(self, raw_ner_payload):
        session = AnalysisSession()
        result = session.ingest(raw_ner_payload)

        assert session.profile.age == 72
        assert session.profile.smoking == 4
        assert session.profile.chest_pain == 8
        assert result.applied_fields == ["age", "smoking", "chest_pain"]
        # Only the former-smoker entity reaches MEDIUM confidence
        assert [s.field for s in session.suggestions] == ["smoking"]

    def test_batches_accumulate(self, session):
        session.ingest([Entity("symptom", "severe wheezing", 0.9)])

        assert session.profile.wheezing == 8
        assert session.profile.smoking == 9
        assert len(session.suggestions) == 6

    def test_starting_profile_is_copied(self):
        profile = PatientProfile(age=50)
        session = AnalysisSession(profile)
        session.edit_field("age", 51)
        assert profile.age == 50

    @pytest.mark.parametrize("overrides", [
        {"smoking": 42},
        {"fatigue": 0},
        {"wheezing": True},
        {"age": -3},
        {"gender": "robot"},
        {"cancer_type": "melanoma"},
    ])
    def test_out_of_range_starting_profile_rejected(self, overrides):
        """A starting profile can never carry a value a manual edit would refuse."""
        with pytest.raises(FieldValueError):
            AnalysisSession(PatientProfile(**overrides))

    def test_starting_profile_is_normalised(self):
        profile = PatientProfile(gender="Female", cancer_type="Adenocarcinoma")
        session = AnalysisSession(profile)

        assert session.profile.gender is Gender.FEMALE
        assert session.profile.cancer_type == "adenocarcinoma"
        assert session.risk_scores().survival_probability == pytest.approx(0.7)


class TestManualEdits:
    """Tests for edit_field validation and provenance."""

    def test_edit_clears_provenance_only_for_that_field(self, session):
        session.edit_field("smoking", 2)

        assert session.profile.smoking == 2
        assert "smoking" not in session.profile.provenance
        assert "dry_cough" in session.profile.provenance
        assert session.profile.dry_cough == 7

    def test_identity_edits(self, session):
        session.edit_field("gender", "Other")
        session.edit_field("cancer_type", "Large Cell Carcinoma")
        session.edit_field("age", None)

        assert session.profile.gender is Gender.OTHER
        assert session.profile.cancer_type == "large cell carcinoma"
        assert session.profile.age is None
        assert not {"age", "gender", "cancer_type"} & session.profile.provenance

    def test_unknown_field(self, session):
        with pytest.raises(UnknownFieldError) as exc_info:
            session.edit_field("blood_type", 3)
        assert exc_info.value.code == "UNKNOWN_FIELD"

    @pytest.mark.parametrize("name,value", [
        ("smoking", 0),
        ("smoking", 10),
        ("smoking", 5.0),
        ("smoking", "5"),
        ("smoking", True),
        ("age", -1),
        ("age", "68"),
        ("gender", "robot"),
        ("cancer_type", "melanoma"),
    ])
    def test_rejected_values_leave_profile_unchanged(self, session, name, value):
        before = session.profile.copy()
        with pytest.raises(FieldValueError):
            session.edit_field(name, value)
        assert session.profile == before


class TestSuggestionHandling:
    """Tests for apply / dismiss."""

    def test_apply_overwrites_field(self, session):
        """Applying the first smoking suggestion (8) over the merged 9."""
        applied = session.apply_suggestion(0)

        assert applied.field == "smoking"
        assert session.profile.smoking == 8
        assert "smoking" not in session.profile.provenance
        assert len(session.suggestions) == 4

    def test_apply_keeps_other_suggestions_for_same_field(self, session):
        session.apply_suggestion(0)
        assert [s.field for s in session.suggestions].count("smoking") == 1

    def test_dismiss(self, session):
        before = session.profile.copy()
        dismissed = session.dismiss_suggestion(2)

        assert dismissed.field == "dry_cough"
        assert session.profile == before
        assert len(session.suggestions) == 4

    @pytest.mark.parametrize("index", [-1, 5, 99])
    def test_missing_index(self, session, index):
        with pytest.raises(SuggestionNotFoundError) as exc_info:
            session.apply_suggestion(index)
        assert exc_info.value.to_dict()["error"] == "SUGGESTION_NOT_FOUND"
        assert len(session.suggestions) == 5


class TestScoringAndReset:
    """Tests for risk scores, summary and reset."""

    def test_risk_scores_use_current_profile(self, session):
        assert session.risk_scores("adenocarcinoma") == compute_risk_scores(
            session.profile, "adenocarcinoma"
        )

    def test_summary(self, session):
        summary = session.summary("adenocarcinoma")

        assert summary["profile"]["smoking"] == 9
        assert len(summary["pending_suggestions"]) == 5
        assert summary["risk"]["diagnosis"] == "adenocarcinoma"
        assert summary["risk"]["critical_findings"] is True

    def test_reset(self, session):
        session.reset()
        assert session.profile == PatientProfile()
        assert session.suggestions == []

    def test_sessions_are_independent(self, clinical_note_entities):
        first, second = AnalysisSession(), AnalysisSession()
        first.ingest(clinical_note_entities)

        assert second.profile == PatientProfile()
        assert second.suggestions == []
