"""
Analysis Session

One session per analysis workflow. It exclusively owns the working patient
profile and the list of pending suggestions; sessions share no state.

Usage:
    from lungcare.core.session import AnalysisSession

    session = AnalysisSession()
    session.ingest(ner_entities)            # auto-apply + queue suggestions
    session.edit_field("smoking", 6)        # manual override, drops provenance
    session.apply_suggestion(0)
    scores = session.risk_scores("adenocarcinoma")
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from lungcare.core.mapping import (
    MappingResult,
    PatientProfile,
    Suggestion,
    generate_suggestions,
    map_entities,
    parse_entities,
)
from lungcare.core.risk import RiskScores, compute_risk_scores, summarise
from lungcare.utils import SuggestionNotFoundError, get_logger

logger = get_logger(__name__)


class AnalysisSession:
    """
    Working state for a single analysis.

    Not thread-safe; each concurrent analysis should own its own session.
    """

    def __init__(self, profile: Optional[PatientProfile] = None):
        self.profile: PatientProfile = profile.copy() if profile is not None else PatientProfile()
        self.suggestions: List[Suggestion] = []

    # ── Entity batches ────────────────────────────────────────────────────
    def ingest(self, entities: Iterable[Any]) -> MappingResult:
        """
        Map a batch of entities (Entity objects or raw NER dicts).

        The profile is replaced by the merged result and new suggestions
        are appended to the pending list.
        """
        batch = parse_entities(entities)
        result = map_entities(batch, self.profile)
        self.profile = result.profile
        self.suggestions.extend(generate_suggestions(batch))
        return result

    # ── User actions ──────────────────────────────────────────────────────
    def edit_field(self, name: str, value: Any) -> None:
        self.profile.set_field(name, value)
        logger.debug(f"Session: manual edit {name}={value!r}")

    def _suggestion_at(self, index: int) -> Suggestion:
        if not 0 <= index < len(self.suggestions):
            raise SuggestionNotFoundError(
                f"No pending suggestion at index {index}",
                index=index,
                details={"pending": len(self.suggestions)},
            )
        return self.suggestions[index]

    def apply_suggestion(self, index: int) -> Suggestion:
        """
        Write a suggestion's value to its field and drop it from the queue.

        Other pending suggestions for the same field are left in place.
        """
        suggestion = self._suggestion_at(index)
        self.profile.set_field(suggestion.field, suggestion.suggested_value)
        del self.suggestions[index]
        logger.info(
            f"Session: applied suggestion {suggestion.field}={suggestion.suggested_value}"
        )
        return suggestion

    def dismiss_suggestion(self, index: int) -> Suggestion:
        suggestion = self._suggestion_at(index)
        del self.suggestions[index]
        return suggestion

    def reset(self) -> None:
        self.profile = PatientProfile()
        self.suggestions = []

    # ── Scoring ───────────────────────────────────────────────────────────
    def risk_scores(self, diagnosis_label: Optional[str] = None) -> RiskScores:
        return compute_risk_scores(self.profile, diagnosis_label)

    def summary(self, diagnosis_label: Optional[str] = None) -> Dict:
        return {
            "profile": self.profile.to_dict(),
            "pending_suggestions": [s.to_dict() for s in self.suggestions],
            "risk": summarise(self.profile, self.risk_scores(diagnosis_label), diagnosis_label),
        }
