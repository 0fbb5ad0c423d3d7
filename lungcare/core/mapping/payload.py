"""
NER Payload Contract

Validates the raw entity list returned by the upstream text-extraction
service before it reaches the mapping pipeline. Accepts the pipeline's own
keys (category / text) as well as the service's wire keys (entity / value).
Items that fail validation are skipped with a warning.
"""
from __future__ import annotations

from typing import Any, Iterable, List

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from lungcare.utils import get_logger
from .base import Entity

logger = get_logger(__name__)


class EntityPayload(BaseModel):
    """One entity as emitted by the extraction service."""
    category: str = Field(validation_alias=AliasChoices("category", "entity"))
    text: str = Field(validation_alias=AliasChoices("text", "value"))
    confidence: float = Field(ge=0.0, le=1.0, allow_inf_nan=False)

    @field_validator("text", mode="before")
    @classmethod
    def _numbers_as_text(cls, value: Any) -> Any:
        # The service sends pre-scored fields as bare numbers ("value": 8)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_entity(self) -> Entity:
        return Entity(category=self.category, text=self.text, confidence=self.confidence)


def parse_entities(items: Iterable[Any]) -> List[Entity]:
    """
    Convert raw payload items to Entities, preserving order.

    Entity instances pass through unchanged; malformed items are dropped.
    """
    entities: List[Entity] = []
    for position, item in enumerate(items):
        if isinstance(item, Entity):
            entities.append(item)
            continue
        try:
            entities.append(EntityPayload.model_validate(item).to_entity())
        except ValidationError as exc:
            logger.warning(
                f"Payload: skipping malformed entity #{position} "
                f"({exc.error_count()} error(s)): {item!r}"
            )
    return entities
