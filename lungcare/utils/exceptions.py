"""
Custom Exception Hierarchy

The mapping pipeline and risk aggregator never raise for bad data; these
exceptions cover caller misuse at the session seam (manual edits and
suggestion handling).
"""
from typing import Optional, Dict, Any


class LungCareError(Exception):
    """Base exception for all lungcare errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class UnknownFieldError(LungCareError):
    """A profile field name that the patient profile does not define."""

    def __init__(
        self,
        message: str,
        field: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="UNKNOWN_FIELD",
            details={"field": field, **(details or {})}
        )
        self.field = field


class FieldValueError(LungCareError):
    """A manual edit carrying a value the field cannot hold."""

    def __init__(
        self,
        message: str,
        field: str = "unknown",
        value: Any = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="INVALID_FIELD_VALUE",
            details={"field": field, "value": value, **(details or {})}
        )
        self.field = field
        self.value = value


class SuggestionNotFoundError(LungCareError):
    """Apply/dismiss of a suggestion that is not pending."""

    def __init__(
        self,
        message: str,
        index: int = -1,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="SUGGESTION_NOT_FOUND",
            details={"index": index, **(details or {})}
        )
        self.index = index
