"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    LungCareError,
    UnknownFieldError,
    FieldValueError,
    SuggestionNotFoundError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "LungCareError",
    "UnknownFieldError",
    "FieldValueError",
    "SuggestionNotFoundError",
]
