"""
Schemas Package

JSON schema definition and validation for exported question banks.
"""

from .validator import (
    validate_question_bank,
    validate_question,
    ValidationError,
    QUESTION_BANK_SCHEMA,
)

__all__ = [
    "validate_question_bank",
    "validate_question",
    "ValidationError",
    "QUESTION_BANK_SCHEMA",
]
