"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_question_bank,
    validate_question,
    ValidationError,
    QUESTION_BANK_SCHEMA_VERSION,
)

__all__ = [
    "validate_question_bank",
    "validate_question",
    "ValidationError",
    "QUESTION_BANK_SCHEMA_VERSION",
]
