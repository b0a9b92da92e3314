"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_question_bank,
    deserialize_question_bank,
    load_question_bank,
    save_question_bank,
)

__all__ = [
    "serialize_question_bank",
    "deserialize_question_bank",
    "load_question_bank",
    "save_question_bank",
]
