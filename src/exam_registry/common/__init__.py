"""Common constants shared across the registry."""

from __future__ import annotations

from .defaults import (
    DEFAULT_QUESTIONS,
    OPTION_COUNT,
    QUESTION_WEIGHT,
)

__all__ = [
    "DEFAULT_QUESTIONS",
    "OPTION_COUNT",
    "QUESTION_WEIGHT",
]
