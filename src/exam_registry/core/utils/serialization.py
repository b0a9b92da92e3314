"""
Serialization Utilities

Provides to/from JSON utilities for question banks.

A question bank file is a single JSON document:

    {
      "schema_version": 1,
      "questions": [
        {"text": "...", "options": ["...", "..."], "correct_option": 1}
      ]
    }

Data is validated before deserialization so a malformed bank fails fast
with a ValidationError naming the offending path.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from ..models.questions import Question
from ..schemas.validator import (
    QUESTION_BANK_SCHEMA_VERSION,
    ValidationError,
    validate_question_bank,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Question Bank Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question_bank(questions: Sequence[Question]) -> dict[str, Any]:
    """
    Serialize questions to a question bank dictionary.

    Args:
        questions: Questions in exam order

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "schema_version": QUESTION_BANK_SCHEMA_VERSION,
        "questions": [q.to_dict() for q in questions],
    }


def deserialize_question_bank(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
    option_count: int | None = None,
) -> list[Question]:
    """
    Deserialize questions from a question bank dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before deserializing
        strict: Use full JSON schema validation (implies validate)
        option_count: Required number of options per question, if any

    Returns:
        Questions in file order

    Raises:
        ValidationError: If validation is enabled and data is invalid
        ValueError: If a question cannot be constructed
    """
    if validate or strict:
        validate_question_bank(data, strict=strict, option_count=option_count)

    return [Question.from_dict(item) for item in data["questions"]]


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_question_bank(
    path: Path,
    *,
    strict: bool = False,
    option_count: int | None = None,
) -> list[Question]:
    """
    Load a question bank from a JSON file.

    Args:
        path: Path to the question bank file
        strict: Use full JSON schema validation
        option_count: Required number of options per question, if any

    Returns:
        Questions in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Question bank not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Error parsing question bank: {e}",
                path=str(path),
                errors=[str(e)]
            ) from e

    questions = deserialize_question_bank(data, strict=strict, option_count=option_count)
    logger.info(f"Loaded {len(questions)} questions from {path}")
    return questions


def save_question_bank(questions: Sequence[Question], path: Path) -> None:
    """
    Save questions to a JSON file.

    Args:
        questions: Questions in exam order
        path: Output path
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    data = serialize_question_bank(questions)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
