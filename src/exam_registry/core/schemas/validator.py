"""
Schema Validation Utilities

Validates question bank JSON before it is turned into Question objects.

Two levels:
- Basic checks (always): required fields, option count, correct_option
  inside the option range. Reports the failing path.
- Strict (``strict=True``): full JSON Schema validation against
  ``question_bank.schema.json`` using jsonschema.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
QUESTION_BANK_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question_bank(
    data: dict[str, Any],
    *,
    strict: bool = False,
    option_count: int | None = None,
) -> None:
    """
    Validate question bank data.

    Args:
        data: Parsed question bank document
        strict: If True, also validate against the JSON schema
        option_count: If given, every question must have exactly this many options

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Question bank must be a JSON object")

    required = ["schema_version", "questions"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != QUESTION_BANK_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported question bank schema version: {version} "
            f"(expected {QUESTION_BANK_SCHEMA_VERSION})",
            path="schema_version"
        )

    questions = data.get("questions")
    if not isinstance(questions, list) or not questions:
        raise ValidationError(
            "questions must be a non-empty list",
            path="questions"
        )

    for i, question in enumerate(questions):
        validate_question(question, f"questions[{i}]", option_count=option_count)

    if strict:
        schema = _load_schema("question_bank")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e


def validate_question(
    data: dict[str, Any],
    path: str = "",
    *,
    option_count: int | None = None,
) -> None:
    """Validate a single question entry."""
    if not isinstance(data, dict):
        raise ValidationError("question must be an object", path=path)

    required = ["text", "options", "correct_option"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Question missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )

    text = data["text"]
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(
            "text must be a non-empty string",
            path=f"{path}.text"
        )

    options = data["options"]
    if not isinstance(options, list) or len(options) < 2:
        raise ValidationError(
            "options must be a list of at least 2 labels",
            path=f"{path}.options"
        )
    if not all(isinstance(option, str) for option in options):
        raise ValidationError(
            "options must all be strings",
            path=f"{path}.options"
        )
    if option_count is not None and len(options) != option_count:
        raise ValidationError(
            f"Expected {option_count} options, found {len(options)}",
            path=f"{path}.options"
        )

    correct = data["correct_option"]
    if not isinstance(correct, int) or isinstance(correct, bool) or not (0 <= correct < len(options)):
        raise ValidationError(
            f"Invalid correct_option: {correct!r} (must be 0-{len(options) - 1})",
            path=f"{path}.correct_option"
        )
