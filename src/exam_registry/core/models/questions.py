"""
Module: questions

Purpose:
    Provides the Question dataclass - one multiple-choice item of the
    fixed exam. Immutable, validated on construction, with a 0-based
    correct option index.

Key Functions:
    - Question.is_correct(selected): Compare a selected option index
    - Question.option_count: Number of labeled options
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - core.utils.serialization
    - common.defaults
    - session.driver
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Question:
    """
    Multiple-choice question (immutable).

    Attributes:
        text: Question prompt
        options: Option labels in display order
        correct_option: 0-based index into options

    Invariants:
        - text is not empty
        - at least two options
        - 0 <= correct_option < len(options)

    Example:
        >>> q = Question(
        ...     text="Which data structure uses LIFO?",
        ...     options=("Queue", "Stack", "Array", "LinkedList"),
        ...     correct_option=1,
        ... )
        >>> q.is_correct(1)
        True
    """

    text: str
    options: Tuple[str, ...]
    correct_option: int

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.text or not self.text.strip():
            raise ValueError("Question text cannot be empty")

        # Accept lists from callers but store a tuple
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

        if len(self.options) < 2:
            raise ValueError(f"Question needs at least 2 options: {len(self.options)}")
        if not (0 <= self.correct_option < len(self.options)):
            raise ValueError(
                f"correct_option must be 0-{len(self.options) - 1}: {self.correct_option}"
            )

    @property
    def option_count(self) -> int:
        return len(self.options)

    def is_correct(self, selected_option: int) -> bool:
        """
        Check a selected option.

        Args:
            selected_option: 0-based option index chosen by the participant

        Returns:
            True if it matches correct_option
        """
        return selected_option == self.correct_option

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for JSON storage."""
        return {
            "text": self.text,
            "options": list(self.options),
            "correct_option": self.correct_option,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Question:
        """
        Deserialize from dictionary.

        Args:
            data: Dict with text, options and correct_option

        Returns:
            Question instance
        """
        return cls(
            text=data["text"],
            options=tuple(data["options"]),
            correct_option=data["correct_option"],
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Question({self.text!r}, options={len(self.options)}, correct={self.correct_option})"
