"""
Module: session.config

Purpose:
    Configuration dataclass for exam sessions.
    Immutable configuration with validation on construction.

Key Classes:
    - SessionConfig: Scoring weight and option count

Dependencies:
    - dataclasses (std)
    - common.defaults: Built-in constants

Used By:
    - session.driver.run_session
    - controller.ExamController
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from exam_registry.common.defaults import OPTION_COUNT, QUESTION_WEIGHT
from exam_registry.core.models.questions import Question


@dataclass(frozen=True)
class SessionConfig:
    """
    Configuration for scoring an exam session (immutable).

    Attributes:
        question_weight: Marks added for each correct answer (same for every question)
        option_count: Options every question must offer, or None to allow any count >= 2

    Invariants:
        - question_weight > 0
        - option_count is None or option_count >= 2

    Example:
        >>> config = SessionConfig(question_weight=20)
        >>> config.max_score(5)
        100
    """

    question_weight: int = QUESTION_WEIGHT
    option_count: Optional[int] = OPTION_COUNT

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.question_weight <= 0:
            raise ValueError(f"question_weight must be positive: {self.question_weight}")
        if self.option_count is not None and self.option_count < 2:
            raise ValueError(f"option_count must be at least 2: {self.option_count}")

    def max_score(self, question_count: int) -> int:
        """
        Highest achievable score.

        Args:
            question_count: Number of questions in the exam

        Returns:
            question_count * question_weight
        """
        return question_count * self.question_weight

    def check_questions(self, questions: Sequence[Question]) -> None:
        """
        Check a question set against this configuration.

        Raises:
            ValueError: If the set is empty or a question has the wrong option count
        """
        if not questions:
            raise ValueError("An exam needs at least one question")
        if self.option_count is None:
            return
        for position, question in enumerate(questions, 1):
            if question.option_count != self.option_count:
                raise ValueError(
                    f"Question {position} has {question.option_count} options "
                    f"(expected {self.option_count})"
                )
