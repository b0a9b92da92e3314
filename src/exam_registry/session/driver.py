"""
Module: session.driver

Purpose:
    Run one exam attempt: ask every question in order, add the fixed
    weight for each correct answer, then record the total on the
    participant and in the ranking tree.

Key Functions:
    - run_session(): Score one attempt and record it
    - answers_from_sequence(): Answer provider over pre-recorded answers

Key Classes:
    - SessionResult: Outcome of one attempt
    - QuestionOutcome: Per-question result

Dependencies:
    - core.models: Participant, Question
    - ranking.tree: RankTree
    - session.config: SessionConfig

Used By:
    - controller.ExamController
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from exam_registry.core.models.participant import Participant
from exam_registry.core.models.questions import Question
from exam_registry.ranking.tree import RankTree

from .config import SessionConfig

logger = logging.getLogger(__name__)


# Receives the 1-based question position and the question, returns the
# selected 0-based option index.
AnswerProvider = Callable[[int, Question], int]


@dataclass(frozen=True, slots=True)
class QuestionOutcome:
    """
    Result for one question of a session.

    Attributes:
        position: 1-based question number
        selected_option: 0-based option chosen
        correct_option: 0-based correct option
        is_correct: Whether the choice scored
    """

    position: int
    selected_option: int
    correct_option: int
    is_correct: bool


@dataclass(frozen=True)
class SessionResult:
    """
    Outcome of one completed exam attempt (immutable).

    Attributes:
        participant_id: Who sat the exam
        score: correct_count * question_weight
        max_score: question count * question_weight
        correct_count: Number of correct answers
        outcomes: One QuestionOutcome per question, in order

    Example:
        >>> result = run_session(alice, questions, answers_from_sequence([1, 1, 2, 1, 2]), tree)
        >>> result.score, result.max_score
        (100, 100)
    """

    participant_id: int
    score: int
    max_score: int
    correct_count: int
    outcomes: Tuple[QuestionOutcome, ...]

    @property
    def question_count(self) -> int:
        return len(self.outcomes)

    @property
    def percentage(self) -> float:
        if self.max_score == 0:
            return 0.0
        return 100.0 * self.score / self.max_score


def answers_from_sequence(answers: Sequence[int]) -> AnswerProvider:
    """
    Build an answer provider that replays pre-recorded answers.

    Args:
        answers: 0-based option indexes, one per question in order

    Returns:
        AnswerProvider returning answers[position - 1]
    """
    recorded = tuple(answers)

    def provider(position: int, question: Question) -> int:
        if position > len(recorded):
            raise ValueError(f"No answer recorded for question {position}")
        return recorded[position - 1]

    return provider


def run_session(
    participant: Participant,
    questions: Sequence[Question],
    answer_provider: AnswerProvider,
    rank_tree: RankTree,
    *,
    config: Optional[SessionConfig] = None,
) -> SessionResult:
    """
    Score one exam attempt and record it.

    Process:
    1. For each question in order, ask answer_provider for the selected option
    2. Add config.question_weight when the selection matches
    3. Set participant.latest_score to the total
    4. Append the total to participant.attempt_history
    5. Insert (total, participant.name) into rank_tree

    All answers are collected before any state changes, so a rejected
    answer leaves the participant and the tree untouched.

    Args:
        participant: Registered participant sitting the exam
        questions: Exam questions in order
        answer_provider: Source of selected option indexes
        rank_tree: Leaderboard tree receiving the score
        config: Scoring configuration (defaults to SessionConfig())

    Returns:
        SessionResult for the attempt

    Raises:
        ValueError: If the question set does not fit config or an answer is out of range
    """
    config = config or SessionConfig()
    config.check_questions(questions)

    score = 0
    correct_count = 0
    outcomes = []
    for position, question in enumerate(questions, 1):
        selected = answer_provider(position, question)
        if not (0 <= selected < question.option_count):
            raise ValueError(
                f"Answer for question {position} must be 0-{question.option_count - 1}: {selected}"
            )

        is_correct = question.is_correct(selected)
        if is_correct:
            score += config.question_weight
            correct_count += 1
        outcomes.append(QuestionOutcome(
            position=position,
            selected_option=selected,
            correct_option=question.correct_option,
            is_correct=is_correct,
        ))

    participant.latest_score = score
    participant.add_attempt(score)
    rank_tree.insert(score, participant.name)

    result = SessionResult(
        participant_id=participant.id,
        score=score,
        max_score=config.max_score(len(questions)),
        correct_count=correct_count,
        outcomes=tuple(outcomes),
    )
    logger.info(
        f"Participant {participant.id} scored {score}/{result.max_score} "
        f"({correct_count}/{len(questions)} correct, attempt {participant.attempt_count})"
    )
    return result
