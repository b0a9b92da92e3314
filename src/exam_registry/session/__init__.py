"""
Module: session

Purpose:
    Scoring driver for one exam attempt and its configuration.

Key Functions:
    - run_session(): Score an attempt, update the participant and the ranking tree
    - answers_from_sequence(): Replay pre-recorded answers

Key Classes:
    - SessionConfig: Per-question weight and option count
    - SessionResult / QuestionOutcome: Attempt results
"""

from .config import SessionConfig
from .driver import (
    AnswerProvider,
    QuestionOutcome,
    SessionResult,
    answers_from_sequence,
    run_session,
)

__all__ = [
    "SessionConfig",
    "AnswerProvider",
    "QuestionOutcome",
    "SessionResult",
    "answers_from_sequence",
    "run_session",
]
