"""
Module: controller

Purpose:
    Facade tying the registry, waiting list, ranking tree and session
    driver together for a UI layer. The UI handles input parsing and
    rendering; this class only receives validated ids, names and
    answer indexes.

Key Classes:
    - ExamController: One exam with its participants and leaderboard

Dependencies:
    - registry: Registry, WaitingList
    - ranking: RankTree
    - session: run_session, SessionConfig
    - core.utils.serialization: Question bank loading

Used By:
    - Console or other front ends (not part of this package)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from exam_registry.common.defaults import DEFAULT_QUESTIONS
from exam_registry.core.models import Participant, Question, RankedEntry
from exam_registry.core.utils.serialization import load_question_bank
from exam_registry.ranking import RankTree
from exam_registry.registry import Registry, WaitingList
from exam_registry.session import AnswerProvider, SessionConfig, SessionResult, run_session

logger = logging.getLogger(__name__)


class ExamController:
    """
    One exam: its questions, participants, waiting list and leaderboard.

    Example:
        >>> exam = ExamController()
        >>> alice = exam.register_or_login(101, "Alice")
        >>> exam.conduct_exam(alice, answers_from_sequence([1, 1, 2, 1, 2])).score
        100
        >>> exam.rankings()[0].display_name
        'Alice'
    """

    def __init__(
        self,
        questions: Optional[Sequence[Question]] = None,
        *,
        config: Optional[SessionConfig] = None,
        reorder_on_sorted_search: bool = True,
    ) -> None:
        """
        Create an exam.

        Args:
            questions: Exam questions in order (defaults to the built-in bank)
            config: Scoring configuration
            reorder_on_sorted_search: Passed to Registry

        Raises:
            ValueError: If the questions do not fit the configuration
        """
        self.config = config or SessionConfig()
        self.questions: Tuple[Question, ...] = tuple(
            DEFAULT_QUESTIONS if questions is None else questions
        )
        self.config.check_questions(self.questions)

        self.registry = Registry(reorder_on_sorted_search=reorder_on_sorted_search)
        self.rank_tree = RankTree()
        self.waiting_list = WaitingList()

    @classmethod
    def from_question_bank(
        cls,
        path: Path,
        *,
        config: Optional[SessionConfig] = None,
        strict: bool = False,
        reorder_on_sorted_search: bool = True,
    ) -> ExamController:
        """
        Create an exam from a JSON question bank.

        Raises:
            FileNotFoundError: If the bank does not exist
            ValidationError: If the bank is invalid
        """
        config = config or SessionConfig()
        questions = load_question_bank(path, strict=strict, option_count=config.option_count)
        return cls(questions, config=config, reorder_on_sorted_search=reorder_on_sorted_search)

    @property
    def max_score(self) -> int:
        return self.config.max_score(len(self.questions))

    # ─────────────────────────────────────────────────────────────────────────
    # Participants
    # ─────────────────────────────────────────────────────────────────────────

    def register_or_login(self, participant_id: int, name: str) -> Participant:
        """Register a new participant or return the one already holding this id."""
        return self.registry.register_or_fetch(participant_id, name)

    def find_participant(self, participant_id: int) -> Optional[Participant]:
        return self.registry.find_by_id(participant_id)

    def find_participant_sorted(self, participant_id: int) -> Optional[Participant]:
        """Sorted binary search lookup (may reorder all_participants())."""
        return self.registry.find_by_id_via_sorted_search(participant_id)

    def all_participants(self) -> List[Participant]:
        return self.registry.all_participants()

    def participant_count(self) -> int:
        return self.registry.count()

    def has_no_participants(self) -> bool:
        return self.registry.is_empty()

    def attempt_history(self, participant: Participant) -> Tuple[int, ...]:
        return participant.attempt_history

    # ─────────────────────────────────────────────────────────────────────────
    # Waiting list
    # ─────────────────────────────────────────────────────────────────────────

    def add_to_waiting_list(self, participant: Participant) -> bool:
        return self.waiting_list.enqueue(participant)

    def process_next_in_queue(self) -> Optional[Participant]:
        return self.waiting_list.process_next()

    def waiting_list_snapshot(self) -> List[Participant]:
        return self.waiting_list.snapshot()

    # ─────────────────────────────────────────────────────────────────────────
    # Exam
    # ─────────────────────────────────────────────────────────────────────────

    def conduct_exam(self, participant: Participant, answer_provider: AnswerProvider) -> SessionResult:
        """
        Run one attempt for a registered participant.

        Args:
            participant: Participant returned by register_or_login()
            answer_provider: Source of selected option indexes

        Returns:
            SessionResult for the attempt

        Raises:
            ValueError: If participant is not registered in this exam
        """
        if self.registry.find_by_id(participant.id) is not participant:
            raise ValueError(f"Participant {participant.id} is not registered for this exam")
        return run_session(
            participant,
            self.questions,
            answer_provider,
            self.rank_tree,
            config=self.config,
        )

    def rankings(self) -> List[RankedEntry]:
        """Leaderboard, highest score first (empty before any attempt)."""
        return self.rank_tree.descending_enumeration()
