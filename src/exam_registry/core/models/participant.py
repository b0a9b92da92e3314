"""
Module: participant

Purpose:
    Provides the Participant record - identity, latest score and the
    append-only log of completed attempts. Participants are created and
    owned by the Registry; every other component holds a reference to the
    same instance, so a score written by the session driver is visible
    through both registry indexes.

Key Functions:
    - Participant.add_attempt(score): Append one completed session score
    - Participant.attempt_history: Read-only chronological view
    - Participant.average_score: Mean over all attempts
    - Participant.to_dict(): Snapshot for display layers

Dependencies:
    - typing (std)

Used By:
    - registry.store.Registry
    - registry.waiting_list.WaitingList
    - session.driver.run_session
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple


class Participant:
    """
    Exam participant (mutable score, immutable identity).

    Unlike the frozen question models, a participant changes after every
    completed session. Equality is identity: two Participant objects are
    never "the same participant" unless they are the same instance.

    Attributes:
        id: Unique identifier, fixed at creation
        name: Name supplied at first registration
        latest_score: Score of the most recent completed session
        attempt_history: Tuple of all session scores, oldest first

    Invariants:
        - latest_score >= 0
        - attempt_history only ever grows, one entry per session
        - len(attempt_history) == attempt_count

    Example:
        >>> p = Participant(101, "Alice")
        >>> p.add_attempt(80)
        >>> p.latest_score = 80
        >>> p.attempt_history
        (80,)
    """

    __slots__ = ("_id", "_name", "_latest_score", "_attempts")

    def __init__(self, participant_id: int, name: str) -> None:
        if not isinstance(participant_id, int) or isinstance(participant_id, bool):
            raise ValueError(f"participant id must be an integer: {participant_id!r}")
        self._id = participant_id
        self._name = name
        self._latest_score = 0
        self._attempts: List[int] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Identity
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    # ─────────────────────────────────────────────────────────────────────────
    # Scores
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def latest_score(self) -> int:
        """Score of the most recent completed session (0 before any)."""
        return self._latest_score

    @latest_score.setter
    def latest_score(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"Score cannot be negative: {value}")
        self._latest_score = value

    @property
    def attempt_history(self) -> Tuple[int, ...]:
        """
        Chronological scores of all completed sessions.

        Returns a tuple so callers cannot append behind the
        participant's back; use add_attempt() instead.
        """
        return tuple(self._attempts)

    def add_attempt(self, score: int) -> None:
        """
        Append one completed session score to the history.

        Args:
            score: Non-negative session total

        Raises:
            ValueError: If score is negative
        """
        if score < 0:
            raise ValueError(f"Score cannot be negative: {score}")
        self._attempts.append(score)

    @property
    def attempt_count(self) -> int:
        return len(self._attempts)

    @property
    def average_score(self) -> float:
        """Mean of all attempt scores, or 0.0 if none have been recorded."""
        if not self._attempts:
            return 0.0
        return sum(self._attempts) / len(self._attempts)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Snapshot for display or export.

        Returns:
            Dict with id, name, latest_score and attempt_history (as a list)
        """
        return {
            "id": self._id,
            "name": self._name,
            "latest_score": self._latest_score,
            "attempt_history": list(self._attempts),
        }

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Participant(id={self._id}, name={self._name!r}, "
            f"score={self._latest_score}, attempts={len(self._attempts)})"
        )
