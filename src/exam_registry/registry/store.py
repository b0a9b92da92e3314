"""
Module: registry.store

Purpose:
    In-memory participant registry with two lookup paths:
    a dict index for O(1) average lookup by id, and a sort followed by
    binary search over the ordered participant list.

Key Classes:
    - Registry: Owns all participants

Dependencies:
    - operator (std)
    - core.models.participant: Participant
    - registry.search: binary_search

Used By:
    - controller.ExamController
"""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import Dict, Iterator, List, Optional

from exam_registry.core.models.participant import Participant

from .search import binary_search

logger = logging.getLogger(__name__)

_by_id = attrgetter("id")


class Registry:
    """
    Single source of truth for participant identity.

    Keeps an insertion-ordered list (for iteration and sorted search)
    and a dict keyed by id. Both hold the identical Participant objects,
    so a score written through one path is visible through the other.

    Sorted search side effect:
        find_by_id_via_sorted_search() sorts the participant list by id
        on every call. By default the sorted order is kept, so later
        iteration via all_participants() comes back ascending by id.
        Pass ``reorder_on_sorted_search=False`` to sort a private copy
        instead and leave iteration order untouched.

    Example:
        >>> registry = Registry()
        >>> alice = registry.register_or_fetch(101, "Alice")
        >>> registry.find_by_id(101) is alice
        True
    """

    def __init__(self, *, reorder_on_sorted_search: bool = True) -> None:
        """Initialize empty registry."""
        self._participants: List[Participant] = []
        self._index: Dict[int, Participant] = {}
        self.reorder_on_sorted_search = reorder_on_sorted_search

    # ─────────────────────────────────────────────────────────────────────────
    # Registration
    # ─────────────────────────────────────────────────────────────────────────

    def register_or_fetch(self, participant_id: int, name: str) -> Participant:
        """
        Register a new participant or return the existing one.

        Repeat registration is idempotent: the stored participant is
        returned and ``name`` is ignored.

        Args:
            participant_id: Unique identifier
            name: Name for a new participant

        Returns:
            The Participant stored under participant_id
        """
        existing = self._index.get(participant_id)
        if existing is not None:
            logger.info(f"Participant {participant_id} already registered as {existing.name!r}")
            return existing

        participant = Participant(participant_id, name)
        self._participants.append(participant)
        self._index[participant_id] = participant
        logger.info(f"Registered participant {participant_id} ({name!r})")
        return participant

    # ─────────────────────────────────────────────────────────────────────────
    # Lookup
    # ─────────────────────────────────────────────────────────────────────────

    def find_by_id(self, participant_id: int) -> Optional[Participant]:
        """
        Look up a participant through the dict index.

        Args:
            participant_id: Identifier to find

        Returns:
            Matching Participant or None
        """
        return self._index.get(participant_id)

    def find_by_id_via_sorted_search(self, participant_id: int) -> Optional[Participant]:
        """
        Look up a participant by sorting on id and binary searching.

        The sort runs on every call, O(n log n), and dominates the
        O(log n) search step. ``list.sort`` is stable.

        Args:
            participant_id: Identifier to find

        Returns:
            Matching Participant or None
        """
        if self.reorder_on_sorted_search:
            self._participants.sort(key=_by_id)
            ordered = self._participants
        else:
            ordered = sorted(self._participants, key=_by_id)

        index = binary_search(ordered, participant_id, key=_by_id)
        logger.debug(f"Sorted search for {participant_id}: index={index}")
        if index is None:
            return None
        return ordered[index]

    # ─────────────────────────────────────────────────────────────────────────
    # Iteration
    # ─────────────────────────────────────────────────────────────────────────

    def all_participants(self) -> List[Participant]:
        """
        Snapshot of participants in current iteration order.

        Order is registration order unless a sorted search has reordered
        the list.
        """
        return list(self._participants)

    def is_empty(self) -> bool:
        return not self._participants

    def count(self) -> int:
        return len(self._participants)

    def __len__(self) -> int:
        return len(self._participants)

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in self._index

    def __iter__(self) -> Iterator[Participant]:
        return iter(self.all_participants())

    def __repr__(self) -> str:
        return f"Registry(participants={len(self._participants)})"
