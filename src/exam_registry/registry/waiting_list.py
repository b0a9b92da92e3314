"""
Module: registry.waiting_list

Purpose:
    First-in, first-out queue of participants waiting to sit the exam.

Key Classes:
    - WaitingList: deque-backed queue that refuses duplicate entries
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional

from exam_registry.core.models.participant import Participant

logger = logging.getLogger(__name__)


class WaitingList:
    """
    FIFO queue of participants.

    A participant can be queued at most once at a time; queuing again
    before being processed is a no-op.

    Example:
        >>> queue = WaitingList()
        >>> queue.enqueue(alice)
        True
        >>> queue.process_next() is alice
        True
    """

    def __init__(self) -> None:
        self._queue: Deque[Participant] = deque()

    def enqueue(self, participant: Participant) -> bool:
        """
        Add a participant to the back of the queue.

        Args:
            participant: Registered participant

        Returns:
            True if added, False if already waiting
        """
        if any(waiting is participant for waiting in self._queue):
            logger.warning(f"{participant.name!r} is already in the waiting list")
            return False

        self._queue.append(participant)
        logger.info(f"{participant.name!r} added to waiting list at position {len(self._queue)}")
        return True

    def process_next(self) -> Optional[Participant]:
        """Remove and return the participant at the front, or None if empty."""
        if not self._queue:
            logger.debug("Waiting list is empty")
            return None
        participant = self._queue.popleft()
        logger.info(f"Processing next participant: {participant.name!r}")
        return participant

    def position_of(self, participant: Participant) -> Optional[int]:
        """1-based position of participant in the queue, or None."""
        for position, waiting in enumerate(self._queue, 1):
            if waiting is participant:
                return position
        return None

    def snapshot(self) -> List[Participant]:
        """Participants in queue order, front first."""
        return list(self._queue)

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)
