"""
Unit tests for WaitingList.
"""

import logging

from exam_registry.core.models.participant import Participant
from exam_registry.registry.waiting_list import WaitingList


class TestWaitingList:
    """Tests for the FIFO waiting list."""

    def test_process_next_when_enqueued_then_fifo_order(self):
        queue = WaitingList()
        a, b, c = Participant(1, "A"), Participant(2, "B"), Participant(3, "C")
        for p in (a, b, c):
            assert queue.enqueue(p)

        assert queue.process_next() is a
        assert queue.process_next() is b
        assert queue.process_next() is c
        assert queue.process_next() is None

    def test_enqueue_when_already_waiting_then_not_added(self, caplog):
        queue = WaitingList()
        a = Participant(1, "A")
        queue.enqueue(a)

        with caplog.at_level(logging.WARNING):
            added = queue.enqueue(a)

        assert not added
        assert len(queue) == 1
        assert "already in the waiting list" in caplog.text

    def test_enqueue_when_processed_then_can_queue_again(self):
        queue = WaitingList()
        a = Participant(1, "A")
        queue.enqueue(a)
        queue.process_next()

        assert queue.enqueue(a)

    def test_position_of_when_waiting_then_one_based(self):
        queue = WaitingList()
        a, b = Participant(1, "A"), Participant(2, "B")
        queue.enqueue(a)
        queue.enqueue(b)

        assert queue.position_of(a) == 1
        assert queue.position_of(b) == 2
        assert queue.position_of(Participant(3, "C")) is None

    def test_snapshot_when_called_then_front_first_copy(self):
        queue = WaitingList()
        a, b = Participant(1, "A"), Participant(2, "B")
        queue.enqueue(a)
        queue.enqueue(b)

        snapshot = queue.snapshot()
        snapshot.pop()

        assert queue.snapshot() == [a, b]
        assert not queue.is_empty()

    def test_is_empty_when_new_then_true(self):
        assert WaitingList().is_empty()
