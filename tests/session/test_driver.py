"""
Unit tests for the session driver.

Verifies scoring, the writes into Participant and RankTree, and that a
rejected answer leaves all state unchanged.
"""

import pytest

from exam_registry.common.defaults import DEFAULT_QUESTIONS
from exam_registry.core.models.participant import Participant
from exam_registry.session.config import SessionConfig
from exam_registry.session.driver import answers_from_sequence, run_session


def _wrong(answer):
    return (answer + 1) % 4


class TestRunSession:
    """Tests for run_session."""

    def test_run_when_all_correct_then_full_marks(self, rank_tree, correct_answers):
        alice = Participant(101, "Alice")

        result = run_session(alice, DEFAULT_QUESTIONS, answers_from_sequence(correct_answers), rank_tree)

        assert result.score == 100
        assert result.max_score == 100
        assert result.correct_count == 5
        assert result.percentage == 100.0
        assert alice.latest_score == 100
        assert alice.attempt_history == (100,)

    @pytest.mark.parametrize("correct_count", [0, 1, 2, 3, 4, 5])
    def test_run_when_c_correct_then_score_is_c_times_weight(self, rank_tree, correct_answers, correct_count):
        answers = [
            a if i < correct_count else _wrong(a)
            for i, a in enumerate(correct_answers)
        ]
        p = Participant(1, "P")

        result = run_session(p, DEFAULT_QUESTIONS, answers_from_sequence(answers), rank_tree)

        assert result.score == correct_count * 20
        assert p.latest_score == correct_count * 20
        assert result.correct_count == correct_count

    def test_run_when_custom_weight_then_uses_weight(self, rank_tree, two_questions):
        config = SessionConfig(question_weight=7)
        p = Participant(1, "P")

        result = run_session(p, two_questions, answers_from_sequence([0, 3]), rank_tree, config=config)

        assert result.score == 7
        assert result.max_score == 14

    def test_run_when_completed_then_inserts_into_tree(self, rank_tree, correct_answers):
        alice = Participant(101, "Alice")

        run_session(alice, DEFAULT_QUESTIONS, answers_from_sequence(correct_answers), rank_tree)

        entries = rank_tree.descending_enumeration()
        assert [(e.display_name, e.score) for e in entries] == [("Alice", 100)]

    def test_run_when_k_sessions_then_history_length_k(self, rank_tree, correct_answers):
        p = Participant(1, "P")
        scores = []
        for wrong_count in (5, 2, 0):
            answers = [
                _wrong(a) if i < wrong_count else a
                for i, a in enumerate(correct_answers)
            ]
            scores.append(
                run_session(p, DEFAULT_QUESTIONS, answers_from_sequence(answers), rank_tree).score
            )

        assert p.attempt_history == tuple(scores) == (0, 60, 100)
        assert p.attempt_history[-1] == p.latest_score
        assert len(rank_tree) == 3

    def test_run_when_outcomes_then_one_per_question(self, rank_tree, correct_answers):
        answers = list(correct_answers)
        answers[2] = 0

        result = run_session(Participant(1, "P"), DEFAULT_QUESTIONS, answers_from_sequence(answers), rank_tree)

        assert result.question_count == 5
        assert [o.position for o in result.outcomes] == [1, 2, 3, 4, 5]
        third = result.outcomes[2]
        assert (third.selected_option, third.correct_option, third.is_correct) == (0, 2, False)

    def test_run_when_provider_called_then_receives_position_and_question(self, rank_tree, two_questions):
        seen = []

        def provider(position, question):
            seen.append((position, question.text))
            return 0

        run_session(Participant(1, "P"), two_questions, provider, rank_tree)

        assert seen == [(1, "First?"), (2, "Second?")]

    @pytest.mark.parametrize("bad_answer", [-1, 4])
    def test_run_when_answer_out_of_range_then_state_unchanged(self, rank_tree, two_questions, bad_answer):
        p = Participant(1, "P")

        with pytest.raises(ValueError, match="Answer for question 2"):
            run_session(p, two_questions, answers_from_sequence([0, bad_answer]), rank_tree)

        assert p.attempt_history == ()
        assert p.latest_score == 0
        assert rank_tree.is_empty()

    def test_run_when_too_few_answers_then_raises_error(self, rank_tree, two_questions):
        with pytest.raises(ValueError, match="No answer recorded for question 2"):
            run_session(Participant(1, "P"), two_questions, answers_from_sequence([0]), rank_tree)
