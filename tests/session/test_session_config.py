"""
Unit tests for SessionConfig.
"""

import pytest

from exam_registry.common.defaults import DEFAULT_QUESTIONS, OPTION_COUNT, QUESTION_WEIGHT
from exam_registry.core.models.questions import Question
from exam_registry.session.config import SessionConfig


class TestSessionConfig:
    """Tests for SessionConfig dataclass."""

    def test_init_when_defaults_then_twenty_marks_four_options(self):
        config = SessionConfig()

        assert config.question_weight == QUESTION_WEIGHT == 20
        assert config.option_count == OPTION_COUNT == 4

    def test_init_when_zero_weight_then_raises_error(self):
        """Zero question_weight should raise ValueError."""
        with pytest.raises(ValueError, match="question_weight must be positive"):
            SessionConfig(question_weight=0)

    def test_init_when_one_option_then_raises_error(self):
        with pytest.raises(ValueError, match="option_count must be at least 2"):
            SessionConfig(option_count=1)

    def test_max_score_when_default_bank_then_hundred(self):
        assert SessionConfig().max_score(len(DEFAULT_QUESTIONS)) == 100

    def test_check_questions_when_default_bank_then_ok(self):
        # Should not raise
        SessionConfig().check_questions(DEFAULT_QUESTIONS)

    def test_check_questions_when_empty_then_raises_error(self):
        with pytest.raises(ValueError, match="at least one question"):
            SessionConfig().check_questions([])

    def test_check_questions_when_option_mismatch_then_raises_error(self):
        questions = [Question("Q?", ("yes", "no"), 0)]

        with pytest.raises(ValueError, match="has 2 options"):
            SessionConfig().check_questions(questions)

    def test_check_questions_when_option_count_none_then_any_count(self):
        questions = [Question("Q?", ("yes", "no"), 0)]

        SessionConfig(option_count=None).check_questions(questions)
