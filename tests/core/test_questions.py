"""
Unit Tests for Question Model

Tests for construction validation, answer checking and serialization.
"""

import pytest

from exam_registry.core.models.questions import Question
from exam_registry.core.models.ranking import RankedEntry


class TestQuestion:
    """Tests for Question dataclass."""

    def test_init_when_valid_then_creates_question(self):
        """Valid question should be created successfully."""
        q = Question("Which uses LIFO?", ("Queue", "Stack"), 1)
        assert q.option_count == 2
        assert q.correct_option == 1

    def test_init_when_options_list_then_stored_as_tuple(self):
        """Options given as a list are stored as a tuple."""
        q = Question("Q?", ["a", "b", "c"], 0)
        assert q.options == ("a", "b", "c")

    def test_init_when_empty_text_then_raises_error(self):
        """Blank text should raise ValueError."""
        with pytest.raises(ValueError, match="text cannot be empty"):
            Question("   ", ("a", "b"), 0)

    def test_init_when_one_option_then_raises_error(self):
        """Fewer than two options should raise ValueError."""
        with pytest.raises(ValueError, match="at least 2 options"):
            Question("Q?", ("a",), 0)

    @pytest.mark.parametrize("correct", [-1, 4])
    def test_init_when_correct_out_of_range_then_raises_error(self, correct):
        """correct_option outside the options should raise ValueError."""
        with pytest.raises(ValueError, match="correct_option"):
            Question("Q?", ("a", "b", "c", "d"), correct)

    def test_init_when_frozen_then_immutable(self):
        """Question should be immutable (frozen)."""
        q = Question("Q?", ("a", "b"), 0)
        with pytest.raises(AttributeError):
            q.correct_option = 1  # type: ignore

    def test_is_correct_when_matching_then_true(self):
        q = Question("Q?", ("a", "b", "c"), 2)
        assert q.is_correct(2)
        assert not q.is_correct(0)

    def test_from_dict_when_to_dict_output_then_equal(self):
        """from_dict should rebuild an equal question."""
        q = Question("Q?", ("a", "b", "c"), 2)
        data = q.to_dict()
        assert data["options"] == ["a", "b", "c"]
        assert Question.from_dict(data) == q


class TestRankedEntry:
    """Tests for RankedEntry dataclass."""

    def test_init_when_rank_zero_then_raises_error(self):
        """Ranks start at 1."""
        with pytest.raises(ValueError, match="rank must be >= 1"):
            RankedEntry(rank=0, score=10, display_name="A")

    def test_to_dict_when_called_then_contains_fields(self):
        entry = RankedEntry(rank=1, score=100, display_name="Alice")
        assert entry.to_dict() == {"rank": 1, "score": 100, "display_name": "Alice"}
