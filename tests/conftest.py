import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import exam_registry
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from exam_registry.core.models.questions import Question
from exam_registry.ranking.tree import RankTree
from exam_registry.registry.store import Registry


# Correct 0-based answers for the built-in question bank
DEFAULT_CORRECT_ANSWERS = [1, 1, 2, 1, 2]


# Common test fixtures
@pytest.fixture
def correct_answers():
    """Return the answer key for the built-in questions."""
    return list(DEFAULT_CORRECT_ANSWERS)


@pytest.fixture
def registry():
    """Create an empty registry."""
    return Registry()


@pytest.fixture
def rank_tree():
    """Create an empty ranking tree."""
    return RankTree()


@pytest.fixture
def two_questions():
    """Two four-option questions, both answered correctly by option 0."""
    return [
        Question("First?", ("a", "b", "c", "d"), 0),
        Question("Second?", ("a", "b", "c", "d"), 0),
    ]


@pytest.fixture
def question_bank_data():
    """Create valid question bank data for testing."""
    return {
        "schema_version": 1,
        "questions": [
            {
                "text": "Which data structure uses LIFO?",
                "options": ["Queue", "Stack", "Array", "LinkedList"],
                "correct_option": 1,
            },
            {
                "text": "Where are smaller keys stored in a BST?",
                "options": ["Right subtree", "Left subtree", "Root node", "Randomly"],
                "correct_option": 1,
            },
        ],
    }
