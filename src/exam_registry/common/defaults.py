"""Default exam content and scoring constants.

The built-in exam is five data-structures questions, four options each,
worth 20 marks apiece for a maximum of 100.
"""

from __future__ import annotations

from typing import Tuple

from exam_registry.core.models.questions import Question


QUESTION_WEIGHT = 20  # Marks awarded per correct answer
OPTION_COUNT = 4  # Options shown for every question


DEFAULT_QUESTIONS: Tuple[Question, ...] = (
    Question(
        text="What is the time complexity of Binary Search?",
        options=("O(n)", "O(log n)", "O(n²)", "O(1)"),
        correct_option=1,
    ),
    Question(
        text="Which data structure uses LIFO (Last In First Out)?",
        options=("Queue", "Stack", "Array", "LinkedList"),
        correct_option=1,
    ),
    Question(
        text="What is the average time complexity of Quick Sort?",
        options=("O(n)", "O(n²)", "O(n log n)", "O(log n)"),
        correct_option=2,
    ),
    Question(
        text="In a Binary Search Tree, where are smaller elements stored?",
        options=("Right subtree", "Left subtree", "Root node", "Randomly placed"),
        correct_option=1,
    ),
    Question(
        text="What is the average time complexity of HashMap lookup?",
        options=("O(n)", "O(log n)", "O(1)", "O(n²)"),
        correct_option=2,
    ),
)
