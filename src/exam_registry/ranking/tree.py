"""
Module: ranking.tree

Purpose:
    Unbalanced binary search tree keyed by score. Every completed exam
    session inserts one node; the leaderboard is a right-node-left walk
    of the tree.

Key Classes:
    - RankNode: One score entry with left/right children
    - RankTree: Insertion and enumeration

Dependencies:
    - core.models.ranking: RankedEntry

Used By:
    - session.driver.run_session
    - controller.ExamController

Limitations:
    No rebalancing. Random insertion order gives O(log n) average depth,
    but a monotonic sequence of scores degenerates into a chain of depth
    n. Walks are iterative so a chain does not hit the recursion limit.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from exam_registry.core.models.ranking import RankedEntry

logger = logging.getLogger(__name__)


class RankNode:
    """
    Tree node holding one session score.

    Attributes:
        score: Ordering key
        display_name: Name snapshot taken at insertion
        left: Subtree of strictly lower scores
        right: Subtree of equal or higher scores
    """

    __slots__ = ("score", "display_name", "left", "right")

    def __init__(self, score: int, display_name: str) -> None:
        self.score = score
        self.display_name = display_name
        self.left: Optional[RankNode] = None
        self.right: Optional[RankNode] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def has_one_child(self) -> bool:
        return (self.left is None) != (self.right is None)

    @property
    def has_two_children(self) -> bool:
        return self.left is not None and self.right is not None

    def __repr__(self) -> str:
        return f"RankNode({self.display_name!r}, {self.score})"


class RankTree:
    """
    Score-ordered ranking tree.

    Equal scores are never merged: each insert adds a node, and ties
    descend to the right. The order of equal-score rows in the
    leaderboard therefore depends on insertion history and tree shape,
    and is not defined by any secondary key.

    Example:
        >>> tree = RankTree()
        >>> tree.insert(100, "Alice")
        >>> tree.insert(60, "Bob")
        >>> tree.insert(90, "Charlie")
        >>> [(e.rank, e.display_name) for e in tree.descending_enumeration()]
        [(1, 'Alice'), (2, 'Charlie'), (3, 'Bob')]
    """

    def __init__(self) -> None:
        """Initialize empty tree."""
        self._root: Optional[RankNode] = None
        self._size = 0

    @property
    def root(self) -> Optional[RankNode]:
        return self._root

    # ─────────────────────────────────────────────────────────────────────────
    # Insertion
    # ─────────────────────────────────────────────────────────────────────────

    def insert(self, score: int, display_name: str) -> None:
        """
        Insert a score as a new leaf.

        Lower scores go left; equal or higher scores go right.

        Args:
            score: Session score
            display_name: Name to show on the leaderboard
        """
        node = RankNode(score, display_name)
        self._size += 1

        if self._root is None:
            self._root = node
            logger.debug(f"Inserted {display_name!r} ({score}) as root")
            return

        depth = 1
        current = self._root
        while True:
            depth += 1
            if score < current.score:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right

        logger.debug(f"Inserted {display_name!r} ({score}) at depth {depth}")

    # ─────────────────────────────────────────────────────────────────────────
    # Enumeration
    # ─────────────────────────────────────────────────────────────────────────

    def descending_enumeration(self) -> List[RankedEntry]:
        """
        Leaderboard from highest to lowest score.

        Walks right subtree, node, left subtree, numbering ranks from 1.

        Returns:
            RankedEntry rows with non-increasing scores
        """
        return [
            RankedEntry(rank=rank, score=node.score, display_name=node.display_name)
            for rank, node in enumerate(self._walk(descending=True), 1)
        ]

    def ascending_enumeration(self) -> List[RankedEntry]:
        """
        Entries from lowest to highest score (standard in-order walk).

        Ranks count from 1 at the lowest score.
        """
        return [
            RankedEntry(rank=rank, score=node.score, display_name=node.display_name)
            for rank, node in enumerate(self._walk(descending=False), 1)
        ]

    def _walk(self, *, descending: bool) -> Iterator[RankNode]:
        """In-order walk with an explicit stack; mirrored when descending."""
        stack: List[RankNode] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.right if descending else current.left
            current = stack.pop()
            yield current
            current = current.left if descending else current.right

    # ─────────────────────────────────────────────────────────────────────────
    # Shape
    # ─────────────────────────────────────────────────────────────────────────

    def height(self) -> int:
        """
        Number of nodes on the longest root-to-leaf path (0 when empty).

        Equals len(self) for a fully degenerate tree.
        """
        if self._root is None:
            return 0
        best = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"RankTree(entries={self._size})"
