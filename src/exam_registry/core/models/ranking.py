"""
Module: ranking

Purpose:
    Provides RankedEntry - one row of the leaderboard produced by
    RankTree.descending_enumeration().

Dependencies:
    - dataclasses (std)

Used By:
    - ranking.tree.RankTree
    - controller.ExamController
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class RankedEntry:
    """
    Leaderboard row.

    Attributes:
        rank: 1-based position in the enumeration
        score: Session score
        display_name: Name snapshot taken when the score was inserted

    Note:
        Rows with equal scores receive distinct consecutive ranks. Their
        relative order follows tree shape, not any secondary key.
    """

    rank: int
    score: int
    display_name: str

    def __post_init__(self) -> None:
        if self.rank < 1:
            raise ValueError(f"rank must be >= 1: {self.rank}")

    def to_dict(self) -> Dict[str, Any]:
        return {"rank": self.rank, "score": self.score, "display_name": self.display_name}

    def __repr__(self) -> str:
        return f"RankedEntry(#{self.rank} {self.display_name!r}: {self.score})"
