"""
Module: ranking

Purpose:
    Score-ordered ranking tree producing the descending leaderboard.

Key Classes:
    - RankTree: insert / descending_enumeration / is_empty
    - RankNode: Tree node
"""

from .tree import RankNode, RankTree

__all__ = [
    "RankNode",
    "RankTree",
]
