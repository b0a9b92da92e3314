"""
Module: registry

Purpose:
    Participant ownership: the dual-indexed Registry, the sorted-search
    helper and the FIFO waiting list.

Key Classes:
    - Registry: register_or_fetch / find_by_id / find_by_id_via_sorted_search
    - WaitingList: participants queued to sit the exam

Key Functions:
    - binary_search(): Halving search over a key-sorted list
"""

from .search import binary_search
from .store import Registry
from .waiting_list import WaitingList

__all__ = [
    "Registry",
    "WaitingList",
    "binary_search",
]
