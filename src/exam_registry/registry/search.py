"""
Module: registry.search

Purpose:
    Halving binary search over a list already sorted by a key.

Key Functions:
    - binary_search(): Index of the item whose key equals target, or None

Used By:
    - registry.store.Registry.find_by_id_via_sorted_search
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")


def binary_search(
    items: Sequence[T],
    target: int,
    key: Callable[[T], int],
) -> Optional[int]:
    """
    Find target in items sorted ascending by key.

    The midpoint is computed as ``low + (high - low) // 2`` and the
    bounds are narrowed until they cross.

    Args:
        items: Sequence sorted ascending by key
        target: Key value to find
        key: Function extracting the comparison key from an item

    Returns:
        Index of a matching item, or None if absent

    Example:
        >>> binary_search([1, 3, 5, 9], 9, key=lambda x: x)
        3
    """
    low = 0
    high = len(items) - 1

    while low <= high:
        mid = low + (high - low) // 2
        current = key(items[mid])
        if current == target:
            return mid
        if current > target:
            high = mid - 1
        else:
            low = mid + 1

    return None
