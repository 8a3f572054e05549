"""
Merge sort
==========

Stable O(n log n) merge sort that returns a new list and never mutates its
input (so tuples and other read-only sequences are accepted).
"""

from __future__ import annotations
from collections.abc import Sequence
from typing import List, Optional, TypeVar

from .primitives import CompareFunc, KeyFunc, Ordering, check_sequence, make_ordering

T = TypeVar("T")


def merge_sort(
    seq: Sequence[T],
    *,
    key: Optional[KeyFunc] = None,
    reverse: bool = False,
    cmp: Optional[CompareFunc] = None,
) -> List[T]:
    """Stable merge sort."""
    check_sequence(seq, "merge_sort")
    order = make_ordering(key, reverse, cmp)
    return _merge_sort(list(seq), order)


def _merge_sort(arr: List[T], order: Ordering) -> List[T]:
    if len(arr) <= 1:
        return arr
    mid = len(arr) // 2
    left = _merge_sort(arr[:mid], order)
    right = _merge_sort(arr[mid:], order)
    return merge(left, right, order)


def merge(left: List[T], right: List[T], order: Ordering) -> List[T]:
    """Merge two sorted lists into a new one; on ties `left` goes first."""
    # halves already in order: nothing to interleave
    if not left or not right or order.le(left[-1], right[0]):
        return left + right

    out: List[T] = []
    # i and j are pointers into each sorted list
    i = j = 0
    while i < len(left) and j < len(right):
        if order.lt(right[j], left[i]):
            out.append(right[j]); j += 1
        else:
            out.append(left[i]); i += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out
