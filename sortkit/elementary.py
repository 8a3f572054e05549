"""
Elementary O(n^2) sorts
=======================

Selection sort, insertion sort and bubble sort. All three sort in place,
use O(1) extra space and return None (like `list.sort`).

- Selection sort: at most n-1 swaps, not stable.
- Insertion sort: stable, O(n) on already sorted input.
- Bubble sort: stable, stops after the first pass without swaps.
"""

from __future__ import annotations
from collections.abc import MutableSequence
from typing import Optional

from .primitives import CompareFunc, KeyFunc, check_mutable, make_ordering, swap


def selection_sort(
    seq: MutableSequence,
    *,
    key: Optional[KeyFunc] = None,
    reverse: bool = False,
    cmp: Optional[CompareFunc] = None,
) -> None:
    """Selection sort (select the largest, move it to the end of the unsorted part)."""
    check_mutable(seq, "selection_sort")
    order = make_ordering(key, reverse, cmp)

    # [0, last_unsorted] is unsorted, everything after it is final
    for last_unsorted in range(len(seq) - 1, 0, -1):
        largest = 0
        for i in range(1, last_unsorted + 1):
            # strict: the first occurrence of the maximum is kept
            if order.lt(seq[largest], seq[i]):
                largest = i
        swap(seq, largest, last_unsorted)


def insertion_sort(
    seq: MutableSequence,
    *,
    key: Optional[KeyFunc] = None,
    reverse: bool = False,
    cmp: Optional[CompareFunc] = None,
) -> None:
    """Stable insertion sort."""
    check_mutable(seq, "insertion_sort")
    order = make_ordering(key, reverse, cmp)

    for first_unsorted in range(1, len(seq)):
        new_element = seq[first_unsorted]
        i = first_unsorted
        # shift only strictly greater elements, equal ones keep their order
        while i > 0 and order.lt(new_element, seq[i - 1]):
            seq[i] = seq[i - 1]
            i -= 1
        seq[i] = new_element


def bubble_sort(
    seq: MutableSequence,
    *,
    key: Optional[KeyFunc] = None,
    reverse: bool = False,
    cmp: Optional[CompareFunc] = None,
) -> None:
    """Stable bubble sort with early exit."""
    check_mutable(seq, "bubble_sort")
    order = make_ordering(key, reverse, cmp)

    for last_unsorted in range(len(seq) - 1, 0, -1):
        swapped = False
        for i in range(last_unsorted):
            if order.lt(seq[i + 1], seq[i]):
                swap(seq, i, i + 1)
                swapped = True
        if not swapped:
            break
