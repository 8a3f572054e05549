"""
Quick sort
==========

In-place quick sort over half-open ranges `[start, end)`.

`partition` is the two-pointer "hole filling" scheme: the pivot (first element
of the range) is lifted out, leaving a hole at `start`. A scan from the right
finds an element smaller than the pivot and moves it into the hole (the hole is
now on the right); a scan from the left finds an element larger than the pivot
and moves it into that hole. The scans meet at the pivot's final position.

Pivot strategies:
- "first"   (default) reproducible; O(n^2) on sorted or reverse-sorted input
- "median3" median of first, middle and last element
- "random"  uniform index from a `random.Random`

Whatever the strategy, the chosen element is swapped to `start` and the same
`partition` runs. The sort recurses into the smaller side and loops on the
larger one, so the call depth stays O(log n) even in the worst case.
"""

from __future__ import annotations
from collections.abc import MutableSequence
from typing import Callable, Optional
import logging
import random

from .primitives import (
    CompareFunc,
    InvalidArgumentError,
    KeyFunc,
    Ordering,
    check_mutable,
    make_ordering,
    swap,
)

logger = logging.getLogger(__name__)

PivotFunc = Callable[[MutableSequence, int, int, Ordering], int]


def partition(seq: MutableSequence, start: int, end: int, order: Ordering) -> int:
    """Partition `seq[start:end]` around `seq[start]` and return the pivot's index.

    Afterwards nothing left of the index comes after the pivot and nothing
    right of it comes before the pivot. Where elements equal to the pivot end
    up is not specified. Requires `end - start >= 1`.
    """
    pivot = seq[start]
    i = start
    j = end

    while i < j:
        # scan left from j for an element smaller than the pivot
        while i < j:
            j -= 1
            if order.lt(seq[j], pivot):
                break
        if i < j:
            seq[i] = seq[j]

        # scan right from i for an element larger than the pivot
        while i < j:
            i += 1
            if order.lt(pivot, seq[i]):
                break
        if i < j:
            seq[j] = seq[i]

    # i == j: the last hole
    seq[j] = pivot
    return j


def _first_pivot(seq: MutableSequence, start: int, end: int, order: Ordering) -> int:
    return start


def _median3_pivot(seq: MutableSequence, start: int, end: int, order: Ordering) -> int:
    a, b, c = start, start + (end - start) // 2, end - 1
    if order.lt(seq[b], seq[a]):
        a, b = b, a
    # now seq[a] <= seq[b]
    if order.lt(seq[c], seq[b]):
        b = a if order.lt(seq[c], seq[a]) else c
    return b


def _random_pivot(rng: random.Random) -> PivotFunc:
    def choose(seq: MutableSequence, start: int, end: int, order: Ordering) -> int:
        return rng.randrange(start, end)
    return choose


PIVOT_STRATEGIES = ("first", "median3", "random")


def _pivot_func(pivot: str, rng: Optional[random.Random]) -> PivotFunc:
    if pivot == "first":
        return _first_pivot
    if pivot == "median3":
        return _median3_pivot
    if pivot == "random":
        return _random_pivot(rng or random.Random())
    raise InvalidArgumentError(f"pivot must be one of {', '.join(PIVOT_STRATEGIES)}; got {pivot!r}")


def _quick_sort(seq: MutableSequence, start: int, end: int, order: Ordering, choose: PivotFunc) -> None:
    while end - start >= 2:
        if choose is not _first_pivot:
            swap(seq, start, choose(seq, start, end, order))
        p = partition(seq, start, end, order)
        if p - start < end - (p + 1):
            _quick_sort(seq, start, p, order, choose)
            start = p + 1
        else:
            _quick_sort(seq, p + 1, end, order, choose)
            end = p


def quick_sort(
    seq: MutableSequence,
    *,
    key: Optional[KeyFunc] = None,
    reverse: bool = False,
    cmp: Optional[CompareFunc] = None,
    pivot: str = "first",
    rng: Optional[random.Random] = None,
) -> None:
    """In-place quick sort (not stable)."""
    check_mutable(seq, "quick_sort")
    order = make_ordering(key, reverse, cmp)
    choose = _pivot_func(pivot, rng)
    if pivot != "first":
        logger.debug("quick_sort n=%d pivot=%s", len(seq), pivot)
    _quick_sort(seq, 0, len(seq), order, choose)
