"""
Shared primitives
=================

Every algorithm in sortkit is built from the same two building blocks:

- *compare two elements*: an `Ordering` answers "must `a` come strictly before `b`?"
- *swap two positions*: `swap(seq, i, j)`

The `Ordering` folds the three ways a caller can describe the order
(`key=`, `reverse=`, `cmp=`) into one predicate, `lt`. Algorithms never touch
`<` directly, so they work for any type and any comparator.

Argument checking also lives here so that every algorithm fails the same way
(see `InvalidArgumentError`).
"""

from __future__ import annotations
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

KeyFunc = Callable[[Any], Any]
CompareFunc = Callable[[Any, Any], int]


class InvalidArgumentError(ValueError):
    """Raised when a sort is called with an argument it cannot work with."""


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using only `<`."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


@dataclass(frozen=True)
class Ordering:
    """The order an algorithm sorts by.

    `lt(a, b)` is True when `a` must be placed strictly before `b`.
    Reversal swaps the operands instead of negating the answer, so elements
    that compare equal stay equal and stable algorithms stay stable.
    """
    key: Optional[KeyFunc] = None
    reverse: bool = False
    cmp: Optional[CompareFunc] = None

    def lt(self, a: Any, b: Any) -> bool:
        if self.reverse:
            a, b = b, a
        if self.key is not None:
            a, b = self.key(a), self.key(b)
        if self.cmp is not None:
            return self.cmp(a, b) < 0
        return a < b

    def le(self, a: Any, b: Any) -> bool:
        return not self.lt(b, a)


def make_ordering(
    key: Optional[KeyFunc] = None,
    reverse: bool = False,
    cmp: Optional[CompareFunc] = None,
) -> Ordering:
    """Validate the ordering keywords and build an `Ordering`."""
    if key is not None and not callable(key):
        raise InvalidArgumentError(f"key must be callable, got {type(key).__name__}")
    if cmp is not None and not callable(cmp):
        raise InvalidArgumentError(f"cmp must be callable, got {type(cmp).__name__}")
    return Ordering(key=key, reverse=bool(reverse), cmp=cmp)


def check_mutable(seq: Any, name: str) -> None:
    """In-place algorithms need a mutable, indexable sequence."""
    if seq is None:
        raise InvalidArgumentError(f"{name}: sequence must not be None")
    if not isinstance(seq, MutableSequence):
        raise InvalidArgumentError(
            f"{name} sorts in place and needs a mutable sequence (e.g. a list), "
            f"got {type(seq).__name__}"
        )


def check_sequence(seq: Any, name: str) -> None:
    if seq is None:
        raise InvalidArgumentError(f"{name}: sequence must not be None")
    if not isinstance(seq, Sequence):
        raise InvalidArgumentError(f"{name} needs a sequence, got {type(seq).__name__}")


def swap(seq: MutableSequence, i: int, j: int) -> None:
    """Swap two positions (no-op when they are the same)."""
    if i == j:
        return
    seq[i], seq[j] = seq[j], seq[i]


def is_sorted(seq: Sequence, ordering: Optional[Ordering] = None) -> bool:
    """True if no element is placed before one it must follow."""
    ordering = ordering or Ordering()
    return all(not ordering.lt(seq[i + 1], seq[i]) for i in range(len(seq) - 1))


class CountingComparator(Generic[T]):
    """
    Wraps a three-way comparator and counts how often it is called.

    Handy for checking complexity claims, e.g. that insertion sort makes
    n-1 comparisons on already sorted input.

    Example:
        counting = CountingComparator()
        insertion_sort(items, cmp=counting)
        print(counting.calls)
    """

    def __init__(self, compare: Optional[CompareFunc] = None):
        self._compare = compare or natural_compare
        self.calls = 0

    def __call__(self, a: T, b: T) -> int:
        self.calls += 1
        return self._compare(a, b)

    def reset(self) -> None:
        self.calls = 0
