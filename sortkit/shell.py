"""
Shell sort
==========

Insertion sort on elements `gap` positions apart, for a decreasing series of
gaps. The last pass always uses gap 1, which is a plain insertion sort, so the
result is sorted whatever the earlier gaps did. Earlier passes move elements
long distances cheaply, which is where the speed-up comes from.

Gap sequences are plain functions `n -> list of gaps`:

- `halving_gaps` (default): n//2, n//4, ..., 1
- `knuth_gaps`: ..., 40, 13, 4, 1

`shell_sort(..., gaps=...)` also accepts the names "halving" / "knuth".
"""

from __future__ import annotations
from collections.abc import MutableSequence
from typing import Callable, Iterable, List, Optional
import logging

from .primitives import CompareFunc, InvalidArgumentError, KeyFunc, check_mutable, make_ordering

logger = logging.getLogger(__name__)

GapFunc = Callable[[int], Iterable[int]]


def halving_gaps(n: int) -> List[int]:
    """Shell's original sequence: n//2, n//4, ..., 1 (empty for n <= 1)."""
    gaps: List[int] = []
    gap = n // 2
    while gap > 0:
        gaps.append(gap)
        gap //= 2
    return gaps


def knuth_gaps(n: int) -> List[int]:
    """Knuth's sequence h = 3h + 1, starting from the first h >= n//3."""
    if n <= 1:
        return []
    h = 1
    while h < n // 3:
        h = 3 * h + 1
    gaps: List[int] = []
    while h > 0:
        gaps.append(h)
        h //= 3
    return gaps


GAP_SEQUENCES = {
    "halving": halving_gaps,
    "knuth": knuth_gaps,
}


def _checked_gaps(gaps: GapFunc, n: int) -> List[int]:
    out = list(gaps(n))
    prev = None
    for g in out:
        if not isinstance(g, int) or isinstance(g, bool) or g < 1:
            raise InvalidArgumentError(f"gaps must be positive integers, got {g!r}")
        if prev is not None and g >= prev:
            raise InvalidArgumentError(f"gaps must be strictly decreasing, got {out}")
        prev = g
    if n > 1 and (not out or out[-1] != 1):
        raise InvalidArgumentError(f"gap sequence must end with 1, got {out}")
    return out


def shell_sort(
    seq: MutableSequence,
    *,
    key: Optional[KeyFunc] = None,
    reverse: bool = False,
    cmp: Optional[CompareFunc] = None,
    gaps: GapFunc = halving_gaps,
) -> None:
    """In-place shell sort (not stable)."""
    check_mutable(seq, "shell_sort")
    order = make_ordering(key, reverse, cmp)
    if isinstance(gaps, str):
        try:
            gaps = GAP_SEQUENCES[gaps]
        except KeyError:
            raise InvalidArgumentError(
                f"gaps must be one of {sorted(GAP_SEQUENCES)} or a callable, got {gaps!r}"
            ) from None
    if not callable(gaps):
        raise InvalidArgumentError("gaps must be a callable n -> iterable of gaps")

    n = len(seq)
    gap_list = _checked_gaps(gaps, n)
    logger.debug("shell_sort n=%d gaps=%s", n, gap_list)

    for gap in gap_list:
        for i in range(gap, n):
            new_element = seq[i]
            j = i
            # shift gap-distance neighbours that are strictly greater
            while j >= gap and order.lt(new_element, seq[j - gap]):
                seq[j] = seq[j - gap]
                j -= gap
            seq[j] = new_element
