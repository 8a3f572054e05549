"""
sortkit package
===============

Comparison-based sorting algorithms written in a clear, explicit style.

- In-place sorts (return None): `selection_sort`, `insertion_sort`,
  `bubble_sort`, `shell_sort`, `quick_sort` are in `sortkit/elementary.py`,
  `sortkit/shell.py` and `sortkit/quick.py`.
- `merge_sort` (in `sortkit/merge.py`) returns a new list.
- Name-based dispatch (`sort(items, algo="quick")`) and `bench` are in
  `sortkit/engine.py`.

Every algorithm takes the same ordering keywords: `key=`, `reverse=`, `cmp=`.
"""

from .elementary import bubble_sort, insertion_sort, selection_sort
from .engine import ALGORITHMS, IN_PLACE, STABLE, SortConfig, bench, sort
from .merge import merge, merge_sort
from .primitives import CountingComparator, InvalidArgumentError, Ordering, is_sorted, swap
from .quick import partition, quick_sort
from .shell import halving_gaps, knuth_gaps, shell_sort

__version__ = '0.1.0'
__all__ = [
    "selection_sort",
    "insertion_sort",
    "bubble_sort",
    "shell_sort",
    "quick_sort",
    "merge_sort",
    "partition",
    "merge",
    "halving_gaps",
    "knuth_gaps",
    "sort",
    "bench",
    "SortConfig",
    "ALGORITHMS",
    "IN_PLACE",
    "STABLE",
    "Ordering",
    "CountingComparator",
    "InvalidArgumentError",
    "is_sorted",
    "swap",
]
