"""
Sort engine
===========

A thin layer over the algorithm modules:

1) `ALGORITHMS` maps a name ("merge", "quick", ...) to its function
2) `sort(items, algo=...)` picks one by name and always returns a new list
   (in-place algorithms run on a copy, so `items` is never modified)
3) `SortConfig` bundles the per-algorithm knobs (pivot strategy, gap sequence)
4) `bench(items)` times the algorithms against each other

The algorithm functions themselves stay pure: no logging in inner loops,
no printing, no I/O.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional
import logging
import random
import time

import numpy as np

from .elementary import bubble_sort, insertion_sort, selection_sort
from .merge import merge_sort
from .primitives import CompareFunc, InvalidArgumentError, KeyFunc
from .quick import quick_sort
from .shell import GAP_SEQUENCES, shell_sort

logger = logging.getLogger(__name__)

ALGORITHMS: Dict[str, Callable[..., Any]] = {
    "selection": selection_sort,
    "insertion": insertion_sort,
    "bubble": bubble_sort,
    "shell": shell_sort,
    "quick": quick_sort,
    "merge": merge_sort,
}

# Algorithms that mutate their argument and return None
IN_PLACE = frozenset({"selection", "insertion", "bubble", "shell", "quick"})

# Algorithms that keep equal elements in input order
STABLE = frozenset({"insertion", "bubble", "merge"})


@dataclass
class SortConfig:
    """Knobs for `sort`. Explicit arguments to `sort` win over these."""
    algo: str = "merge"
    reverse: bool = False

    # quick sort: "first" | "median3" | "random"
    pivot: str = "first"
    # random pivot seed (None: unseeded)
    seed: Optional[int] = None

    # shell sort: "halving" | "knuth"
    gaps: str = "halving"


def _options(algo: str, config: SortConfig) -> Dict[str, Any]:
    if algo == "quick":
        rng = random.Random(config.seed) if config.pivot == "random" else None
        return {"pivot": config.pivot, "rng": rng}
    if algo == "shell":
        if config.gaps not in GAP_SEQUENCES:
            raise InvalidArgumentError(
                f"gaps must be one of {', '.join(sorted(GAP_SEQUENCES))}; got {config.gaps!r}"
            )
        return {"gaps": GAP_SEQUENCES[config.gaps]}
    return {}


def sort(
    items: Iterable[Any],
    algo: Optional[str] = None,
    *,
    key: Optional[KeyFunc] = None,
    reverse: Optional[bool] = None,
    cmp: Optional[CompareFunc] = None,
    config: Optional[SortConfig] = None,
) -> List[Any]:
    """Sort `items` with the named algorithm and return a new list."""
    config = config or SortConfig()
    algo = algo if algo is not None else config.algo
    reverse = config.reverse if reverse is None else reverse

    if algo not in ALGORITHMS:
        raise InvalidArgumentError(
            f"algo must be one of {', '.join(ALGORITHMS)}; got {algo!r}"
        )
    if items is None:
        raise InvalidArgumentError("sort: items must not be None")

    fn = ALGORITHMS[algo]
    options = _options(algo, config)
    logger.debug("sort algo=%s in_place=%s options=%s", algo, algo in IN_PLACE, options)

    if algo in IN_PLACE:
        arr = list(items)
        fn(arr, key=key, reverse=reverse, cmp=cmp, **options)
        return arr
    return fn(list(items), key=key, reverse=reverse, cmp=cmp, **options)


def bench(
    items: Iterable[Any],
    algos: Optional[Iterable[str]] = None,
    rounds: int = 5,
    *,
    key: Optional[KeyFunc] = None,
    reverse: bool = False,
    config: Optional[SortConfig] = None,
) -> Dict[str, Dict[str, float]]:
    """Time each algorithm on copies of `items`.

    Returns {algo: {"mean_ms", "median_ms", "min_ms"}}. `items` is not modified.
    """
    if rounds < 1:
        raise InvalidArgumentError(f"rounds must be >= 1, got {rounds}")
    if items is None:
        raise InvalidArgumentError("bench: items must not be None")
    data = list(items)
    names = list(algos) if algos is not None else list(ALGORITHMS)
    for name in names:
        if name not in ALGORITHMS:
            raise InvalidArgumentError(
                f"algo must be one of {', '.join(ALGORITHMS)}; got {name!r}"
            )

    results: Dict[str, Dict[str, float]] = {}
    for name in names:
        timings: List[float] = []
        for _ in range(rounds):
            t0 = time.perf_counter()
            sort(data, name, key=key, reverse=reverse, config=config)
            timings.append((time.perf_counter() - t0) * 1000)
        arr = np.asarray(timings, dtype=float)
        results[name] = {
            "mean_ms": float(np.mean(arr)),
            "median_ms": float(np.median(arr)),
            "min_ms": float(np.min(arr)),
        }
        logger.debug("bench %s n=%d rounds=%d mean=%.3fms", name, len(data), rounds, results[name]["mean_ms"])
    return results
