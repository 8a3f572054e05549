"""Invariants every algorithm must satisfy, checked on seeded random inputs."""

import random
from collections import Counter
import pytest
from sortkit import ALGORITHMS, IN_PLACE, STABLE, InvalidArgumentError, is_sorted, sort


def run(algo, items, **kw):
    """Call the algorithm directly and return the sorted list."""
    fn = ALGORITHMS[algo]
    if algo in IN_PLACE:
        arr = list(items)
        assert fn(arr, **kw) is None
        return arr
    return fn(items, **kw)


def random_lists(seed, count=25):
    rng = random.Random(seed)
    for _ in range(count):
        n = rng.randint(0, 60)
        yield [rng.randint(-20, 20) for _ in range(n)]


ALL = sorted(ALGORITHMS)


@pytest.mark.parametrize("algo", ALL)
class TestInvariants:
    def test_seed_scenario(self, algo):
        assert run(algo, [20, 35, -15, 7, 55, 1, -22]) == [-22, -15, 1, 7, 20, 35, 55]

    def test_empty(self, algo):
        assert run(algo, []) == []

    def test_single(self, algo):
        assert run(algo, [5]) == [5]

    def test_duplicates(self, algo):
        assert run(algo, [3, 1, 3, 2]) == [1, 2, 3, 3]

    def test_reverse_sorted(self, algo):
        assert run(algo, [9, 8, 7, 6, 5, 4, 3, 2, 1]) == list(range(1, 10))

    def test_permutation_order_length(self, algo):
        for items in random_lists(seed=len(algo)):
            out = run(algo, items)
            assert len(out) == len(items)
            assert Counter(out) == Counter(items)
            assert is_sorted(out)

    def test_idempotent(self, algo):
        for items in random_lists(seed=99, count=10):
            once = run(algo, items)
            assert run(algo, once) == once

    def test_reverse_matches_builtin(self, algo):
        for items in random_lists(seed=5, count=10):
            assert run(algo, items, reverse=True) == sorted(items, reverse=True)

    def test_none_fails_fast(self, algo):
        with pytest.raises(InvalidArgumentError):
            ALGORITHMS[algo](None)

    def test_inconsistent_comparator_keeps_elements(self, algo):
        rng = random.Random(17)
        items = list(range(40))
        out = run(algo, items, cmp=lambda a, b: rng.choice((-1, 0, 1)))
        assert sorted(out) == items

    def test_comparator_error_propagates(self, algo):
        def boom(a, b):
            raise RuntimeError("comparator failed")

        with pytest.raises(RuntimeError):
            run(algo, [2, 1, 3], cmp=boom)


@pytest.mark.parametrize("algo", sorted(STABLE))
class TestStability:
    def test_tagged_duplicates(self, algo):
        items = [(3, "a"), 1, (3, "b"), 2]
        out = run(algo, items, key=lambda x: x[0] if isinstance(x, tuple) else x)
        assert out.index((3, "a")) < out.index((3, "b"))

    def test_matches_builtin_stable_sort(self, algo):
        rng = random.Random(21)
        items = [(rng.randint(0, 5), i) for i in range(80)]
        key = lambda t: t[0]
        assert run(algo, items, key=key) == sorted(items, key=key)
        assert run(algo, items, key=key, reverse=True) == sorted(items, key=key, reverse=True)


class TestEngineAgreement:
    def test_all_algorithms_agree(self):
        for items in random_lists(seed=1234, count=10):
            results = {algo: sort(items, algo) for algo in ALL}
            assert all(r == sorted(items) for r in results.values())
