"""Tests for the shared ordering / swap primitives."""

import pytest
from sortkit.primitives import (
    CountingComparator,
    InvalidArgumentError,
    Ordering,
    check_mutable,
    check_sequence,
    is_sorted,
    make_ordering,
    natural_compare,
    swap,
)


class TestOrdering:
    def test_natural(self):
        order = Ordering()
        assert order.lt(1, 2)
        assert not order.lt(2, 1)
        assert not order.lt(2, 2)
        assert order.le(2, 2)

    def test_reverse_keeps_equal_elements_equal(self):
        order = Ordering(reverse=True)
        assert order.lt(2, 1)
        assert not order.lt(1, 2)
        assert not order.lt(3, 3)

    def test_key(self):
        order = Ordering(key=len)
        assert order.lt("a", "bb")
        assert not order.lt("bb", "aa")

    def test_cmp_applied_to_keys(self):
        order = Ordering(key=abs, cmp=lambda a, b: a - b)
        assert order.lt(-1, 2)
        assert order.lt(1, -2)
        assert not order.lt(-3, 2)

    def test_make_ordering_rejects_non_callables(self):
        with pytest.raises(InvalidArgumentError):
            make_ordering(key="len")
        with pytest.raises(InvalidArgumentError):
            make_ordering(cmp=3)

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgumentError, ValueError)


class TestNaturalCompare:
    @pytest.mark.parametrize("a,b,expected", [(1, 2, -1), (2, 1, 1), (2, 2, 0), ("a", "b", -1)])
    def test_three_way(self, a, b, expected):
        assert natural_compare(a, b) == expected


class TestSwap:
    def test_swaps_positions(self):
        arr = [1, 2, 3]
        swap(arr, 0, 2)
        assert arr == [3, 2, 1]

    def test_same_position_is_noop(self):
        arr = [1, 2, 3]
        swap(arr, 1, 1)
        assert arr == [1, 2, 3]


class TestChecks:
    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            check_mutable(None, "x")
        with pytest.raises(InvalidArgumentError):
            check_sequence(None, "x")

    def test_tuple_not_mutable(self):
        with pytest.raises(InvalidArgumentError):
            check_mutable((1, 2), "x")
        check_sequence((1, 2), "x")

    def test_set_is_not_a_sequence(self):
        with pytest.raises(InvalidArgumentError):
            check_sequence({1, 2}, "x")


class TestIsSorted:
    def test_sorted(self):
        assert is_sorted([])
        assert is_sorted([1])
        assert is_sorted([1, 1, 2])
        assert not is_sorted([2, 1])

    def test_with_ordering(self):
        assert is_sorted([3, 2, 2, 1], Ordering(reverse=True))


class TestCountingComparator:
    def test_counts_calls(self):
        counting = CountingComparator()
        assert counting(1, 2) < 0
        assert counting(2, 1) > 0
        assert counting.calls == 2
        counting.reset()
        assert counting.calls == 0

    def test_wraps_custom_compare(self):
        counting = CountingComparator(lambda a, b: b - a)
        assert counting(1, 2) > 0
        assert counting.calls == 1
