#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for MergeCursor (k-way collation of sorted cursors).
"""

import numpy as np
import pytest

from pycursor.src import Comparators
from pycursor.src.CursorErrors import (
    IllegalStateError,
    MissingComparatorError,
    NoSuchElementError,
    UnsupportedOperationError,
)
from pycursor.src.FilterIterator import FilterIterator
from pycursor.src.FilteringCursor import FilteringCursor
from pycursor.src.IteratorCursor import IteratorCursor
from pycursor.src.ListCursor import ListCursor
from pycursor.src.MergeCursor import MergeCursor


@pytest.fixture
def evens():
    return list(range(0, 20, 2))


@pytest.fixture
def odds():
    return list(range(1, 20, 2))


@pytest.fixture
def fib():
    return [1, 1, 2, 3, 5, 8, 13, 21]


def merge(*lists, comparator=Comparators.natural):
    return MergeCursor(comparator, [ListCursor(items) for items in lists])


def test_iterate_single_source(evens):
    m = merge(evens)
    for value in evens:
        assert m.hasNext()
        assert m.next() == value
        assert m.getLastSourceIndex() == 0
    assert not m.hasNext()


def test_iterate_even_odd(evens, odds):
    m = merge(evens, odds)
    for i in range(20):
        assert m.hasNext()
        assert m.next() == i
        assert m.getLastSourceIndex() == i % 2
    assert not m.hasNext()


def test_iterate_odd_even(evens, odds):
    m = merge(odds, evens)
    for i in range(20):
        assert m.next() == i
        assert m.getLastSourceIndex() == (1 if i % 2 == 0 else 0)
    assert not m.hasNext()


def test_iterate_even_even(evens):
    m = merge(evens, list(evens))
    for value in evens:
        assert m.next() == value
        assert m.getLastSourceIndex() == 0
        assert m.next() == value
        assert m.getLastSourceIndex() == 1
    assert not m.hasNext()


def test_iterate_fib_even_odd(fib, evens, odds):
    m = merge(fib, evens, odds)
    expected = [
        (0, 1), (1, 0), (1, 0), (1, 2), (2, 0), (2, 1), (3, 0), (3, 2),
        (4, 1), (5, 0), (5, 2), (6, 1), (7, 2), (8, 0), (8, 1), (9, 2),
        (10, 1), (11, 2), (12, 1), (13, 0), (13, 2), (14, 1), (15, 2),
        (16, 1), (17, 2), (18, 1), (19, 2), (21, 0),
    ]  # fmt: skip
    for value, sourceIndex in expected:
        assert m.hasNext()
        assert m.next() == value
        assert m.getLastSourceIndex() == sourceIndex
    assert not m.hasNext()
    with pytest.raises(NoSuchElementError):
        m.next()


def test_merge_ordering_law():
    rng = np.random.default_rng(42)
    for _ in range(25):
        k = int(rng.integers(1, 6))
        inputs = [
            np.sort(rng.integers(0, 50, size=int(rng.integers(0, 15)))).tolist()
            for _ in range(k)
        ]
        output = list(merge(*inputs))
        assert output == sorted(sum(inputs, []))


def test_tie_break_by_registration_order():
    key = Comparators.byKey(lambda item: item[0])
    a = [(1, "a"), (2, "a"), (2, "a"), (3, "a")]
    b = [(2, "b"), (2, "b"), (4, "b")]

    def run():
        m = merge(a, b, comparator=key)
        result = []
        while m.hasNext():
            value = m.next()
            result.append((value, m.getLastSourceIndex()))
        return result

    first = run()
    assert [tag for (_, tag), _ in first] == ["a", "a", "a", "b", "b", "a", "b"]
    assert [index for _, index in first] == [0, 0, 0, 1, 1, 0, 1]
    assert run() == first


def test_reversed_order():
    m = merge([9, 5, 1], [8, 5, 0], comparator=Comparators.reversedOrder())
    assert list(m) == [9, 8, 5, 5, 1, 0]


def test_remove_delegates_to_producing_source():
    a, b, c = [1, 4, 7], [2, 5, 8], [3, 6, 9]
    m = merge(a, b, c)
    while m.next() != 5:
        pass
    assert m.getLastSourceIndex() == 1
    m.remove()
    assert a == [1, 4, 7]
    assert b == [2, 8]
    assert c == [3, 6, 9]
    assert list(m) == [6, 7, 8, 9]


def test_remove_errors():
    a, b = [1, 2], [3]
    m = merge(a, b)
    with pytest.raises(IllegalStateError):
        m.remove()
    assert m.next() == 1
    m.remove()
    with pytest.raises(IllegalStateError):
        m.remove()
    assert a == [2]


def test_remove_after_refill_is_illegal():
    a, b = [1, 2], [3]
    m = merge(a, b)
    assert m.next() == 1
    # refills slot 0, advancing source 0 past the returned value
    assert m.hasNext()
    with pytest.raises(IllegalStateError):
        m.remove()
    assert a == [1, 2]
    assert m.next() == 2


def test_remove_unsupported_by_source():
    m = MergeCursor(
        Comparators.natural, [IteratorCursor([1, 3]), IteratorCursor([2])]
    )
    assert m.next() == 1
    with pytest.raises(UnsupportedOperationError):
        m.remove()
    assert list(m) == [2, 3]


def test_missing_comparator():
    m = MergeCursor(sources=[ListCursor([1]), ListCursor([2])])
    assert m.getComparator() is None
    with pytest.raises(MissingComparatorError) as excinfo:
        m.next()
    assert "setComparator()" in str(excinfo.value)
    assert "new MergeCursor" in str(excinfo.value)
    assert isinstance(excinfo.value, IllegalStateError)


def test_single_candidate_needs_no_comparator():
    m = MergeCursor(sources=[ListCursor([3, 1, 2])])
    assert list(m) == [3, 1, 2]

    m = MergeCursor(sources=[ListCursor([]), ListCursor([5, 6])])
    assert list(m) == [5, 6]


def test_set_comparator_before_traversal():
    m = MergeCursor(sources=[ListCursor([2, 4]), ListCursor([1, 3])])
    m.setComparator(Comparators.natural)
    assert m.getComparator() is Comparators.natural
    assert m.hasNext()
    with pytest.raises(IllegalStateError):
        m.setComparator(Comparators.reversedOrder())
    assert list(m) == [1, 2, 3, 4]


def test_sources_frozen_after_start():
    m = merge([1], [2])
    m.addSource(ListCursor([0]))
    m.setSource(0, ListCursor([5]))
    assert m.next() == 0
    assert m.getLastSourceIndex() == 2
    with pytest.raises(UnsupportedOperationError):
        m.addSource(ListCursor([3]))
    with pytest.raises(UnsupportedOperationError):
        m.setSource(0, ListCursor([3]))
    assert list(m) == [2, 5]


def test_configuration_errors():
    with pytest.raises(TypeError):
        MergeCursor("natural")
    with pytest.raises(ValueError):
        MergeCursor(Comparators.natural, [ListCursor([1]), None])
    with pytest.raises(TypeError):
        MergeCursor(Comparators.natural, [[1, 2]])

    m = merge([1])
    with pytest.raises(IndexError):
        m.setSource(3, ListCursor([1]))
    with pytest.raises(ValueError):
        m.addSource(None)


def test_last_source_index_before_next():
    m = merge([1])
    with pytest.raises(IllegalStateError):
        m.getLastSourceIndex()
    m.hasNext()
    with pytest.raises(IllegalStateError):
        m.getLastSourceIndex()


def test_empty_merge():
    m = MergeCursor(Comparators.natural)
    assert not m.hasNext()
    with pytest.raises(NoSuchElementError):
        m.next()


def test_sources_advanced_once_per_element(evens, odds):
    class CountingCursor(ListCursor):
        calls = 0

        def next(self):
            CountingCursor.calls += 1
            return super().next()

    m = MergeCursor(Comparators.natural, [CountingCursor(evens), CountingCursor(odds)])
    for _ in range(5):
        m.hasNext()
    assert CountingCursor.calls == 2
    assert len(list(m)) == 20
    assert CountingCursor.calls == 20
    assert m.exhausted.all()


def test_get_sources_is_read_only():
    a, b = ListCursor([1]), ListCursor([2])
    m = MergeCursor(Comparators.natural, [a, b])
    sources = m.getSources()
    assert sources == (a, b)
    assert isinstance(sources, tuple)


def test_filter_over_merge_removes_from_source():
    a, b = [1, 4, 7], [2, 5, 8]
    f = FilterIterator(merge(a, b), lambda x: x % 2 == 0)
    assert f.next() == 2
    assert f.next() == 4
    f.remove()
    assert a == [1, 7]
    assert b == [2, 5, 8]
    assert list(f) == [8]


def test_remove_through_filtering_source():
    items = [0, 3, 4]
    threes = FilteringCursor(ListCursor(items), lambda x: x % 3 == 0)
    m = MergeCursor(Comparators.natural, [threes, ListCursor([1, 2])])
    assert m.next() == 0
    m.remove()
    assert items == [3, 4]
    assert list(m) == [1, 2, 3]
    # draining consulted the filter again after 3 was returned
    with pytest.raises(IllegalStateError):
        m.remove()
    assert items == [3, 4]
