#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np

from pycursor.src.Cursor import Cursor
from pycursor.src.CursorErrors import (
    IllegalStateError,
    MissingComparatorError,
    NoSuchElementError,
    UnsupportedOperationError,
)
from pycursor.src.CursorLogging import CURSOR_LOGGER

_NOTHING = object()


@CURSOR_LOGGER
class MergeCursor(Cursor):
    """
    Merges several sorted cursors into one sorted cursor (k-way collation).

    Each source must already be sorted by the comparator. Every source gets
    a one-element slot holding the value it will contribute next; next()
    returns the smallest slot value and empties that slot. Equal values are
    returned in source registration order, lowest index first.

    The comparator is a function (a, b) -> int returning a negative number,
    zero or a positive number. It may be left unset while configuring, but
    comparing two slots without one raises MissingComparatorError. Sources
    and comparator are frozen once traversal starts.
    """

    def __init__(self, comparator=None, sources=None):
        """
        Initialize the merge.

        Args:
            comparator: Comparison function, or None to set it later
            sources: Iterable of sorted Cursors, in tie-break order
        """
        super().__init__()
        if comparator is not None and not callable(comparator):
            raise TypeError("Comparator must be callable")

        self.comparator = comparator
        self.sources = []
        self.lastSourceIndex = None
        self.canRemove = False

        # Slot state, allocated by _start()
        self.values = None
        self.valueSet = None
        self.exhausted = None

        if sources is not None:
            for source in sources:
                self.addSource(source)

    # Configuration
    def addSource(self, source):
        """Append a sorted source; it ranks after all sources added before it."""
        if self.isStarted():
            raise UnsupportedOperationError(
                "Cannot add a source after hasNext() or next() has been called"
            )
        self.sources.append(self._checkSource(source))

    def setSource(self, index, source):
        """Replace the source at a given position."""
        if self.isStarted():
            raise UnsupportedOperationError(
                "Cannot replace a source after hasNext() or next() has been called"
            )
        if index < 0 or index >= len(self.sources):
            raise IndexError(
                f"MergeCursor source index {index} out of range (0-{len(self.sources)-1})"
            )
        self.sources[index] = self._checkSource(source)

    def getSources(self):
        return tuple(self.sources)

    def setComparator(self, comparator):
        """Set the comparison function; only allowed before traversal begins."""
        if self.isStarted():
            raise IllegalStateError(
                "Cannot change the comparator after hasNext() or next() has been called"
            )
        if comparator is not None and not callable(comparator):
            raise TypeError("Comparator must be callable")
        self.comparator = comparator

    def getComparator(self):
        return self.comparator

    def isStarted(self):
        return self.values is not None

    @staticmethod
    def _checkSource(source):
        if source is None:
            raise ValueError("Source cursor must not be None")
        if not isinstance(source, Cursor):
            raise TypeError(f"Expected a Cursor, got {type(source).__name__}")
        return source

    # Traversal
    def hasNext(self):
        self._start()
        for i in np.flatnonzero(~self.valueSet & ~self.exhausted):
            self._fill(int(i))
        return bool(self.valueSet.any())

    def next(self):
        if not self.hasNext():
            raise NoSuchElementError("All merged sources are exhausted")

        leastIndex = self._least()
        value = self.values[leastIndex]
        self._clear(leastIndex)
        self.lastSourceIndex = leastIndex
        self.canRemove = True
        return value

    def remove(self):
        """Remove the last returned element from the source that produced it."""
        if self.lastSourceIndex is None:
            raise IllegalStateError("No value can be removed before next() is called")
        if not self.canRemove:
            raise IllegalStateError(
                f"Source {self.lastSourceIndex} no longer stands on the last returned "
                f"value; remove() must directly follow next()"
            )
        self.sources[self.lastSourceIndex].remove()
        self.debug(f"Removed last value from source {self.lastSourceIndex}")
        self.canRemove = False

    def getLastSourceIndex(self):
        """Index of the source that produced the value last returned by next()."""
        if self.lastSourceIndex is None:
            raise IllegalStateError("No value has been returned yet")
        return self.lastSourceIndex

    # Slot handling
    def _start(self):
        if self.values is not None:
            return
        count = len(self.sources)
        self.values = [_NOTHING] * count
        self.valueSet = np.zeros(count, dtype=bool)
        self.exhausted = np.zeros(count, dtype=bool)
        self.debug(f"Merge started over {count} sources")

    def _fill(self, i):
        """Pull the next value of source i into its slot."""
        source = self.sources[i]
        if i == self.lastSourceIndex:
            self.canRemove = False
        if source.hasNext():
            self.values[i] = source.next()
            self.valueSet[i] = True
            return True
        self.values[i] = _NOTHING
        self.valueSet[i] = False
        self.exhausted[i] = True
        self.debug(f"Source {i} exhausted")
        return False

    def _clear(self, i):
        self.values[i] = _NOTHING
        self.valueSet[i] = False

    def _least(self):
        leastIndex = -1
        leastValue = None
        for i in np.flatnonzero(self.valueSet):
            i = int(i)
            if leastIndex == -1:
                leastIndex = i
                leastValue = self.values[i]
                continue
            if self.comparator is None:
                raise MissingComparatorError()
            value = self.values[i]
            if self.comparator(value, leastValue) < 0:
                leastIndex = i
                leastValue = value
        return leastIndex

    def toString(self):
        return f"MergeCursor over {len(self.sources)} sources"
