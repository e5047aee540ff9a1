#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from abc import ABC, abstractmethod

from pycursor.src.Object import Object
from pycursor.src.CursorErrors import NoSuchElementError, UnsupportedOperationError


class Cursor(Object, ABC):
    """
    Forward traversal handle over an ordered, possibly mutable, sequence.

    Subclasses implement hasNext() and next(); remove() is optional and
    raises UnsupportedOperationError unless overridden.

    Every cursor is also a Python iterator, so it can be consumed by a for
    loop, list() or any other adapter expecting an iterator.

    A cursor assumes exclusive use of whatever it wraps. Mutating the
    underlying sequence other than through the cursor's own remove()/set()/add()
    leaves the cursor in an undefined state.
    """

    @abstractmethod
    def hasNext(self) -> bool:
        """Return True if next() would return an element."""

    @abstractmethod
    def next(self):
        """Return the next element, raising NoSuchElementError when exhausted."""

    def isBidirectional(self) -> bool:
        """Return True if hasPrevious()/previous() are supported."""
        return False

    def remove(self):
        """Remove the last element returned from the underlying sequence."""
        raise UnsupportedOperationError(
            f"{self.getClassName()}.remove() is not supported"
        )

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return self.next()
        except NoSuchElementError:
            raise StopIteration from None


class BidirectionalCursor(Cursor):
    """Cursor that can also walk backward and optionally replace or insert elements."""

    def isBidirectional(self):
        return True

    @abstractmethod
    def hasPrevious(self) -> bool:
        """Return True if previous() would return an element."""

    @abstractmethod
    def previous(self):
        """Return the previous element, raising NoSuchElementError at the start."""

    def set(self, value):
        """Replace the last element returned by next() or previous()."""
        raise UnsupportedOperationError(f"{self.getClassName()}.set() is not supported")

    def add(self, value):
        """Insert an element at the current position."""
        raise UnsupportedOperationError(f"{self.getClassName()}.add() is not supported")
