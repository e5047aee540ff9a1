#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from pycursor.src.Cursor import Cursor
from pycursor.src.CursorErrors import IllegalStateError, NoSuchElementError
from pycursor.src.CursorLogging import CURSOR_LOGGER

_NOTHING = object()


@CURSOR_LOGGER
class FilterIterator(Cursor):
    """
    Forward-only cursor that skips source elements not satisfying a predicate.

    Works over any Cursor, including ones that cannot walk backward such as
    MergeCursor. remove() is forwarded to the source and is only legal while
    no hasNext() call has consulted the source since the last next().
    """

    def __init__(self, source, predicate):
        """
        Initialize with a source cursor and predicate.

        Args:
            source: Cursor to filter
            predicate: Predicate function that returns True for elements to include
        """
        super().__init__()
        if source is None:
            raise ValueError("Source cursor must not be None")
        if predicate is None:
            raise ValueError("Predicate must not be None")
        if not callable(predicate):
            raise TypeError("Predicate must be callable")

        self.source = source
        self.predicate = predicate
        self.nextObject = _NOTHING
        self.canRemove = False

    def getSource(self):
        return self.source

    def getPredicate(self):
        return self.predicate

    def _advanceToValid(self):
        """Advance the source to the next element satisfying the predicate."""
        self.canRemove = False
        while self.source.hasNext():
            value = self.source.next()
            if self.predicate(value):
                self.nextObject = value
                return True
        return False

    def hasNext(self):
        if self.nextObject is not _NOTHING:
            return True
        return self._advanceToValid()

    def next(self):
        if self.nextObject is _NOTHING and not self._advanceToValid():
            raise NoSuchElementError("No further element satisfies the predicate")
        value = self.nextObject
        self.nextObject = _NOTHING
        self.canRemove = True
        return value

    def remove(self):
        if not self.canRemove:
            raise IllegalStateError(
                "remove() needs a preceding next() and no hasNext() scan since"
            )
        self.source.remove()
        self.debug(f"Forwarded remove() to {self.source.getClassName()}")
        self.canRemove = False

    def toString(self):
        return f"FilterIterator over {self.source.toString()}"
