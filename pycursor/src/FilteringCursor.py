#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from enum import Enum

from pycursor.src.Cursor import BidirectionalCursor
from pycursor.src.CursorErrors import (
    IllegalStateError,
    NoSuchElementError,
    UnsupportedOperationError,
)
from pycursor.src.CursorLogging import CURSOR_LOGGER

# Marks an empty lookahead/lookbehind slot; None is a legal element
_NOTHING = object()


class Direction(Enum):
    """Direction of the scan that produced the last returned element."""

    FORWARD = "forward"
    BACKWARD = "backward"


@CURSOR_LOGGER
class FilteringCursor(BidirectionalCursor):
    """
    Bidirectional cursor exposing only the elements of a source cursor that
    satisfy a predicate.

    The filtering cursor sits between two elements of the filtered
    subsequence, just like any list cursor. To answer hasNext()/hasPrevious()
    it has to move the source until a match is found; the match is kept in a
    single-slot cache (pendingForward or pendingBackward) until delivered.
    At most one of the two caches is populated at any time: each describes
    where the source currently stands, and filling one means the source was
    moved away from the position the other one described.

    remove() and set() are forwarded to the source, which acts on the element
    it returned last. A hasNext()/hasPrevious() that has to consult the source
    makes them illegal until the next delivery, even when the source turns out
    to be exhausted: a source that is itself an adapter may have moved its own
    source while answering.

    The source must not be advanced by anyone else while this cursor is in
    use, and the predicate must give the same answer for an element for the
    whole traversal.
    """

    def __init__(self, source, predicate):
        """
        Initialize the filter.

        Args:
            source: BidirectionalCursor to filter, positioned where filtering starts
            predicate: Callable returning True for elements to expose
        """
        super().__init__()
        if source is None:
            raise ValueError("Source cursor must not be None")
        if predicate is None:
            raise ValueError("Predicate must not be None")
        if not (isinstance(source, BidirectionalCursor) and source.isBidirectional()):
            raise TypeError(
                f"FilteringCursor needs a cursor that can walk backward, got {source!r}"
            )
        if not callable(predicate):
            raise TypeError("Predicate must be callable")

        self.source = source
        self.predicate = predicate

        self.pendingForward = _NOTHING
        self.pendingBackward = _NOTHING
        self.lastReturned = None  # Direction of the last delivery still backed by the source
        self.started = False

    # Configuration
    def getSource(self):
        return self.source

    def getPredicate(self):
        return self.predicate

    def setPredicate(self, predicate):
        """Replace the predicate; only allowed before traversal begins."""
        if self.started:
            raise IllegalStateError(
                "Cannot change the predicate after traversal has begun"
            )
        if predicate is None:
            raise ValueError("Predicate must not be None")
        if not callable(predicate):
            raise TypeError("Predicate must be callable")
        self.predicate = predicate

    # Traversal
    def hasNext(self):
        self.started = True
        if self.pendingForward is not _NOTHING:
            return True
        return self._setNextObject()

    def next(self):
        self.started = True
        if self.pendingForward is _NOTHING and not self._setNextObject():
            raise NoSuchElementError("No further element satisfies the predicate")
        value = self.pendingForward
        self.pendingForward = _NOTHING
        self.lastReturned = Direction.FORWARD
        return value

    def hasPrevious(self):
        self.started = True
        if self.pendingBackward is not _NOTHING:
            return True
        return self._setPreviousObject()

    def previous(self):
        self.started = True
        if self.pendingBackward is _NOTHING and not self._setPreviousObject():
            raise NoSuchElementError("No earlier element satisfies the predicate")
        value = self.pendingBackward
        self.pendingBackward = _NOTHING
        self.lastReturned = Direction.BACKWARD
        return value

    # Mutation
    def remove(self):
        self._checkModifiable("remove")
        self.source.remove()
        self.debug(f"Removed element returned by {self.lastReturned.value} scan")
        self.lastReturned = None

    def set(self, value):
        self._checkModifiable("set")
        self.source.set(value)

    def add(self, value):
        raise UnsupportedOperationError("FilteringCursor.add() is not supported")

    def _checkModifiable(self, operation):
        if self.lastReturned is None:
            raise IllegalStateError(
                f"{operation}() needs a preceding next() or previous() with no "
                f"hasNext()/hasPrevious() consulting the source since"
            )

    # Scanning
    def _setNextObject(self):
        """Locate the next match and cache it in pendingForward."""
        if self.pendingBackward is not _NOTHING:
            # Source sits just before the cached element, which lies behind
            # our logical position: step over it before scanning on
            self.trace("Direction crossing: backward -> forward")
            self.pendingBackward = _NOTHING
            if not self._scanForward():
                return False
            self.pendingForward = _NOTHING
        return self._scanForward()

    def _setPreviousObject(self):
        """Locate the previous match and cache it in pendingBackward."""
        if self.pendingForward is not _NOTHING:
            self.trace("Direction crossing: forward -> backward")
            self.pendingForward = _NOTHING
            if not self._scanBackward():
                return False
            self.pendingBackward = _NOTHING
        return self._scanBackward()

    def _scanForward(self):
        source = self.source
        self.lastReturned = None
        while source.hasNext():
            value = source.next()
            if self.predicate(value):
                self.pendingForward = value
                return True
        return False

    def _scanBackward(self):
        source = self.source
        self.lastReturned = None
        while source.hasPrevious():
            value = source.previous()
            if self.predicate(value):
                self.pendingBackward = value
                return True
        return False

    def toString(self):
        return f"FilteringCursor over {self.source.toString()}"
