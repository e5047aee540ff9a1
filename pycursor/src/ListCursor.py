#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from pycursor.src.Cursor import BidirectionalCursor
from pycursor.src.CursorErrors import (
    IllegalStateError,
    NoSuchElementError,
    UnsupportedOperationError,
)


class ListCursor(BidirectionalCursor):
    """Bidirectional cursor over a Python list, writing mutations through to it."""

    def __init__(self, items, forwardOnly=False):
        """
        Initialize the cursor before the first element of the list.

        Args:
            items: List to traverse; remove/set/add modify it in place
            forwardOnly: When True, backward traversal is not supported
        """
        super().__init__()
        if items is None:
            raise ValueError("List must not be None")
        self.items = items
        self.forwardOnly = forwardOnly
        self.cursor = 0  # Index of the element next() would return
        self.lastRet = -1  # Index of the last returned element, -1 if none

    def hasNext(self):
        return self.cursor < len(self.items)

    def next(self):
        if self.cursor >= len(self.items):
            raise NoSuchElementError("ListCursor is at the end of the list")
        self.lastRet = self.cursor
        self.cursor += 1
        return self.items[self.lastRet]

    def hasPrevious(self):
        self._checkBackward()
        return self.cursor > 0

    def previous(self):
        self._checkBackward()
        if self.cursor <= 0:
            raise NoSuchElementError("ListCursor is at the start of the list")
        self.cursor -= 1
        self.lastRet = self.cursor
        return self.items[self.lastRet]

    def remove(self):
        if self.lastRet < 0:
            raise IllegalStateError(
                "remove() needs a preceding next() or previous() call"
            )
        del self.items[self.lastRet]
        if self.lastRet < self.cursor:
            self.cursor -= 1
        self.lastRet = -1

    def set(self, value):
        if self.lastRet < 0:
            raise IllegalStateError("set() needs a preceding next() or previous() call")
        self.items[self.lastRet] = value

    def add(self, value):
        self.items.insert(self.cursor, value)
        self.cursor += 1
        self.lastRet = -1

    def isBidirectional(self):
        return not self.forwardOnly

    def _checkBackward(self):
        if self.forwardOnly:
            raise UnsupportedOperationError(
                "ListCursor was created forward-only; backward traversal is not supported"
            )

    def toString(self):
        return f"ListCursor at {self.cursor} of {len(self.items)}"
