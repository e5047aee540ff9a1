#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from pycursor.src.Cursor import Cursor
from pycursor.src.CursorErrors import NoSuchElementError

_NOTHING = object()


class IteratorCursor(Cursor):
    """Forward-only cursor over any Python iterable, with one element of lookahead."""

    def __init__(self, iterable):
        super().__init__()
        if iterable is None:
            raise ValueError("Iterable must not be None")
        self.iterator = iter(iterable)
        self.lookahead = _NOTHING

    def hasNext(self):
        if self.lookahead is _NOTHING:
            self.lookahead = next(self.iterator, _NOTHING)
        return self.lookahead is not _NOTHING

    def next(self):
        if not self.hasNext():
            raise NoSuchElementError("Underlying iterator is exhausted")
        value = self.lookahead
        self.lookahead = _NOTHING
        return value
