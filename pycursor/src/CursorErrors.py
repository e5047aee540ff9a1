#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Errors raised by cursors.

All of them signal programmer errors. Nothing here is transient, so callers
never retry; they fix the calling sequence instead.
"""


class CursorError(Exception):
    """Base class for all cursor errors."""


class NoSuchElementError(CursorError, LookupError):
    """Raised by next()/previous() when the cursor is exhausted in that direction."""


class IllegalStateError(CursorError, RuntimeError):
    """Raised when an operation is called at a point where it is not allowed."""


class UnsupportedOperationError(CursorError, NotImplementedError):
    """Raised when a cursor does not support an operation at all."""


class MissingComparatorError(IllegalStateError):
    """Raised when a merge has to compare elements but no comparator is set."""

    def __init__(self, message=None):
        if message is None:
            message = (
                "MergeCursor has no comparator and the merge has already started; "
                "build a new MergeCursor passing the comparator argument, or call "
                "setComparator() before the first hasNext()/next()"
            )
        super().__init__(message)
