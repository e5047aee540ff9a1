#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from pycursor.src.Cursor import Cursor
from pycursor.src.ListCursor import ListCursor
from pycursor.src.IteratorCursor import IteratorCursor
from pycursor.src.FilteringCursor import FilteringCursor
from pycursor.src.FilterIterator import FilterIterator
from pycursor.src.MergeCursor import MergeCursor


class CursorUtils:
    """Factory helpers for building cursors"""

    @staticmethod
    def asCursor(obj):
        """Wrap a list or iterable in a cursor; cursors are returned unchanged"""
        if obj is None:
            raise ValueError("Cannot make a cursor from None")
        if isinstance(obj, Cursor):
            return obj
        if isinstance(obj, list):
            return ListCursor(obj)
        return IteratorCursor(obj)

    @staticmethod
    def filtered(obj, predicate):
        """Filter a cursor, keeping backward traversal when the source supports it"""
        cursor = CursorUtils.asCursor(obj)
        if cursor.isBidirectional():
            return FilteringCursor(cursor, predicate)
        return FilterIterator(cursor, predicate)

    @staticmethod
    def collated(comparator, *sources):
        """Merge sorted sources, given in tie-break order"""
        return MergeCursor(comparator, [CursorUtils.asCursor(s) for s in sources])

    @staticmethod
    def toList(cursor):
        """Drain the remaining elements of a cursor into a list"""
        result = []
        while cursor.hasNext():
            result.append(cursor.next())
        return result
