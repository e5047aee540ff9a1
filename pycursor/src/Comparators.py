#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Comparison functions for MergeCursor.

A comparator takes two elements and returns a negative number, zero or a
positive number as the first is less than, equal to or greater than the second.
"""


def natural(a, b):
    """Compare by the elements' own ordering."""
    return (a > b) - (a < b)


def reversedOrder(comparator=None):
    """Return a comparator with the opposite order of the given one (natural by default)."""
    base = natural if comparator is None else comparator

    def compare(a, b):
        return base(b, a)

    return compare


def byKey(key, comparator=None):
    """Return a comparator ordering elements by key(element)."""
    if key is None:
        raise ValueError("Key function must not be None")
    base = natural if comparator is None else comparator

    def compare(a, b):
        return base(key(a), key(b))

    return compare
