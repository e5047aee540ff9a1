#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Predicate combinators for filtering cursors."""


def always(value):
    return True


def never(value):
    return False


def isNotNone(value):
    return value is not None


def negate(predicate):
    """Return a predicate true where the given one is false."""
    if predicate is None:
        raise ValueError("Predicate must not be None")
    return lambda value: not predicate(value)


def allOf(*predicates):
    """Return a predicate true when every given predicate is true."""
    if any(p is None for p in predicates):
        raise ValueError("Predicates must not be None")
    return lambda value: all(p(value) for p in predicates)


def anyOf(*predicates):
    """Return a predicate true when at least one given predicate is true."""
    if any(p is None for p in predicates):
        raise ValueError("Predicates must not be None")
    return lambda value: any(p(value) for p in predicates)
