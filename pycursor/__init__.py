"""
PyCursor - cursor adapters for filtering and merging sequences
"""

__version__ = "0.1.0"

import logging

logger = logging.getLogger("PyCursor")

# Contract and errors
from pycursor.src.Cursor import Cursor, BidirectionalCursor
from pycursor.src.CursorErrors import (
    CursorError,
    NoSuchElementError,
    IllegalStateError,
    UnsupportedOperationError,
    MissingComparatorError,
)
from pycursor.src.CursorLogging import setupLogging

# Cursors
from pycursor.src.ListCursor import ListCursor
from pycursor.src.IteratorCursor import IteratorCursor
from pycursor.src.FilteringCursor import FilteringCursor, Direction
from pycursor.src.FilterIterator import FilterIterator
from pycursor.src.MergeCursor import MergeCursor

# Helpers
from pycursor.src import Comparators, Predicates
from pycursor.src.CursorUtils import CursorUtils


# Export common symbols
__all__ = [
    "Cursor",
    "BidirectionalCursor",
    "CursorError",
    "NoSuchElementError",
    "IllegalStateError",
    "UnsupportedOperationError",
    "MissingComparatorError",
    "setupLogging",
    "ListCursor",
    "IteratorCursor",
    "FilteringCursor",
    "Direction",
    "FilterIterator",
    "MergeCursor",
    "Comparators",
    "Predicates",
    "CursorUtils",
]


def version():
    """Return PyCursor version."""
    return __version__
