#!/usr/bin/env python3
# -*- coding: utf-8 -*-


class Object:
    """Base class providing common object functionality."""

    def __init__(self):
        pass

    def getClassName(self) -> str:
        """Returns the class name of this instance."""
        return self.__class__.__name__

    def toString(self) -> str:
        """Returns string representation, can be overridden by subclasses."""
        return self.getClassName()

    def __str__(self):
        return self.toString()

    def __repr__(self):
        return f"<{self.toString()}>"
