#!/usr/bin/env python3
"""
Quadtree Errors

Checked insertion is the only operation in the tree that can fail at runtime.
"""


class QuadTreeError(Exception):
    """Base class for quadtree errors."""


class OutOfBoundsError(QuadTreeError, ValueError):
    """A point was rejected because it lies outside the tree's boundary."""

    def __init__(self, boundary, point):
        self.boundary = boundary
        self.point = point
        super().__init__(f"point {point} is outside of area {boundary}")

    def __eq__(self, other):
        if not isinstance(other, OutOfBoundsError):
            return NotImplemented
        return self.boundary == other.boundary and self.point == other.point

    def __hash__(self):
        return hash((self.boundary, self.point))

    def __reduce__(self):
        return (type(self), (self.boundary, self.point))
