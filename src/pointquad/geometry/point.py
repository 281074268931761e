#!/usr/bin/env python3
"""
Point Module

Two-dimensional points over an arbitrary numeric coordinate type, plus the
capability protocol for items that know their own position.
"""

import numbers
from typing import Any, NamedTuple, Protocol, runtime_checkable

import numpy as np
from shapely.geometry import Point as ShapelyPoint


class Point(NamedTuple):
    """An immutable (x, y) pair. Compares equal to the plain tuple (x, y)."""
    x: Any
    y: Any

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@runtime_checkable
class AsPoint(Protocol):
    """Items implementing this can be inserted with ``QuadTree.insert``."""

    def as_point(self) -> Point:
        ...


def coerce_point(value) -> Point:
    """
    Convert any supported point-like value to a Point.

    Accepts a Point, a 2-sequence (tuple, list, numpy array), a shapely
    Point, or an object implementing AsPoint.
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, ShapelyPoint):
        return Point(value.x, value.y)
    if isinstance(value, AsPoint):
        return coerce_point(value.as_point())
    if isinstance(value, np.ndarray):
        if value.shape != (2,):
            raise ValueError(f"Expected an array of shape (2,), got {value.shape}")
        return Point(value[0].item(), value[1].item())
    try:
        x, y = value
    except (TypeError, ValueError):
        raise TypeError(f"Cannot interpret {value!r} as a point") from None
    return Point(x, y)


def halve(value):
    """Half of a coordinate extent; integral coordinates are floor-divided."""
    if isinstance(value, numbers.Integral):
        return value // 2
    return value / 2
