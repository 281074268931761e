#!/usr/bin/env python3
"""
Tests for Point and point coercion.
"""

import os
import sys

import numpy as np
import pytest
from shapely.geometry import Point as ShapelyPoint

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from pointquad.geometry.point import AsPoint, Point, coerce_point, halve


class Marker:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def as_point(self):
        return Point(self.x, self.y)


@pytest.mark.parametrize("x,y,expected", [
    (10, 10, "(10,10)"),
    (10.0, 10.0, "(10.0,10.0)"),
    (-1, 2, "(-1,2)"),
])
def test_str(x, y, expected):
    assert str(Point(x, y)) == expected


def test_point_is_a_tuple():
    point = Point(1, 2)
    assert point == (1, 2)
    assert point.x == 1 and point.y == 2
    x, y = point
    assert (x, y) == (1, 2)
    assert hash(point) == hash((1, 2))


@pytest.mark.parametrize("value", [
    (3, 4),
    [3, 4],
    Point(3, 4),
    np.array([3, 4]),
    Marker(3, 4),
])
def test_coerce_point(value):
    point = coerce_point(value)
    assert isinstance(point, Point)
    assert point == (3, 4)


def test_coerce_numpy_gives_python_scalars():
    point = coerce_point(np.array([3, 4], dtype=np.int32))
    assert type(point.x) is int
    assert str(point) == "(3,4)"


def test_coerce_shapely_point():
    assert coerce_point(ShapelyPoint(1.5, 2.5)) == (1.5, 2.5)


@pytest.mark.parametrize("value", [5, (1, 2, 3), None])
def test_coerce_rejects_non_points(value):
    with pytest.raises(TypeError):
        coerce_point(value)


def test_coerce_rejects_wrong_array_shape():
    with pytest.raises(ValueError):
        coerce_point(np.array([1, 2, 3]))


def test_as_point_protocol():
    assert isinstance(Marker(0, 0), AsPoint)
    assert not isinstance((0, 0), AsPoint)


@pytest.mark.parametrize("value,expected", [
    (10, 5),
    (7, 3),
    (np.int64(9), 4),
    (5.0, 2.5),
    (np.float32(3.0), 1.5),
])
def test_halve(value, expected):
    assert halve(value) == expected
