#!/usr/bin/env python3
"""
Tests for Boundary geometry.
"""

import os
import sys

import pytest
from shapely.geometry import LineString, Polygon

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from pointquad.geometry.boundary import Area, Boundary
from pointquad.geometry.point import Point


@pytest.mark.parametrize("x1,y1,x2,y2", [
    (1, 1, 2, 2),  # simple case
    (2, 1, 1, 2),  # swap x
    (1, 2, 2, 1),  # swap y
    (2, 2, 1, 1),  # swap both
])
def test_between_points_normalizes(x1, y1, x2, y2):
    assert Boundary.between_points((x1, y1), (x2, y2)) == Boundary.new((1, 1), 1, 1)


def test_direct_construction_normalizes():
    boundary = Boundary((10, -5), (0, 5))
    assert boundary.p1 == Point(0, -5)
    assert boundary.p2 == Point(10, 5)
    assert isinstance(boundary.p1, Point)


def test_new_uses_origin_and_extents():
    boundary = Boundary.new((-10, -10), 20, 20)
    assert boundary.p1 == (-10, -10)
    assert boundary.p2 == (10, 10)
    assert boundary.width == 20
    assert boundary.height == 20
    assert boundary.area == 400
    assert boundary.center == (0, 0)


def test_equality_and_hash():
    a = Boundary.between_points((0, 0), (3, 4))
    b = Boundary.new((0, 0), 3, 4)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Boundary.new((0, 0), 3, 5)


def test_str_format():
    assert str(Boundary.between_points((1, 2), (2, 3))) == "(1,2),(2,3)"


def test_is_immutable():
    boundary = Boundary.new((0, 0), 1, 1)
    with pytest.raises(AttributeError):
        boundary.p1 = Point(5, 5)


@pytest.mark.parametrize("x,y,expected", [
    (3, 3, True),   # inside
    (2, 2, True),   # on border
    (4, 4, True),   # far corner
    (1, 3, False),  # left
    (5, 3, False),  # right
    (3, 1, False),  # above
    (3, 5, False),  # below
])
def test_contains(x, y, expected):
    boundary = Boundary.new((2, 2), 2, 2)
    assert boundary.contains(Point(x, y)) is expected


@pytest.mark.parametrize("x,y,width,height,expected", [
    (2, 2, 1, 1, True),     # b inside a
    (0, 0, 6, 6, True),     # a inside b
    (0, 2, 3, 1, True),     # left overlap
    (4, 2, 3, 1, True),     # right overlap
    (2, 0, 1, 3, True),     # top overlap
    (2, 4, 1, 3, True),     # bottom overlap
    (-1, 2, 1, 1, False),   # b left of a
    (6, 2, 1, 1, False),    # b right of a
    (2, -1, 1, 1, False),   # b above a
    (2, 6, 1, 1, False),    # b under a
    (0, 2, 1, 1, True),     # on left border
    (5, 2, 1, 1, True),     # on right border
    (2, 0, 1, 1, True),     # on top border
    (2, 5, 1, 1, True),     # on bottom border
])
def test_intersects(x, y, width, height, expected):
    a = Boundary.new((1, 1), 4, 4)
    b = Boundary.new((x, y), width, height)
    assert a.intersects(b) is expected
    assert b.intersects(a) is expected


@pytest.mark.parametrize("x,y,width,height,expected", [
    (2, 2, 1, 1, True),    # strictly inside
    (1, 1, 4, 4, True),    # identical
    (1, 1, 4, 1, True),    # shares edges
    (0, 0, 6, 6, False),   # larger
    (4, 4, 2, 2, False),   # overlapping corner
    (7, 7, 1, 1, False),   # disjoint
])
def test_encloses(x, y, width, height, expected):
    a = Boundary.new((1, 1), 4, 4)
    assert a.encloses(Boundary.new((x, y), width, height)) is expected


def test_split_even():
    split = Boundary.new((0, 0), 10, 10).split()
    assert split == [
        Boundary.new((0, 0), 5, 5),
        Boundary.new((5, 0), 5, 5),
        Boundary.new((0, 5), 5, 5),
        Boundary.new((5, 5), 5, 5),
    ]


def test_split_odd_integer_extent_goes_east_and_south():
    nw, ne, sw, se = Boundary.new((0, 0), 5, 7).split()
    assert nw == Boundary.between_points((0, 0), (2, 3))
    assert ne == Boundary.between_points((2, 0), (5, 3))
    assert sw == Boundary.between_points((0, 3), (2, 7))
    assert se == Boundary.between_points((2, 3), (5, 7))
    assert all(isinstance(v, int) for q in (nw, ne, sw, se) for v in (*q.p1, *q.p2))


def test_split_float():
    nw, ne, sw, se = Boundary.new((0.0, 0.0), 5.0, 3.0).split()
    assert nw.p2 == (2.5, 1.5)
    assert se.p1 == (2.5, 1.5)
    assert se.p2 == (5.0, 3.0)


@pytest.mark.parametrize("boundary", [
    Boundary.new((0, 0), 10, 10),
    Boundary.new((0, 0), 7, 3),
    Boundary.new((-5, -9), 11, 1),
    Boundary.new((3, 3), 1, 1),
    Boundary.new((0, 0), 0, 4),
])
def test_split_tiles_parent_exactly(boundary):
    quadrants = boundary.split()

    # Areas add up, so interiors cannot overlap
    assert sum(q.area for q in quadrants) == boundary.area

    # Every lattice point of the parent is covered, nothing outside is
    for x in range(boundary.p1.x - 1, boundary.p2.x + 2):
        for y in range(boundary.p1.y - 1, boundary.p2.y + 2):
            covered = any(q.contains(Point(x, y)) for q in quadrants)
            assert covered is boundary.contains(Point(x, y))


def test_split_corners_reach_parent_corners():
    boundary = Boundary.new((1, 2), 9, 13)
    nw, ne, sw, se = boundary.split()
    assert nw.p1 == boundary.p1
    assert se.p2 == boundary.p2
    assert ne.p2.x == boundary.p2.x and ne.p1.y == boundary.p1.y
    assert sw.p1.x == boundary.p1.x and sw.p2.y == boundary.p2.y


def test_from_bounds():
    assert Boundary.from_bounds((0, 1, 2, 3)) == Boundary.between_points((0, 1), (2, 3))
    with pytest.raises(ValueError):
        Boundary.from_bounds((0, 1, 2))


def test_shapely_conversion():
    boundary = Boundary.new((0.0, 0.0), 4.0, 2.0)
    polygon = boundary.to_shapely()
    assert polygon.area == pytest.approx(8.0)
    assert Boundary.from_shapely(polygon) == boundary

    line = LineString([(5, 1), (1, 7)])
    assert Boundary.from_shapely(line) == Boundary.between_points((1, 1), (5, 7))

    with pytest.raises(ValueError):
        Boundary.from_shapely(Polygon())


def test_boundary_is_an_area():
    assert isinstance(Boundary.new((0, 0), 1, 1), Area)
