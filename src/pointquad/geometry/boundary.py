#!/usr/bin/env python3
"""
Boundary Module

Axis-aligned rectangles used both as the spatial extent of a tree node and as
a query region. All tests are closed: points and edges on the border count as
inside.
"""

from dataclasses import dataclass
from typing import List, Protocol, Sequence, runtime_checkable

from shapely.geometry import box

from .point import Point, coerce_point, halve


@runtime_checkable
class Area(Protocol):
    """
    Anything a query can be run against.

    The traversal engine only needs these three tests; implementations must
    agree with each other (``encloses(b)`` implies ``intersects(b)`` and
    ``contains`` for every point of ``b``).
    """

    def contains(self, point: Point) -> bool:
        ...

    def intersects(self, boundary: 'Boundary') -> bool:
        ...

    def encloses(self, boundary: 'Boundary') -> bool:
        ...


@dataclass(frozen=True)
class Boundary:
    """
    Rectangle between two corners.

    ``p1`` holds the minimum x and y, ``p2`` the maximum x and y. Corners
    given in any order are normalized on construction.
    """
    p1: Point
    p2: Point

    def __post_init__(self):
        """Normalize corner order."""
        p1 = coerce_point(self.p1)
        p2 = coerce_point(self.p2)
        x1, x2 = (p2.x, p1.x) if p1.x > p2.x else (p1.x, p2.x)
        y1, y2 = (p2.y, p1.y) if p1.y > p2.y else (p1.y, p2.y)
        # Only exception to immutability - during initialization only
        object.__setattr__(self, 'p1', Point(x1, y1))
        object.__setattr__(self, 'p2', Point(x2, y2))

    @classmethod
    def new(cls, origin, width, height) -> 'Boundary':
        """
        Create a boundary from its min corner and extents.

        Extents are expected to be non-negative and are not checked.
        """
        origin = coerce_point(origin)
        return cls._unchecked(origin, Point(origin.x + width, origin.y + height))

    @classmethod
    def between_points(cls, p1, p2) -> 'Boundary':
        """Create the boundary spanned by two arbitrary corners."""
        return cls(p1, p2)

    @classmethod
    def from_bounds(cls, bounds: Sequence) -> 'Boundary':
        """Create a boundary from a (minx, miny, maxx, maxy) sequence."""
        if len(bounds) != 4:
            raise ValueError(f"bounds must have four values (minx, miny, maxx, maxy), got {bounds!r}")
        minx, miny, maxx, maxy = bounds
        return cls(Point(minx, miny), Point(maxx, maxy))

    @classmethod
    def from_shapely(cls, geometry) -> 'Boundary':
        """Bounding rectangle of any non-empty shapely geometry."""
        if geometry.is_empty:
            raise ValueError("Cannot build a boundary from an empty geometry")
        return cls.from_bounds(geometry.bounds)

    @classmethod
    def _unchecked(cls, p1: Point, p2: Point) -> 'Boundary':
        """Build from already ordered corners, skipping normalization."""
        boundary = object.__new__(cls)
        object.__setattr__(boundary, 'p1', p1)
        object.__setattr__(boundary, 'p2', p2)
        return boundary

    @property
    def width(self):
        return self.p2.x - self.p1.x

    @property
    def height(self):
        return self.p2.y - self.p1.y

    @property
    def area(self):
        return self.width * self.height

    @property
    def center(self) -> Point:
        return Point(self.p1.x + halve(self.width), self.p1.y + halve(self.height))

    def contains(self, point: Point) -> bool:
        """True iff the point lies inside or on the border."""
        p1, p2 = self.p1, self.p2
        return p1.x <= point[0] <= p2.x and p1.y <= point[1] <= p2.y

    def intersects(self, other: 'Boundary') -> bool:
        """True unless the rectangles are separated on some axis. Touching counts."""
        return not (other.p2.x < self.p1.x or other.p1.x > self.p2.x
                    or other.p2.y < self.p1.y or other.p1.y > self.p2.y)

    def encloses(self, other: 'Boundary') -> bool:
        """True iff both corners of ``other`` are contained."""
        return self.contains(other.p1) and self.contains(other.p2)

    def split(self) -> List['Boundary']:
        """
        Partition into four quadrants ordered NW, NE, SW, SE.

        North is the min-y side. The east and south quadrants run up to the
        true ``p2`` so truncated halves of integral extents still tile the
        parent exactly.
        """
        p1, p2 = self.p1, self.p2
        mx = p1.x + halve(p2.x - p1.x)
        my = p1.y + halve(p2.y - p1.y)
        unchecked = Boundary._unchecked
        return [
            unchecked(p1, Point(mx, my)),
            unchecked(Point(mx, p1.y), Point(p2.x, my)),
            unchecked(Point(p1.x, my), Point(mx, p2.y)),
            unchecked(Point(mx, my), p2),
        ]

    def to_shapely(self):
        """This rectangle as a shapely polygon."""
        return box(self.p1.x, self.p1.y, self.p2.x, self.p2.y)

    def __str__(self) -> str:
        return f"{self.p1},{self.p2}"
