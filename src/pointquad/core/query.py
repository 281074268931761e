#!/usr/bin/env python3
"""
Query Module

Lazy, single-pass traversal of a quadtree.

Both iterators walk the tree depth first with an explicit stack: a node's own
items in insertion order, then each child's subtree in NW, NE, SW, SE order.
Children whose boundary misses the query area are skipped. Once a node's
boundary lies entirely inside the area, the whole subtree is drained without
further geometric tests.
"""

from collections.abc import Sequence

from shapely.geometry.base import BaseGeometry

from ..geometry.boundary import Area, Boundary
from ..geometry.shapely_area import ShapelyArea


def as_area(area) -> Area:
    """Accept an Area, a shapely geometry, or a (minx, miny, maxx, maxy) tuple."""
    if isinstance(area, Boundary):
        return area
    if isinstance(area, BaseGeometry):
        return ShapelyArea(area)
    if isinstance(area, Sequence) and len(area) == 4:
        return Boundary.from_bounds(area)
    if isinstance(area, Area):
        return area
    raise TypeError(f"Cannot query with {type(area).__name__}; expected an Area, "
                    f"a shapely geometry or a (minx, miny, maxx, maxy) tuple")


class _Frame:
    """Traversal cursor over one node."""
    __slots__ = ('items', 'item_index', 'children', 'child_index', 'enclosed')

    def __init__(self, node, enclosed: bool):
        self.items = node._items
        self.item_index = 0
        self.children = node._quadrants
        self.child_index = 0
        self.enclosed = enclosed


class Query:
    """
    Iterator over the items whose point lies inside an area.

    Yields stored items, or the stored (point, item) pairs when
    ``with_points`` is set. Not restartable; ask the tree for a new query to
    traverse again.
    """

    def __init__(self, tree, area: Area, with_points: bool = False):
        self._area = area
        self._with_points = with_points
        self._state = tree._state
        self._version = tree._state.version
        self._guard = tree._state.config.validation.detect_concurrent_modification
        self._stack = []
        self._push_root(tree)

    def _push_root(self, tree):
        boundary = tree._boundary
        if self._area.intersects(boundary):
            self._stack.append(_Frame(tree, self._area.encloses(boundary)))

    def __iter__(self):
        return self

    def __next__(self):
        if self._guard and self._state.version != self._version:
            raise RuntimeError("QuadTree mutated during iteration")

        stack = self._stack
        area = self._area
        while stack:
            frame = stack[-1]

            items = frame.items
            if items is not None:
                enclosed = frame.enclosed
                while frame.item_index < len(items):
                    pair = items[frame.item_index]
                    frame.item_index += 1
                    if enclosed or area.contains(pair[0]):
                        return pair if self._with_points else pair[1]
                frame.items = None

            children = frame.children
            if children is not None:
                while frame.child_index < 4:
                    child = children[frame.child_index]
                    frame.child_index += 1
                    if frame.enclosed:
                        stack.append(_Frame(child, True))
                        break
                    boundary = child._boundary
                    if area.intersects(boundary):
                        stack.append(_Frame(child, area.encloses(boundary)))
                        break
                else:
                    stack.pop()
                continue

            stack.pop()

        raise StopIteration


class Iter(Query):
    """Iterator over every stored item; a Query that encloses the whole tree."""

    def __init__(self, tree, with_points: bool = False):
        super().__init__(tree, None, with_points)

    def _push_root(self, tree):
        self._stack.append(_Frame(tree, True))
