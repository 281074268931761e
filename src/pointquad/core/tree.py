#!/usr/bin/env python3
"""
Quadtree Module

Point-region quadtree storing items keyed by position.

Each node holds up to ``capacity`` items of its own. The item that would
overflow a node triggers a single split into four quadrants and is placed
further down; items already stored stay where they were inserted. Nodes are
never merged or removed.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from ..geometry.boundary import Boundary
from ..geometry.point import Point, coerce_point
from .capacity import Capacity, ConstCap, DynCap, capacity_from_value
from .config import QuadTreeConfig, get_default_config
from .errors import OutOfBoundsError
from .query import Iter, Query, as_area

logger = logging.getLogger(__name__)


class _TreeState:
    """State shared by every node of one tree."""
    __slots__ = ('version', 'config')

    def __init__(self, config: QuadTreeConfig):
        self.version = 0
        self.config = config


class QuadTree:
    """
    A node of a point-region quadtree; the root node is the tree.

    INVARIANT: ``_quadrants`` is either None (leaf) or a list of exactly four
    children ordered NW, NE, SW, SE, created once and never replaced.

    No insertion may happen while a Query or Iter over the tree is still
    being consumed. Traversals detect this and raise RuntimeError unless
    ``config.validation.detect_concurrent_modification`` is off.
    """
    __slots__ = ('_boundary', '_capacity', '_items', '_quadrants', '_state')

    def __init__(self, boundary: Boundary, capacity=None, config: Optional[QuadTreeConfig] = None):
        """
        Create an empty tree.

        Args:
            boundary: Area covered by the tree, a Boundary or (minx, miny, maxx, maxy)
            capacity: Capacity strategy or integer; defaults to the config's capacity
            config: Shared configuration, defaults to the global default config
        """
        if config is None:
            config = get_default_config()
        if not isinstance(boundary, Boundary):
            boundary = Boundary.from_bounds(boundary)
        if capacity is None:
            capacity = _capacity_from_config(config)

        self._boundary = boundary
        self._capacity = capacity_from_value(capacity)
        self._items = None
        self._quadrants = None
        self._state = _TreeState(config)

    @classmethod
    def with_dyn_cap(cls, boundary: Boundary, capacity: int,
                     config: Optional[QuadTreeConfig] = None) -> 'QuadTree':
        """Create a tree whose capacity is a runtime value."""
        return cls(boundary, DynCap(capacity), config)

    @classmethod
    def with_const_cap(cls, boundary: Boundary, capacity: int,
                       config: Optional[QuadTreeConfig] = None) -> 'QuadTree':
        """Create a tree whose capacity is fixed on a ConstCap type."""
        return cls(boundary, ConstCap[capacity](), config)

    @classmethod
    def from_config(cls, boundary: Boundary, config: QuadTreeConfig) -> 'QuadTree':
        """Create a tree with capacity value and flavor taken from the config."""
        return cls(boundary, _capacity_from_config(config), config)

    def _new_child(self, boundary: Boundary) -> 'QuadTree':
        child = object.__new__(type(self))
        child._boundary = boundary
        child._capacity = self._capacity
        child._items = None
        child._quadrants = None
        child._state = self._state
        return child

    @property
    def boundary(self) -> Boundary:
        return self._boundary

    @property
    def capacity(self) -> int:
        return self._capacity.capacity()

    @property
    def capacity_strategy(self) -> Capacity:
        return self._capacity

    @property
    def config(self) -> QuadTreeConfig:
        return self._state.config

    @property
    def items(self) -> Tuple[Tuple[Point, Any], ...]:
        """(point, item) pairs stored directly at this node, in insertion order."""
        return tuple(self._items) if self._items else ()

    @property
    def quadrants(self) -> Optional[Tuple['QuadTree', ...]]:
        """Children ordered NW, NE, SW, SE, or None for a leaf."""
        return tuple(self._quadrants) if self._quadrants is not None else None

    @property
    def is_leaf(self) -> bool:
        return self._quadrants is None

    def insert_at(self, point, item):
        """
        Insert an item at a position.

        Raises:
            OutOfBoundsError: If the point lies outside the boundary. The tree
                is left unchanged.
        """
        point = coerce_point(point)
        if not self._boundary.contains(point):
            raise OutOfBoundsError(self._boundary, point)
        self._insert(point, item)

    def insert_at_unchecked(self, point, item):
        """
        Insert without a bounds check.

        The point must lie inside the boundary. This is only asserted when
        ``config.validation.debug_assertions`` is on and Python runs without -O;
        otherwise a violation silently files the item under the nearest quadrant.
        """
        point = coerce_point(point)
        if self._state.config.validation.debug_assertions:
            assert self._boundary.contains(point), f"point {point} is outside of area {self._boundary}"
        self._insert(point, item)

    def insert(self, item):
        """Insert an item that reports its own position (AsPoint or shapely Point)."""
        self.insert_at(coerce_point(item), item)

    def insert_unchecked(self, item):
        """Same as ``insert`` but without the bounds check."""
        self.insert_at_unchecked(coerce_point(item), item)

    def insert_many(self, points, items: Optional[Iterable] = None) -> int:
        """
        Insert a batch of items, all or nothing.

        Every point is bounds checked in one vectorized pass before anything
        is inserted.

        Args:
            points: Sequence of (x, y) pairs or an (N, 2) numpy array
            items: Items to store, one per point; defaults to the row indices

        Returns:
            Number of inserted items

        Raises:
            OutOfBoundsError: For the first point outside the boundary
        """
        coords = np.asarray(points)
        if coords.size == 0:
            return 0
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError(f"points must have shape (N, 2), got {coords.shape}")

        if items is None:
            items = range(len(coords))
        else:
            items = list(items)
            if len(items) != len(coords):
                raise ValueError(f"Got {len(coords)} points but {len(items)} items")

        p1, p2 = self._boundary.p1, self._boundary.p2
        xs, ys = coords[:, 0], coords[:, 1]
        inside = (xs >= p1.x) & (xs <= p2.x) & (ys >= p1.y) & (ys <= p2.y)
        if not inside.all():
            first_bad = int(np.argmin(inside))
            raise OutOfBoundsError(self._boundary, Point(*coords[first_bad].tolist()))

        for (x, y), item in zip(coords.tolist(), items):
            self._insert(Point(x, y), item)

        logger.debug(f"Inserted batch of {len(coords)} items into {self._boundary}")
        return len(coords)

    def _insert(self, point: Point, item):
        """Iterative descent to the first node with room."""
        pair = (point, item)
        capacity = self._capacity.capacity()
        node = self
        depth = 0
        while True:
            items = node._items
            if items is None:
                node._items = [pair]
                break
            if len(items) < capacity:
                items.append(pair)
                break

            quadrants = node._quadrants
            if quadrants is None:
                quadrants = node._split(depth)

            # Quadrant from the NW quadrant's far corner: bit0 east, bit1 south
            corner = quadrants[0]._boundary.p2
            index = (point.x > corner.x) | ((point.y > corner.y) << 1)
            node = quadrants[index]
            depth += 1

        self._state.version += 1

    def _split(self, depth: int) -> List['QuadTree']:
        self._quadrants = [self._new_child(b) for b in self._boundary.split()]
        if self._state.config.logging.log_splits:
            logger.debug(f"Split node {self._boundary} ({depth} levels below insertion root)")
        return self._quadrants

    def query(self, area) -> Query:
        """Lazily yield every item whose point lies inside ``area``."""
        return Query(self, as_area(area))

    def query_points(self, area) -> Query:
        """Like ``query`` but yields the stored (point, item) pairs."""
        return Query(self, as_area(area), with_points=True)

    def iter(self) -> Iter:
        """Lazily yield every stored item."""
        return Iter(self)

    def iter_points(self) -> Iter:
        """Lazily yield every stored (point, item) pair."""
        return Iter(self, with_points=True)

    def __iter__(self):
        return Iter(self)

    def __len__(self) -> int:
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            if node._items:
                count += len(node._items)
            if node._quadrants is not None:
                stack.extend(node._quadrants)
        return count

    def __repr__(self) -> str:
        return f"QuadTree(boundary={self._boundary}, capacity={self._capacity!r})"


def _capacity_from_config(config: QuadTreeConfig) -> Capacity:
    value = config.capacity.default_capacity
    if config.capacity.mode.lower() == "const":
        return ConstCap[value]()
    return DynCap(value)
