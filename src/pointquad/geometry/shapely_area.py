#!/usr/bin/env python3
"""
Shapely Area Module

Query regions backed by arbitrary shapely geometries, so polygons and other
shapes can be searched with the same pruning traversal as rectangles.
"""

import logging

from shapely.geometry import Point as ShapelyPoint
from shapely.prepared import prep

from .boundary import Boundary
from .point import Point

logger = logging.getLogger(__name__)


class ShapelyArea:
    """
    Area adapter around a shapely geometry.

    Containment is closed (``covers``), matching Boundary semantics: points on
    the geometry's border are returned by queries.
    """

    def __init__(self, geometry):
        if geometry is None or geometry.is_empty:
            raise ValueError("ShapelyArea requires a non-empty geometry")
        if not geometry.is_valid:
            logger.warning(f"ShapelyArea built from invalid geometry {geometry.geom_type}; results may be wrong")
        self.geometry = geometry
        self.bounding_box = Boundary.from_shapely(geometry)
        self._prepared = prep(geometry)

    def contains(self, point: Point) -> bool:
        if not self.bounding_box.contains(point):
            return False
        return self._prepared.covers(ShapelyPoint(point[0], point[1]))

    def intersects(self, boundary: Boundary) -> bool:
        if not self.bounding_box.intersects(boundary):
            return False
        return self._prepared.intersects(boundary.to_shapely())

    def encloses(self, boundary: Boundary) -> bool:
        if not self.bounding_box.encloses(boundary):
            return False
        return self._prepared.covers(boundary.to_shapely())

    def __repr__(self) -> str:
        return f"ShapelyArea({self.geometry.wkt})"
