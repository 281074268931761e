"""
Geometry Module

Points, rectangles and query areas shared by every part of the quadtree.
"""

from .point import Point, AsPoint, coerce_point
from .boundary import Boundary, Area
from .shapely_area import ShapelyArea

__all__ = [
    'Point',
    'AsPoint',
    'coerce_point',
    'Boundary',
    'Area',
    'ShapelyArea',
]
