# pointquad: point-region quadtree spatial index

from .geometry import Point, AsPoint, Boundary, Area, ShapelyArea
from .core import (
    Capacity, ConstCap, DynCap,
    QuadTreeError, OutOfBoundsError,
    QuadTreeConfig,
    Query, Iter,
    QuadTree,
)
from .metrics import TreeStats, collect_tree_stats, PerformanceTracker

__version__ = "0.1.0"

__all__ = [
    'Point',
    'AsPoint',
    'Boundary',
    'Area',
    'ShapelyArea',
    'Capacity',
    'ConstCap',
    'DynCap',
    'QuadTreeError',
    'OutOfBoundsError',
    'QuadTreeConfig',
    'Query',
    'Iter',
    'QuadTree',
    'TreeStats',
    'collect_tree_stats',
    'PerformanceTracker',
]
