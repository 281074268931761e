"""
Core Quadtree Module

The tree structure, its insertion algorithm, the traversal engine and the
configuration shared by all nodes.
"""

from .capacity import Capacity, ConstCap, DynCap
from .errors import QuadTreeError, OutOfBoundsError
from .config import QuadTreeConfig, get_default_config
from .query import Query, Iter
from .tree import QuadTree

__all__ = [
    'Capacity',
    'ConstCap',
    'DynCap',
    'QuadTreeError',
    'OutOfBoundsError',
    'QuadTreeConfig',
    'get_default_config',
    'Query',
    'Iter',
    'QuadTree',
]
