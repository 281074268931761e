"""
Performance and Structure Metrics Module

This module provides tree shape statistics and timing helpers for
benchmarking insertions and queries.
"""

from .tree_stats import TreeStats, collect_tree_stats
from .performance_tracker import PerformanceTracker

__all__ = [
    'TreeStats',
    'collect_tree_stats',
    'PerformanceTracker',
]
