#!/usr/bin/env python3
"""
Performance Tracker Module

Timing for quadtree insertions and queries.
Includes bounds checking to prevent unlimited memory growth.
"""

import time
import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)


class PerformanceTracker:
    """
    Performance tracking for quadtree operations.

    Tracks insert and query timings plus named operations. Histories are
    capped at ``max_history_size`` entries each.
    """

    def __init__(self, max_history_size: int = 1000):
        """
        Initialize performance tracker with configurable bounds.

        Args:
            max_history_size: Maximum number of entries to keep in history lists
        """
        if max_history_size <= 0:
            raise ValueError("max_history_size must be positive")
        self.max_history_size = max_history_size
        self.reset()

    @classmethod
    def from_config(cls, config) -> 'PerformanceTracker':
        """Create a tracker sized by a QuadTreeConfig."""
        return cls(max_history_size=config.performance.max_history_size)

    def reset(self):
        """Reset all performance metrics."""
        self.start_time = time.perf_counter()
        self.operation_times: Dict[str, List[float]] = {}
        self.insert_times: List[float] = []
        self.query_times: Dict[str, List[float]] = {}
        self.query_results: Dict[str, List[int]] = {}
        self._current_ops: Dict[str, float] = {}

    def _bounded(self, history: list) -> list:
        if len(history) > self.max_history_size:
            return history[-self.max_history_size:]
        return history

    def start_operation(self, operation_name: str):
        """Start timing an operation."""
        if operation_name not in self.operation_times:
            self.operation_times[operation_name] = []
        self._current_ops[operation_name] = time.perf_counter()

    def end_operation(self, operation_name: str):
        """End timing an operation. Ending an operation never started is a no-op."""
        if operation_name in self._current_ops:
            duration = time.perf_counter() - self._current_ops.pop(operation_name)
            self.operation_times[operation_name].append(duration)
            self.operation_times[operation_name] = self._bounded(self.operation_times[operation_name])

    def record_insert_time(self, duration: float):
        """Record time spent inserting one batch or item."""
        self.insert_times.append(duration)
        self.insert_times = self._bounded(self.insert_times)

    def record_query_time(self, query_name: str, duration: float, result_count: int):
        """Record time spent draining a query and how many items it returned."""
        self.query_times.setdefault(query_name, []).append(duration)
        self.query_results.setdefault(query_name, []).append(result_count)
        self.query_times[query_name] = self._bounded(self.query_times[query_name])
        self.query_results[query_name] = self._bounded(self.query_results[query_name])

    def get_summary_stats(self) -> Dict[str, Any]:
        """Get comprehensive performance summary."""
        total_time = time.perf_counter() - self.start_time

        operation_stats = {}
        for op_name, times in self.operation_times.items():
            if times:
                operation_stats[op_name] = {
                    'count': len(times),
                    'total_time': sum(times),
                    'avg_time': sum(times) / len(times),
                    'min_time': min(times),
                    'max_time': max(times),
                    'pct_total': sum(times) / total_time * 100 if total_time > 0 else 0
                }

        query_stats = {}
        for query_name, times in self.query_times.items():
            if times:
                results = self.query_results[query_name]
                query_stats[query_name] = {
                    'count': len(times),
                    'total_time': sum(times),
                    'avg_time': sum(times) / len(times),
                    'avg_results': sum(results) / len(results),
                    'results_per_second': sum(results) / sum(times) if sum(times) > 0 else 0
                }

        total_insert_time = sum(self.insert_times)
        return {
            'total_time': total_time,
            'insert_count': len(self.insert_times),
            'total_insert_time': total_insert_time,
            'avg_insert_time': total_insert_time / len(self.insert_times) if self.insert_times else 0,
            'operation_stats': operation_stats,
            'query_stats': query_stats
        }

    def log_performance_summary(self):
        """Log a human-readable performance summary."""
        stats = self.get_summary_stats()

        logger.info("=== PERFORMANCE SUMMARY ===")
        logger.info(f"Total time: {stats['total_time']:.2f}s")
        logger.info(f"Inserts recorded: {stats['insert_count']} ({stats['total_insert_time']:.3f}s)")

        if stats['operation_stats']:
            logger.info("Top operations by time:")
            sorted_ops = sorted(stats['operation_stats'].items(),
                                key=lambda x: x[1]['total_time'], reverse=True)
            for op_name, op_stats in sorted_ops[:5]:
                logger.info(f"  {op_name}: {op_stats['total_time']:.3f}s ({op_stats['pct_total']:.1f}%)")

        if stats['query_stats']:
            logger.info("Query performance:")
            for query_name, query_stats in stats['query_stats'].items():
                logger.info(f"  {query_name}: avg {query_stats['avg_time'] * 1000:.3f}ms, "
                            f"avg {query_stats['avg_results']:.0f} results")
