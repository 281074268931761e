#!/usr/bin/env python3
"""
Performance benchmark for QuadTree insertion and queries.
"""

import logging
import sys
import time
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

import numpy as np

from pointquad import Boundary, QuadTree, PerformanceTracker, collect_tree_stats

WORLD = Boundary.between_points((0, 0), (32_767, 32_767))
CAPACITY = 16
QUERIES = {
    'full': Boundary.between_points((0, 0), (32_767, 32_767)),
    'large': Boundary.between_points((500, 500), (25_000, 25_000)),
    'small': Boundary.between_points((15_000, 15_000), (20_000, 20_000)),
}


def create_benchmark_points(num_points, seed=42):
    """Uniformly distributed integer points inside WORLD."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, 32_768, size=(num_points, 2))


def benchmark_quadtree(sizes=[100, 1_000, 10_000, 100_000]):
    """Benchmark insert, insert_unchecked and queries at different scales."""
    print("=" * 60)
    print("QuadTree Performance Benchmark")
    print("=" * 60)

    tracker = PerformanceTracker()

    for size in sizes:
        print(f"\nTesting with {size} points...")
        coords = create_benchmark_points(size).tolist()

        tree = QuadTree.with_const_cap(WORLD, CAPACITY)
        start_time = time.perf_counter()
        for i, point in enumerate(coords):
            tree.insert_at(point, i)
        insert_time = time.perf_counter() - start_time
        tracker.record_insert_time(insert_time)
        print(f"  insert:           {insert_time * 1000:.2f}ms ({size / insert_time:,.0f} items/s)")

        unchecked_tree = QuadTree.with_const_cap(WORLD, CAPACITY)
        tracker.start_operation(f"insert_unchecked_{size}")
        for i, point in enumerate(coords):
            unchecked_tree.insert_at_unchecked(point, i)
        tracker.end_operation(f"insert_unchecked_{size}")

        tracker.start_operation(f"insert_many_{size}")
        QuadTree.with_const_cap(WORLD, CAPACITY).insert_many(coords)
        tracker.end_operation(f"insert_many_{size}")

        for name, area in QUERIES.items():
            start_time = time.perf_counter()
            found = sum(1 for _ in tree.query(area))
            duration = time.perf_counter() - start_time
            tracker.record_query_time(f"{name}_{size}", duration, found)
            print(f"  query {name:<6}      {duration * 1000:.2f}ms ({found} items)")

        stats = collect_tree_stats(tree)
        print(f"  tree: {stats.node_count} nodes, max depth {stats.max_depth}")

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    tracker.log_performance_summary()
    for op_name, op_stats in tracker.get_summary_stats()['operation_stats'].items():
        print(f"  {op_name:<24} {op_stats['total_time'] * 1000:.2f}ms")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    benchmark_quadtree()
