#!/usr/bin/env python3
"""
Tests for tree shape statistics.
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from pointquad import Boundary, QuadTree, TreeStats, collect_tree_stats


def test_empty_tree():
    tree = QuadTree.with_dyn_cap(Boundary.new((0, 0), 10, 10), 1)
    assert collect_tree_stats(tree) == TreeStats(
        node_count=1, leaf_count=1, internal_count=0,
        item_count=0, max_depth=0, items_per_depth={}
    )


def test_single_split():
    tree = QuadTree.with_dyn_cap(Boundary.new((0, 0), 10, 10), 1)
    tree.insert_at((1, 1), "a")
    assert collect_tree_stats(tree).node_count == 1

    tree.insert_at((2, 2), "b")
    stats = collect_tree_stats(tree)
    assert stats.node_count == 5
    assert stats.leaf_count == 4
    assert stats.internal_count == 1
    assert stats.item_count == 2
    assert stats.max_depth == 1
    assert stats.items_per_depth == {0: 1, 1: 1}
    assert stats.avg_items_per_node == pytest.approx(0.4)


def test_items_at_root_never_migrate():
    tree = QuadTree.with_const_cap(Boundary.new((0, 0), 100, 100), 4)
    for i in range(40):
        tree.insert_at((i * 2, 100 - i * 2), i)

    stats = collect_tree_stats(tree)
    assert stats.items_per_depth[0] == 4
    assert stats.item_count == 40 == len(tree)
    assert sum(stats.items_per_depth.values()) == 40
    # Every split creates exactly four children
    assert stats.node_count == 1 + 4 * stats.internal_count


def test_log_summary(caplog):
    tree = QuadTree.with_dyn_cap(Boundary.new((0, 0), 10, 10), 1)
    tree.insert_at((1, 1), "a")
    with caplog.at_level("INFO", logger="pointquad.metrics.tree_stats"):
        collect_tree_stats(tree).log_summary()
    assert "Max depth: 0" in caplog.text
