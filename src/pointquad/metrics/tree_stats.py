#!/usr/bin/env python3
"""
Tree Statistics Module

Shape statistics for a quadtree: how many nodes, how deep, and where the
items ended up.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeStats:
    """Snapshot of a tree's shape."""
    node_count: int
    leaf_count: int
    internal_count: int
    item_count: int
    max_depth: int
    items_per_depth: Dict[int, int] = field(default_factory=dict)

    @property
    def avg_items_per_node(self) -> float:
        return self.item_count / self.node_count if self.node_count else 0.0

    def log_summary(self):
        """Log a human-readable summary."""
        logger.info("=== QUADTREE STATS ===")
        logger.info(f"Nodes: {self.node_count} ({self.internal_count} internal, {self.leaf_count} leaves)")
        logger.info(f"Items: {self.item_count} (avg {self.avg_items_per_node:.2f} per node)")
        logger.info(f"Max depth: {self.max_depth}")


def collect_tree_stats(tree) -> TreeStats:
    """
    Walk the tree iteratively and count nodes and items.

    Depth is 0 at the node passed in.
    """
    node_count = leaf_count = item_count = max_depth = 0
    items_per_depth = {}

    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        node_count += 1
        max_depth = max(max_depth, depth)

        count = len(node.items)
        if count:
            item_count += count
            items_per_depth[depth] = items_per_depth.get(depth, 0) + count

        quadrants = node.quadrants
        if quadrants is None:
            leaf_count += 1
        else:
            stack.extend((child, depth + 1) for child in quadrants)

    return TreeStats(
        node_count=node_count,
        leaf_count=leaf_count,
        internal_count=node_count - leaf_count,
        item_count=item_count,
        max_depth=max_depth,
        items_per_depth=dict(sorted(items_per_depth.items()))
    )
