# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Pure coordinate transforms for the spiral and tree layouts.

All functions are stateless and never raise for finite inputs. The display
scale is a presentation constant; callers that apply their own scale leave it
at 1.0.

Public API:
    spiral_to_cartesian - Polar (theta, radius) to plane coordinates.
    tree_to_cartesian   - Tree coordinates (already cartesian) times a scale.
    euclidean_distance  - Straight-line distance between two points.
    project_node        - Plane position of a node (spiral first, then tree).
    spiral_guide_path   - Spiral node positions ordered by spiral order.
    tree_edges          - Parent/child segments of the tree layout.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from omnijourney.models import ModelNodeRecord, ModelPoint


def spiral_to_cartesian(theta: float, radius: float, scale: float = 1.0) -> ModelPoint:
    """Convert a polar placement to plane coordinates.

    Args:
        theta: Angle in radians.
        radius: Distance from the center.
        scale: Display scale applied to both axes.

    Returns:
        ModelPoint(radius*cos(theta), radius*sin(theta)), scaled.
    """
    return ModelPoint(
        x=radius * math.cos(theta) * scale,
        y=radius * math.sin(theta) * scale,
    )


def tree_to_cartesian(x: float, y: float, scale: float = 1.0) -> ModelPoint:
    """Return tree coordinates as a point (identity apart from the scale)."""
    return ModelPoint(x=x * scale, y=y * scale)


def euclidean_distance(a: ModelPoint, b: ModelPoint) -> float:
    """Return sqrt(dx^2 + dy^2) between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def project_node(node: ModelNodeRecord, scale: float = 1.0) -> ModelPoint | None:
    """Return the display position of a node.

    A spiral placement wins over a tree placement for nodes carrying both.

    Returns:
        The projected point, or None when the node has no placement.
    """
    spiral = node.spiral_position
    if spiral is not None:
        return spiral_to_cartesian(spiral.theta, spiral.radius, scale)
    tree = node.tree_position
    if tree is not None:
        return tree_to_cartesian(tree.x, tree.y, scale)
    return None


def spiral_guide_path(
    nodes: Iterable[ModelNodeRecord], scale: float = 1.0
) -> list[ModelPoint]:
    """Return the polyline through all spiral placements, ascending by order.

    Nodes sharing an order keep their catalog order.
    """
    spiral_nodes = [node for node in nodes if node.spiral_position is not None]
    spiral_nodes.sort(key=lambda node: node.spiral_position.order)  # type: ignore[union-attr]
    return [
        spiral_to_cartesian(node.spiral_position.theta, node.spiral_position.radius, scale)  # type: ignore[union-attr]
        for node in spiral_nodes
    ]


def tree_edges(
    nodes: Iterable[ModelNodeRecord], scale: float = 1.0
) -> list[tuple[str, str, ModelPoint, ModelPoint]]:
    """Return (parent_id, child_id, parent_point, child_point) tree segments.

    Children whose parent is missing or has no tree placement are skipped.
    """
    node_list = list(nodes)
    tree_points: dict[str, ModelPoint] = {}
    for node in node_list:
        tree = node.tree_position
        if tree is not None:
            tree_points.setdefault(node.id, tree_to_cartesian(tree.x, tree.y, scale))

    edges: list[tuple[str, str, ModelPoint, ModelPoint]] = []
    for node in node_list:
        parent_id = node.tree_parent_id
        if parent_id is None or parent_id not in tree_points:
            continue
        edges.append((parent_id, node.id, tree_points[parent_id], tree_points[node.id]))
    return edges


__all__ = [
    "euclidean_distance",
    "project_node",
    "spiral_guide_path",
    "spiral_to_cartesian",
    "tree_edges",
    "tree_to_cartesian",
]
