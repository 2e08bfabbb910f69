# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Layout Projection Compute Node package."""

from omnijourney.nodes.node_layout_projection_compute.handlers import (
    euclidean_distance,
    project_node,
    spiral_guide_path,
    spiral_to_cartesian,
    tree_edges,
    tree_to_cartesian,
)

__all__ = [
    "euclidean_distance",
    "project_node",
    "spiral_guide_path",
    "spiral_to_cartesian",
    "tree_edges",
    "tree_to_cartesian",
]
