# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Handlers for the layout projection compute node."""

from omnijourney.nodes.node_layout_projection_compute.handlers.handler_layout_projection import (
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
