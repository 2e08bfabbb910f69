# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Handlers for the next recommendation compute node."""

from omnijourney.nodes.node_next_recommendation_compute.handlers.handler_recommendation import (
    promote_next,
    select_next_node,
    select_next_node_id,
)

__all__ = [
    "promote_next",
    "select_next_node",
    "select_next_node_id",
]
