# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Handlers for the journey query orchestrator."""

from omnijourney.nodes.node_journey_query_orchestrator.handlers.handler_journey_query import (
    DEFAULT_TAG_LOOKUP_LIMIT,
    get_lock_reason,
    get_nodes_by_tags,
    group_nodes_by_status,
    query_grouped_nodes,
    query_lock_reason,
    query_node_positions,
    query_node_statuses,
)

__all__ = [
    "DEFAULT_TAG_LOOKUP_LIMIT",
    "get_lock_reason",
    "get_nodes_by_tags",
    "group_nodes_by_status",
    "query_grouped_nodes",
    "query_lock_reason",
    "query_node_positions",
    "query_node_statuses",
]
