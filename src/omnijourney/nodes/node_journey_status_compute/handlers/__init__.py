# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Handlers for the journey status compute node."""

from omnijourney.nodes.node_journey_status_compute.handlers.exceptions import (
    JourneyLogicalInconsistencyError,
)
from omnijourney.nodes.node_journey_status_compute.handlers.handler_node_status import (
    compute_base_statuses,
    compute_node_statuses,
)

__all__ = [
    "JourneyLogicalInconsistencyError",
    "compute_base_statuses",
    "compute_node_statuses",
]
