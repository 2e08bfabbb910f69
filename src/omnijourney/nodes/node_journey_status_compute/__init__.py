# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Journey Status Compute Node package."""

from omnijourney.nodes.node_journey_status_compute.handlers import (
    JourneyLogicalInconsistencyError,
    compute_base_statuses,
    compute_node_statuses,
)

__all__ = [
    "JourneyLogicalInconsistencyError",
    "compute_base_statuses",
    "compute_node_statuses",
]
