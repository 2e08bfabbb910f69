# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Next Recommendation Compute Node package."""

from omnijourney.nodes.node_next_recommendation_compute.handlers import (
    promote_next,
    select_next_node,
    select_next_node_id,
)
from omnijourney.nodes.node_next_recommendation_compute.models import (
    ModelRecommendation,
)

__all__ = [
    "ModelRecommendation",
    "promote_next",
    "select_next_node",
    "select_next_node_id",
]
