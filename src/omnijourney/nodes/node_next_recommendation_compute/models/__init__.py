# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Models for the next recommendation compute node."""

from omnijourney.nodes.node_next_recommendation_compute.models.model_recommendation import (
    ModelRecommendation,
)

__all__ = ["ModelRecommendation"]
