# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Minimum on-screen spacing per layout."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TREE_MIN_DISTANCE: float = 8.0
# Spiral nodes compress near the center, so they need more room.
DEFAULT_SPIRAL_MIN_DISTANCE: float = 12.0


class ModelSpacingThresholds(BaseModel):
    """Minimum distances below which a node pair produces a spacing warning.

    Attributes:
        tree_min_distance: Minimum distance between two tree placements.
        spiral_min_distance: Minimum distance between two projected spiral
            placements.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    tree_min_distance: float = Field(default=DEFAULT_TREE_MIN_DISTANCE, gt=0.0)
    spiral_min_distance: float = Field(default=DEFAULT_SPIRAL_MIN_DISTANCE, gt=0.0)


__all__ = [
    "DEFAULT_SPIRAL_MIN_DISTANCE",
    "DEFAULT_TREE_MIN_DISTANCE",
    "ModelSpacingThresholds",
]
