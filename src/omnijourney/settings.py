# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Environment-driven configuration for the journey core.

Environment variables:
    JOURNEY_TREE_MIN_DISTANCE: float (default 8.0)
    JOURNEY_SPIRAL_MIN_DISTANCE: float (default 12.0)
    JOURNEY_POSITION_SCALE: float (default 1.2)
    JOURNEY_PREFER_SPIRAL_CONTINUATION: bool (default true)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from omnijourney.nodes.node_catalog_validator_compute.models import (
    DEFAULT_SPIRAL_MIN_DISTANCE,
    DEFAULT_TREE_MIN_DISTANCE,
    ModelSpacingThresholds,
)

DEFAULT_POSITION_SCALE: float = 1.2


class JourneyEngineSettings(BaseSettings):
    """Pydantic Settings for the journey core, loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="JOURNEY_",
        extra="ignore",
    )

    tree_min_distance: float = Field(
        default=DEFAULT_TREE_MIN_DISTANCE,
        gt=0.0,
        description="Minimum distance between two tree placements",
    )
    spiral_min_distance: float = Field(
        default=DEFAULT_SPIRAL_MIN_DISTANCE,
        gt=0.0,
        description="Minimum distance between two projected spiral placements",
    )
    position_scale: float = Field(
        default=DEFAULT_POSITION_SCALE,
        gt=0.0,
        description="Display scale applied to projected layout coordinates",
    )
    prefer_spiral_continuation: bool = Field(
        default=True,
        description="Try spiral continuation before tag overlap when recommending",
    )

    def to_spacing_thresholds(self) -> ModelSpacingThresholds:
        """Convert settings to a frozen ModelSpacingThresholds instance."""
        return ModelSpacingThresholds(
            tree_min_distance=self.tree_min_distance,
            spiral_min_distance=self.spiral_min_distance,
        )


__all__ = ["DEFAULT_POSITION_SCALE", "JourneyEngineSettings"]
