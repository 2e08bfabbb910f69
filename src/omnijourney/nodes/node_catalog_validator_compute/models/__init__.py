# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Models for the catalog validator compute node."""

from omnijourney.nodes.node_catalog_validator_compute.models.model_spacing_thresholds import (
    DEFAULT_SPIRAL_MIN_DISTANCE,
    DEFAULT_TREE_MIN_DISTANCE,
    ModelSpacingThresholds,
)
from omnijourney.nodes.node_catalog_validator_compute.models.model_spacing_warning import (
    ModelCatalogValidationReport,
    ModelSpacingWarning,
)

__all__ = [
    "DEFAULT_SPIRAL_MIN_DISTANCE",
    "DEFAULT_TREE_MIN_DISTANCE",
    "ModelCatalogValidationReport",
    "ModelSpacingThresholds",
    "ModelSpacingWarning",
]
