# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared catalog, status and settings models."""

from omnijourney.models.model_computed_node_status import ModelComputedNodeStatus
from omnijourney.models.model_journey_settings import ModelJourneySettings
from omnijourney.models.model_node_catalog import ModelNodeCatalog
from omnijourney.models.model_node_record import (
    ModelNodeRecord,
    ModelSpiralPosition,
    ModelTreePosition,
    ModelUIPosition,
)
from omnijourney.models.model_point import ModelPoint

__all__ = [
    "ModelComputedNodeStatus",
    "ModelJourneySettings",
    "ModelNodeCatalog",
    "ModelNodeRecord",
    "ModelPoint",
    "ModelSpiralPosition",
    "ModelTreePosition",
    "ModelUIPosition",
]
