# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Enumerations shared across omnijourney nodes."""

from omnijourney.enums.enum_catalog_load_error import EnumCatalogLoadErrorKind
from omnijourney.enums.enum_journey_node_type import EnumJourneyNodeType
from omnijourney.enums.enum_node_metadata import EnumNodeDomain, EnumNodePhase
from omnijourney.enums.enum_node_status import EnumNodeStatus
from omnijourney.enums.enum_recommendation_reason import EnumRecommendationReason

__all__ = [
    "EnumCatalogLoadErrorKind",
    "EnumJourneyNodeType",
    "EnumNodeDomain",
    "EnumNodePhase",
    "EnumNodeStatus",
    "EnumRecommendationReason",
]
