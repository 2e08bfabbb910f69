# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Derived per-node status model (never persisted)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnijourney.enums import EnumNodeStatus, EnumRecommendationReason


class ModelComputedNodeStatus(BaseModel):
    """Computed status for one node.

    Attributes:
        node_id: Catalog id of the node.
        status: Derived status.
        unmet_dependencies: Dependencies not yet completed (locked nodes only),
            in declared order.
        recommended_reason: Why the node was recommended (next node only).
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    node_id: str
    status: EnumNodeStatus
    unmet_dependencies: tuple[str, ...] = Field(default=())
    recommended_reason: EnumRecommendationReason | None = None


__all__ = ["ModelComputedNodeStatus"]
