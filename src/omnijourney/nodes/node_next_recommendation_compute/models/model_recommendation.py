# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Recommended next node model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnijourney.enums import EnumRecommendationReason


class ModelRecommendation(BaseModel):
    """The single node recommended as ``next``.

    Attributes:
        node_id: Recommended node.
        reason: Selection rule that produced it.
        tag_overlap: Shared-tag count with the current node (tag rule only).
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    node_id: str
    reason: EnumRecommendationReason
    tag_overlap: int | None = Field(default=None, ge=0)


__all__ = ["ModelRecommendation"]
