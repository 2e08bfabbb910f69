# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Recommendation tie-break settings, passed explicitly per call."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ModelJourneySettings(BaseModel):
    """Where the user currently is on the journey.

    Attributes:
        current_node_id: Node the user is focused on (tag-overlap anchor).
        current_spiral_order: Spiral order to resume from.
        prefer_spiral_continuation: Try spiral continuation before tag overlap.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    current_node_id: str | None = None
    current_spiral_order: int | None = None
    prefer_spiral_continuation: bool = True


__all__ = ["ModelJourneySettings"]
