# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Non-fatal spacing warning and validation report models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ModelSpacingWarning(BaseModel):
    """Two nodes placed closer than the layout's minimum distance.

    Advisory only: it never blocks use of the catalog.

    Attributes:
        layout: Which layout the pair collides in.
        node_a_id: First node of the pair (earlier in catalog order).
        node_b_id: Second node of the pair.
        distance: Measured plane distance.
        min_distance: Threshold that was violated.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    layout: Literal["tree", "spiral"]
    node_a_id: str
    node_b_id: str
    distance: float = Field(..., ge=0.0)
    min_distance: float = Field(..., gt=0.0)

    @property
    def message(self) -> str:
        """Human-readable warning line."""
        return (
            f"{self.layout.capitalize()} nodes too close: {self.node_a_id} and "
            f"{self.node_b_id} (distance {self.distance:.2f} < {self.min_distance:.2f})"
        )


class ModelCatalogValidationReport(BaseModel):
    """Outcome of a structurally sound catalog validation.

    Attributes:
        node_count: Number of nodes validated.
        warnings: Spacing warnings, tree layout first, then spiral.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    node_count: int = Field(..., ge=0)
    warnings: tuple[ModelSpacingWarning, ...] = ()

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


__all__ = ["ModelCatalogValidationReport", "ModelSpacingWarning"]
