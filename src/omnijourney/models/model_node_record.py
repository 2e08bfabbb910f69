# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Frozen catalog entry models.

A node record is created once when the catalog is loaded and is never mutated
afterwards; editing a node means reloading the whole catalog.

Schema Rules:
    - frozen=True (catalog entries are immutable)
    - extra="forbid" (reject unknown fields at the load boundary)
    - from_attributes=True (pytest-xdist worker compatibility)
    - allow_inf_nan=False on positions (coordinates are finite numbers)

Cross-node invariants (unique ids, dangling references, cycles, tree parent
types) are NOT checked here; they belong to the catalog validator node.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnijourney.enums import (
    EnumJourneyNodeType,
    EnumNodeDomain,
    EnumNodePhase,
)


class ModelSpiralPosition(BaseModel):
    """Polar placement on the spiral track.

    Attributes:
        theta: Angle in radians.
        radius: Distance from the spiral center.
        order: Sequence position along the spiral (lower comes first).
    """

    model_config = ConfigDict(
        frozen=True, extra="forbid", from_attributes=True, allow_inf_nan=False
    )

    theta: float = Field(..., description="Angle in radians")
    radius: float = Field(..., ge=0.0, description="Distance from the center")
    order: int = Field(..., description="Sequence position along the spiral")


class ModelTreePosition(BaseModel):
    """Cartesian placement in the branch/tree layout.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate.
        branch: Branch label the node hangs off.
        level: Depth within the branch.
        parent_id: Tree parent node id, or None for a root.
    """

    model_config = ConfigDict(
        frozen=True, extra="forbid", from_attributes=True, allow_inf_nan=False
    )

    x: float
    y: float
    branch: str = ""
    level: int = Field(default=0, ge=0)
    parent_id: str | None = None


class ModelUIPosition(BaseModel):
    """Optional layout placements for a node."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    spiral: ModelSpiralPosition | None = None
    tree: ModelTreePosition | None = None


class ModelNodeRecord(BaseModel):
    """Immutable journey catalog entry.

    Attributes:
        id: Unique node identifier.
        type: Layout membership of the node.
        dependencies: Node ids that must be completed before this node unlocks.
        tags: Free-form tags, used only for similarity scoring.
        ui_position: Spiral and/or tree placement.
        title: Display title.
        phase: Journey phase (authoring metadata).
        domain: Life domain (authoring metadata).
        description: Long-form description.
        prompt_template: Template used by the conversational front end.
        version: Content version of this node.
        personalization_prompts: Optional prompts for personalising the node.
        symbol_focus: Optional symbols the node focuses on.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    id: str = Field(..., min_length=1, description="Unique node identifier")
    type: EnumJourneyNodeType = Field(..., description="Layout membership")
    dependencies: tuple[str, ...] = Field(
        default=(),
        description="Node ids that must be completed first",
    )
    tags: tuple[str, ...] = Field(
        default=(),
        description="Free-form tags used for similarity scoring",
    )
    ui_position: ModelUIPosition = Field(default_factory=ModelUIPosition)

    title: str = ""
    phase: EnumNodePhase | None = None
    domain: EnumNodeDomain | None = None
    description: str = ""
    prompt_template: str = ""
    version: int = Field(default=1, ge=1)
    personalization_prompts: tuple[str, ...] = ()
    symbol_focus: tuple[str, ...] = ()

    @property
    def spiral_position(self) -> ModelSpiralPosition | None:
        """Spiral placement, if any."""
        return self.ui_position.spiral

    @property
    def tree_position(self) -> ModelTreePosition | None:
        """Tree placement, if any."""
        return self.ui_position.tree

    @property
    def tree_parent_id(self) -> str | None:
        """Tree parent id, or None when the node is a tree root or untreed."""
        tree = self.ui_position.tree
        return tree.parent_id if tree is not None else None


__all__ = [
    "ModelNodeRecord",
    "ModelSpiralPosition",
    "ModelTreePosition",
    "ModelUIPosition",
]
