# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Builders for journey catalog test data."""

from __future__ import annotations

from collections.abc import Sequence

from omnijourney.enums import EnumJourneyNodeType
from omnijourney.models import (
    ModelNodeRecord,
    ModelSpiralPosition,
    ModelTreePosition,
    ModelUIPosition,
)


def make_node(
    node_id: str,
    node_type: EnumJourneyNodeType | str = EnumJourneyNodeType.SPIRAL,
    *,
    dependencies: Sequence[str] = (),
    tags: Sequence[str] = (),
    spiral: tuple[float, float, int] | None = None,
    tree: tuple[float, float] | None = None,
    parent_id: str | None = None,
) -> ModelNodeRecord:
    """Build a node record.

    Args:
        spiral: (theta, radius, order) placement.
        tree: (x, y) placement; ``parent_id`` applies only when given.
    """
    return ModelNodeRecord(
        id=node_id,
        type=EnumJourneyNodeType(node_type),
        dependencies=tuple(dependencies),
        tags=tuple(tags),
        ui_position=ModelUIPosition(
            spiral=(
                ModelSpiralPosition(theta=spiral[0], radius=spiral[1], order=spiral[2])
                if spiral is not None
                else None
            ),
            tree=(
                ModelTreePosition(
                    x=tree[0], y=tree[1], branch="main", level=0, parent_id=parent_id
                )
                if tree is not None
                else None
            ),
        ),
    )


def spiral_node(
    node_id: str,
    order: int,
    *,
    dependencies: Sequence[str] = (),
    tags: Sequence[str] = (),
) -> ModelNodeRecord:
    """Spiral node placed far from every other order (no spacing warnings)."""
    return make_node(
        node_id,
        EnumJourneyNodeType.SPIRAL,
        dependencies=dependencies,
        tags=tags,
        spiral=(0.0, 100.0 * order, order),
    )


def tree_node(
    node_id: str,
    x: float,
    y: float = 0.0,
    *,
    parent_id: str | None = None,
    dependencies: Sequence[str] = (),
    tags: Sequence[str] = (),
    node_type: EnumJourneyNodeType | str = EnumJourneyNodeType.TREE,
) -> ModelNodeRecord:
    return make_node(
        node_id,
        node_type,
        dependencies=dependencies,
        tags=tags,
        tree=(x, y),
        parent_id=parent_id,
    )


__all__ = ["make_node", "spiral_node", "tree_node"]
