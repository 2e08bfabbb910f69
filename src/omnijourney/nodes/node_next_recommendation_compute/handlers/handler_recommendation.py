# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Pure recommendation handlers: pick one ``next`` node among available ones.

Selection rules, first applicable wins:

1. Spiral continuation (when ``prefer_spiral_continuation``): available
   spiral-type nodes with a spiral placement, ascending by spiral order.
   Resume at the first order >= ``current_spiral_order``; otherwise take the
   lowest order.
2. Tag overlap: without a resolvable current node, the first available node
   in catalog order. Otherwise rank available nodes by tags shared with the
   current node (descending), then spiral-type nodes before others, then
   catalog order.

The spiral-type tie-break in rule 2 is a content-authoring convention that
nudges users back toward the spiral track; it is kept as-is.

Public API:
    select_next_node     - Return a ModelRecommendation, or None.
    select_next_node_id  - Return only the recommended id, or None.
    promote_next         - Apply a recommendation to a status map.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from omnijourney.enums import (
    EnumJourneyNodeType,
    EnumNodeStatus,
    EnumRecommendationReason,
)
from omnijourney.models import (
    ModelComputedNodeStatus,
    ModelJourneySettings,
    ModelNodeRecord,
)
from omnijourney.nodes.node_next_recommendation_compute.models import (
    ModelRecommendation,
)


def _available_nodes(
    nodes: Sequence[ModelNodeRecord],
    status_map: Mapping[str, ModelComputedNodeStatus],
) -> list[ModelNodeRecord]:
    available: list[ModelNodeRecord] = []
    for node in nodes:
        entry = status_map.get(node.id)
        if entry is not None and entry.status is EnumNodeStatus.AVAILABLE:
            available.append(node)
    return available


def _select_by_spiral(
    available: Sequence[ModelNodeRecord],
    current_spiral_order: int | None,
) -> ModelRecommendation | None:
    """Rule 1: spiral continuation. Returns None when no spiral candidate exists."""
    spirals = [
        node
        for node in available
        if node.type is EnumJourneyNodeType.SPIRAL and node.spiral_position is not None
    ]
    if not spirals:
        return None
    # sort() is stable, so equal orders keep catalog order
    spirals.sort(key=lambda node: node.spiral_position.order)  # type: ignore[union-attr]

    if current_spiral_order is not None:
        for node in spirals:
            if node.spiral_position.order >= current_spiral_order:  # type: ignore[union-attr]
                return ModelRecommendation(
                    node_id=node.id,
                    reason=EnumRecommendationReason.SPIRAL_CONTINUATION,
                )

    return ModelRecommendation(
        node_id=spirals[0].id,
        reason=EnumRecommendationReason.SPIRAL_LOWEST_ORDER,
    )


def _select_by_tags(
    nodes: Sequence[ModelNodeRecord],
    available: Sequence[ModelNodeRecord],
    current_node_id: str | None,
) -> ModelRecommendation:
    """Rule 2: tag overlap with the current node, falling back to catalog order."""
    current = None
    if current_node_id is not None:
        current = next((node for node in nodes if node.id == current_node_id), None)

    if current is None:
        return ModelRecommendation(
            node_id=available[0].id,
            reason=EnumRecommendationReason.CATALOG_ORDER,
        )

    current_tags = set(current.tags)
    scored = [
        (len(current_tags.intersection(node.tags)), index, node)
        for index, node in enumerate(available)
    ]
    overlap, _, best = min(
        scored,
        key=lambda item: (
            -item[0],
            0 if item[2].type is EnumJourneyNodeType.SPIRAL else 1,
            item[1],
        ),
    )
    return ModelRecommendation(
        node_id=best.id,
        reason=EnumRecommendationReason.TAG_OVERLAP,
        tag_overlap=overlap,
    )


def select_next_node(
    nodes: Sequence[ModelNodeRecord],
    status_map: Mapping[str, ModelComputedNodeStatus],
    settings: ModelJourneySettings | None = None,
) -> ModelRecommendation | None:
    """Choose the single recommended node among the available ones.

    Args:
        nodes: Catalog entries in catalog order.
        status_map: Pass-one statuses keyed by node id.
        settings: Current position and preference flags (defaults apply when None).

    Returns:
        The recommendation, or None when no node is available.
    """
    if settings is None:
        settings = ModelJourneySettings()

    available = _available_nodes(nodes, status_map)
    if not available:
        return None

    if settings.prefer_spiral_continuation:
        recommendation = _select_by_spiral(available, settings.current_spiral_order)
        if recommendation is not None:
            return recommendation

    return _select_by_tags(nodes, available, settings.current_node_id)


def select_next_node_id(
    nodes: Sequence[ModelNodeRecord],
    status_map: Mapping[str, ModelComputedNodeStatus],
    settings: ModelJourneySettings | None = None,
) -> str | None:
    """Return the recommended node id, or None when nothing is available."""
    recommendation = select_next_node(nodes, status_map, settings)
    return recommendation.node_id if recommendation is not None else None


def promote_next(
    status_map: Mapping[str, ModelComputedNodeStatus],
    recommendation: ModelRecommendation | None,
) -> dict[str, ModelComputedNodeStatus]:
    """Return a copy of ``status_map`` with the recommended node marked ``next``.

    Promotion is skipped (no node is ``next``) when there is no recommendation
    or the recommended node is not currently ``available``.
    """
    promoted = dict(status_map)
    if recommendation is None:
        return promoted

    entry = promoted.get(recommendation.node_id)
    if entry is None or entry.status is not EnumNodeStatus.AVAILABLE:
        return promoted

    promoted[recommendation.node_id] = entry.model_copy(
        update={
            "status": EnumNodeStatus.NEXT,
            "recommended_reason": recommendation.reason,
        }
    )
    return promoted


__all__ = [
    "promote_next",
    "select_next_node",
    "select_next_node_id",
]
