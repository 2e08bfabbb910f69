# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Pure status computation for journey nodes.

Two passes:

1. Per node: ``completed`` when its id is in the completion snapshot;
   otherwise ``locked`` (with unmet dependencies in declared order, each
   listed once) or ``available`` when every dependency is completed.
2. Catalog-wide: the recommendation handler picks one available node, which
   is promoted to ``next`` on the result map.

Status is recomputed from scratch on every call and never cached. The
completion set is copied into a frozenset once per call, so a concurrent
mutation of the caller's collection cannot change the result mid-computation.

Design:
    - Pure functions (no I/O, no logging)
    - Deterministic: result dict is keyed in catalog order
    - No try/except at this level

Public API:
    compute_base_statuses  - Pass 1 only.
    compute_node_statuses  - Pass 1 plus next-node promotion.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from omnijourney.enums import EnumNodeStatus
from omnijourney.models import (
    ModelComputedNodeStatus,
    ModelJourneySettings,
    ModelNodeRecord,
)
from omnijourney.nodes.node_journey_status_compute.handlers.exceptions import (
    JourneyLogicalInconsistencyError,
)
from omnijourney.nodes.node_next_recommendation_compute.handlers import (
    promote_next,
    select_next_node,
)


def compute_base_statuses(
    nodes: Sequence[ModelNodeRecord],
    completed_ids: Iterable[str],
) -> dict[str, ModelComputedNodeStatus]:
    """Compute completed / locked / available for every node.

    Args:
        nodes: Catalog entries in catalog order.
        completed_ids: Ids marked complete by the user.

    Returns:
        Statuses keyed by node id, in catalog order.

    Raises:
        JourneyLogicalInconsistencyError: A dependency id is not in the catalog.
    """
    completed = frozenset(completed_ids)
    known_ids = {node.id for node in nodes}

    statuses: dict[str, ModelComputedNodeStatus] = {}
    for node in nodes:
        if node.id in completed:
            statuses[node.id] = ModelComputedNodeStatus(
                node_id=node.id, status=EnumNodeStatus.COMPLETED
            )
            continue

        unmet: list[str] = []
        for dependency_id in node.dependencies:
            if dependency_id not in known_ids:
                raise JourneyLogicalInconsistencyError(node.id, dependency_id)
            if dependency_id not in completed and dependency_id not in unmet:
                unmet.append(dependency_id)

        if unmet:
            statuses[node.id] = ModelComputedNodeStatus(
                node_id=node.id,
                status=EnumNodeStatus.LOCKED,
                unmet_dependencies=tuple(unmet),
            )
        else:
            statuses[node.id] = ModelComputedNodeStatus(
                node_id=node.id, status=EnumNodeStatus.AVAILABLE
            )
    return statuses


def compute_node_statuses(
    nodes: Sequence[ModelNodeRecord],
    completed_ids: Iterable[str],
    settings: ModelJourneySettings | None = None,
) -> dict[str, ModelComputedNodeStatus]:
    """Compute every node's status, including the single ``next`` node.

    Args:
        nodes: Validated catalog entries in catalog order.
        completed_ids: Ids marked complete by the user.
        settings: Recommendation tie-break settings.

    Returns:
        Statuses keyed by node id, in catalog order. Exactly one node is
        ``next`` when any node is available; none otherwise.

    Raises:
        JourneyLogicalInconsistencyError: A dependency id is not in the catalog.
    """
    base = compute_base_statuses(nodes, completed_ids)
    recommendation = select_next_node(nodes, base, settings)
    return promote_next(base, recommendation)


__all__ = [
    "compute_base_statuses",
    "compute_node_statuses",
]
