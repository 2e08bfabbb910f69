# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Journey query handlers: wire the catalog source and state store to the engine.

Every query re-runs the full status computation from a fresh snapshot of the
catalog, the completion set, and the settings. Nothing is patched
incrementally after a mutation, so results cannot drift from the store.

Public API:
    query_node_statuses   - Statuses for all nodes, including ``next``.
    query_grouped_nodes   - Nodes bucketed by status.
    query_lock_reason     - "Requires: ..." tooltip text for a locked node.
    group_nodes_by_status - Pure bucketing over an existing status map.
    get_lock_reason       - Pure lock reason over an existing status map.
    get_nodes_by_tags     - Tag union lookup over catalog nodes.
    query_node_positions  - Display positions scaled by the configured scale.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from omnijourney.enums import EnumNodeStatus
from omnijourney.models import (
    ModelComputedNodeStatus,
    ModelJourneySettings,
    ModelNodeRecord,
    ModelPoint,
)
from omnijourney.nodes.node_journey_status_compute.handlers import (
    compute_node_statuses,
)
from omnijourney.nodes.node_layout_projection_compute.handlers import project_node
from omnijourney.protocols import ProtocolCatalogSource, ProtocolJourneyStateStore
from omnijourney.settings import JourneyEngineSettings

logger = logging.getLogger(__name__)

DEFAULT_TAG_LOOKUP_LIMIT = 20


def query_node_statuses(
    source: ProtocolCatalogSource,
    store: ProtocolJourneyStateStore | None = None,
    *,
    prefer_spiral_continuation: bool | None = None,
) -> dict[str, ModelComputedNodeStatus]:
    """Compute statuses from a fresh snapshot of the source and store.

    Args:
        source: Catalog and completion set provider.
        store: Settings provider; defaults apply when None.
        prefer_spiral_continuation: Overrides the stored preference when set.

    Returns:
        Statuses keyed by node id, in catalog order.
    """
    nodes = tuple(source.list_nodes())
    completed = frozenset(source.list_completed_ids())
    settings = store.get_settings() if store is not None else ModelJourneySettings()
    if prefer_spiral_continuation is not None:
        settings = settings.model_copy(
            update={"prefer_spiral_continuation": prefer_spiral_continuation}
        )

    statuses = compute_node_statuses(nodes, completed, settings)

    counts = Counter(entry.status.value for entry in statuses.values())
    next_id = next(
        (nid for nid, entry in statuses.items() if entry.status is EnumNodeStatus.NEXT),
        None,
    )
    logger.debug(
        "Journey statuses computed",
        extra={"node_count": len(nodes), "status_counts": dict(counts), "next_node_id": next_id},
    )
    return statuses


def group_nodes_by_status(
    nodes: Iterable[ModelNodeRecord],
    statuses: Mapping[str, ModelComputedNodeStatus],
) -> dict[EnumNodeStatus, list[ModelNodeRecord]]:
    """Bucket nodes by status, keeping catalog order within each bucket.

    Nodes missing from ``statuses`` are reported as locked.
    """
    groups: dict[EnumNodeStatus, list[ModelNodeRecord]] = {
        status: [] for status in EnumNodeStatus
    }
    for node in nodes:
        entry = statuses.get(node.id)
        status = entry.status if entry is not None else EnumNodeStatus.LOCKED
        groups[status].append(node)
    return groups


def get_lock_reason(
    statuses: Mapping[str, ModelComputedNodeStatus],
    node_id: str,
) -> str | None:
    """Return why a node is locked, or None if it is not locked."""
    entry = statuses.get(node_id)
    if entry is None or entry.status is not EnumNodeStatus.LOCKED:
        return None
    if entry.unmet_dependencies:
        return f"Requires: {', '.join(entry.unmet_dependencies)}"
    return "Locked"


def get_nodes_by_tags(
    nodes: Sequence[ModelNodeRecord],
    tags: Iterable[str],
    limit: int = DEFAULT_TAG_LOOKUP_LIMIT,
) -> list[ModelNodeRecord]:
    """Return nodes carrying any of ``tags``.

    Results follow tag order, then catalog order within one tag, without
    duplicates, capped at ``limit``.
    """
    results: list[ModelNodeRecord] = []
    seen: set[str] = set()
    for tag in tags:
        for node in nodes:
            if tag not in node.tags or node.id in seen:
                continue
            results.append(node)
            seen.add(node.id)
            if len(results) >= limit:
                return results
    return results


def query_grouped_nodes(
    source: ProtocolCatalogSource,
    store: ProtocolJourneyStateStore | None = None,
) -> dict[EnumNodeStatus, list[ModelNodeRecord]]:
    """Recompute statuses and bucket the catalog by status."""
    statuses = query_node_statuses(source, store)
    return group_nodes_by_status(source.list_nodes(), statuses)


def query_lock_reason(
    source: ProtocolCatalogSource,
    node_id: str,
    store: ProtocolJourneyStateStore | None = None,
) -> str | None:
    """Recompute statuses and return the lock reason for ``node_id``."""
    return get_lock_reason(query_node_statuses(source, store), node_id)


def query_node_positions(
    source: ProtocolCatalogSource,
    engine_settings: JourneyEngineSettings | None = None,
) -> dict[str, ModelPoint | None]:
    """Project every node to display coordinates.

    Uses ``engine_settings.position_scale`` (loaded from the environment when
    None). Unplaced nodes map to None.
    """
    if engine_settings is None:
        engine_settings = JourneyEngineSettings()
    scale = engine_settings.position_scale
    return {node.id: project_node(node, scale) for node in source.list_nodes()}


__all__ = [
    "DEFAULT_TAG_LOOKUP_LIMIT",
    "get_lock_reason",
    "get_nodes_by_tags",
    "group_nodes_by_status",
    "query_grouped_nodes",
    "query_lock_reason",
    "query_node_positions",
    "query_node_statuses",
]
