# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Pure structural and geometric validation of a node catalog.

Structural checks are fatal and run in a fixed order, stopping at the first
failure:

1. duplicate ids
2. dangling dependency references
3. dependency cycles (iterative three-color DFS)
4. dangling tree parents
5. tree parents that are not tree/hybrid nodes
6. tree parent cycles

Spacing checks are advisory and only run on a structurally sound catalog.
They compare every pair of placements within one layout (O(n^2) per layout);
catalogs are small enough that no spatial index is needed.

Design:
    - Pure functions (no I/O, no logging)
    - Deterministic: traversal follows catalog order, then declared
      dependency order, so error messages are reproducible
    - No try/except at this level; errors propagate to the caller

Public API:
    validate_catalog          - Run all checks; raise or return a report.
    index_unique_nodes        - Build the id index, rejecting duplicates.
    check_dependency_references
    find_dependency_cycle
    check_tree_parents
    find_tree_parent_cycle
    find_spacing_warnings
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum

from omnijourney.models import ModelNodeRecord, ModelPoint
from omnijourney.nodes.node_catalog_validator_compute.handlers.exceptions import (
    DanglingDependencyError,
    DanglingTreeParentError,
    DependencyCycleError,
    DuplicateNodeIdError,
    IllegalTreeParentTypeError,
    TreeParentCycleError,
)
from omnijourney.nodes.node_catalog_validator_compute.models import (
    ModelCatalogValidationReport,
    ModelSpacingThresholds,
    ModelSpacingWarning,
)
from omnijourney.nodes.node_layout_projection_compute.handlers import (
    euclidean_distance,
    spiral_to_cartesian,
    tree_to_cartesian,
)


class _EnumVisitColor(Enum):
    """DFS visit state: unvisited, on the current path, finished."""

    WHITE = 0
    GRAY = 1
    BLACK = 2


# =============================================================================
# Referential Integrity
# =============================================================================


def index_unique_nodes(nodes: Iterable[ModelNodeRecord]) -> dict[str, ModelNodeRecord]:
    """Index nodes by id in catalog order.

    Raises:
        DuplicateNodeIdError: On the first id seen twice.
    """
    by_id: dict[str, ModelNodeRecord] = {}
    for node in nodes:
        if node.id in by_id:
            raise DuplicateNodeIdError(node.id)
        by_id[node.id] = node
    return by_id


def check_dependency_references(by_id: Mapping[str, ModelNodeRecord]) -> None:
    """Ensure every dependency names an existing node.

    Raises:
        DanglingDependencyError: Naming the node and the missing id.
    """
    for node in by_id.values():
        for dependency_id in node.dependencies:
            if dependency_id not in by_id:
                raise DanglingDependencyError(node.id, dependency_id)


# =============================================================================
# Cycle Detection
# =============================================================================


def _find_cycle(
    roots: Sequence[str],
    adjacency: Mapping[str, Sequence[str]],
) -> list[str] | None:
    """Iterative three-color DFS returning the first cycle found.

    Args:
        roots: Start nodes, visited in this order.
        adjacency: Outgoing edges per node; every target must be a key.

    Returns:
        The cycle as an id path from the re-entered node back to itself, or
        None when the graph is acyclic.
    """
    color = dict.fromkeys(adjacency, _EnumVisitColor.WHITE)

    for root in roots:
        if color[root] is not _EnumVisitColor.WHITE:
            continue

        color[root] = _EnumVisitColor.GRAY
        path = [root]
        stack = [iter(adjacency[root])]

        while stack:
            target = next(stack[-1], None)
            if target is None:
                stack.pop()
                color[path.pop()] = _EnumVisitColor.BLACK
                continue

            state = color[target]
            if state is _EnumVisitColor.GRAY:
                start = path.index(target)
                return [*path[start:], target]
            if state is _EnumVisitColor.WHITE:
                color[target] = _EnumVisitColor.GRAY
                path.append(target)
                stack.append(iter(adjacency[target]))

    return None


def find_dependency_cycle(by_id: Mapping[str, ModelNodeRecord]) -> list[str] | None:
    """Return the first dependency cycle in catalog order, or None.

    Requires references to have been checked (no dangling dependencies).
    """
    adjacency = {node_id: node.dependencies for node_id, node in by_id.items()}
    return _find_cycle(list(by_id), adjacency)


# =============================================================================
# Tree Parent Links
# =============================================================================


def check_tree_parents(by_id: Mapping[str, ModelNodeRecord]) -> None:
    """Ensure every tree parent exists and is a tree or hybrid node.

    Raises:
        DanglingTreeParentError: Parent id absent from the catalog.
        IllegalTreeParentTypeError: Parent is a spiral node.
    """
    for node in by_id.values():
        parent_id = node.tree_parent_id
        if parent_id is None:
            continue
        parent = by_id.get(parent_id)
        if parent is None:
            raise DanglingTreeParentError(node.id, parent_id)
        if not parent.type.can_parent_tree:
            raise IllegalTreeParentTypeError(node.id, parent_id, parent.type.value)


def find_tree_parent_cycle(by_id: Mapping[str, ModelNodeRecord]) -> list[str] | None:
    """Return the first parent-link cycle (node -> parent -> ...), or None.

    Requires parents to have been checked (no dangling parents).
    """
    adjacency: dict[str, tuple[str, ...]] = {}
    for node_id, node in by_id.items():
        parent_id = node.tree_parent_id
        adjacency[node_id] = (parent_id,) if parent_id is not None else ()
    return _find_cycle(list(by_id), adjacency)


# =============================================================================
# Spacing
# =============================================================================


def _pairwise_warnings(
    layout: str,
    placed: Sequence[tuple[str, ModelPoint]],
    min_distance: float,
) -> list[ModelSpacingWarning]:
    warnings: list[ModelSpacingWarning] = []
    for i, (a_id, a_point) in enumerate(placed):
        for b_id, b_point in placed[i + 1 :]:
            distance = euclidean_distance(a_point, b_point)
            if distance < min_distance:
                warnings.append(
                    ModelSpacingWarning(
                        layout=layout,  # type: ignore[arg-type]
                        node_a_id=a_id,
                        node_b_id=b_id,
                        distance=distance,
                        min_distance=min_distance,
                    )
                )
    return warnings


def find_spacing_warnings(
    nodes: Iterable[ModelNodeRecord],
    thresholds: ModelSpacingThresholds,
) -> list[ModelSpacingWarning]:
    """Flag node pairs placed closer than the layout minimum.

    Tree placements are compared as-is; spiral placements are compared after
    polar to cartesian projection. Tree warnings come first.
    """
    tree_placed: list[tuple[str, ModelPoint]] = []
    spiral_placed: list[tuple[str, ModelPoint]] = []
    for node in nodes:
        tree = node.tree_position
        if tree is not None:
            tree_placed.append((node.id, tree_to_cartesian(tree.x, tree.y)))
        spiral = node.spiral_position
        if spiral is not None:
            spiral_placed.append(
                (node.id, spiral_to_cartesian(spiral.theta, spiral.radius))
            )

    return [
        *_pairwise_warnings("tree", tree_placed, thresholds.tree_min_distance),
        *_pairwise_warnings("spiral", spiral_placed, thresholds.spiral_min_distance),
    ]


# =============================================================================
# Entry Point
# =============================================================================


def validate_catalog(
    nodes: Iterable[ModelNodeRecord],
    thresholds: ModelSpacingThresholds | None = None,
) -> ModelCatalogValidationReport:
    """Validate catalog structure, then collect spacing warnings.

    Args:
        nodes: Catalog entries in catalog order.
        thresholds: Spacing minimums (defaults: tree 8, spiral 12).

    Returns:
        Report with the node count and any spacing warnings.

    Raises:
        CatalogStructuralError: The first structural failure found.
    """
    if thresholds is None:
        thresholds = ModelSpacingThresholds()

    by_id = index_unique_nodes(nodes)
    check_dependency_references(by_id)

    cycle = find_dependency_cycle(by_id)
    if cycle is not None:
        raise DependencyCycleError(cycle)

    check_tree_parents(by_id)

    tree_cycle = find_tree_parent_cycle(by_id)
    if tree_cycle is not None:
        raise TreeParentCycleError(tree_cycle)

    warnings = find_spacing_warnings(by_id.values(), thresholds)
    return ModelCatalogValidationReport(node_count=len(by_id), warnings=tuple(warnings))


__all__ = [
    "check_dependency_references",
    "check_tree_parents",
    "find_dependency_cycle",
    "find_spacing_warnings",
    "find_tree_parent_cycle",
    "index_unique_nodes",
    "validate_catalog",
]
