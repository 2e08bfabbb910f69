# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for the journey status compute node.

Tests cover:
    - completed / locked / available derivation
    - unmet dependency reporting
    - Loud failure on a dependency missing from the catalog
    - Idempotence and catalog-ordered output
    - Monotonicity when the completion set grows
    - Exactly one ``next`` node whenever any node is available

Pytest marks: unit, status
"""

from __future__ import annotations

from itertools import combinations

import pytest

from omnijourney.enums import EnumNodeStatus, EnumRecommendationReason
from omnijourney.models import ModelJourneySettings, ModelNodeCatalog
from omnijourney.nodes.node_journey_status_compute.handlers import (
    JourneyLogicalInconsistencyError,
    compute_base_statuses,
    compute_node_statuses,
)
from tests.fixtures.catalog_builders import spiral_node, tree_node

# =============================================================================
# Pass one
# =============================================================================


@pytest.mark.unit
@pytest.mark.status
class TestBaseStatuses:
    """Per-node derivation without recommendation."""

    def test_node_without_dependencies_is_available(self) -> None:
        statuses = compute_base_statuses([spiral_node("a", 1)], frozenset())
        assert statuses["a"].status is EnumNodeStatus.AVAILABLE
        assert statuses["a"].unmet_dependencies == ()

    def test_completed_node(self) -> None:
        statuses = compute_base_statuses([spiral_node("a", 1)], {"a"})
        assert statuses["a"].status is EnumNodeStatus.COMPLETED

    def test_completed_wins_over_unmet_dependencies(self) -> None:
        nodes = [spiral_node("a", 1), spiral_node("b", 2, dependencies=("a",))]
        statuses = compute_base_statuses(nodes, {"b"})
        assert statuses["b"].status is EnumNodeStatus.COMPLETED

    def test_locked_lists_unmet_in_declared_order(self) -> None:
        nodes = [
            spiral_node("a", 1),
            spiral_node("b", 2),
            spiral_node("c", 3),
            spiral_node("d", 4, dependencies=("c", "a", "b")),
        ]
        statuses = compute_base_statuses(nodes, {"a"})
        assert statuses["d"].status is EnumNodeStatus.LOCKED
        assert statuses["d"].unmet_dependencies == ("c", "b")

    def test_repeated_dependency_listed_once(self) -> None:
        nodes = [
            spiral_node("a", 1),
            spiral_node("b", 2),
            spiral_node("c", 3, dependencies=("a", "b", "a")),
        ]
        statuses = compute_base_statuses(nodes, frozenset())
        assert statuses["c"].unmet_dependencies == ("a", "b")

    def test_all_dependencies_met_is_available(self) -> None:
        nodes = [
            spiral_node("a", 1),
            spiral_node("b", 2),
            spiral_node("c", 3, dependencies=("a", "b")),
        ]
        statuses = compute_base_statuses(nodes, ["a", "b"])
        assert statuses["c"].status is EnumNodeStatus.AVAILABLE

    def test_missing_dependency_fails_loudly(self) -> None:
        nodes = [spiral_node("a", 1, dependencies=("ghost",))]
        with pytest.raises(JourneyLogicalInconsistencyError) as exc_info:
            compute_base_statuses(nodes, frozenset())
        assert exc_info.value.node_id == "a"
        assert exc_info.value.missing_id == "ghost"
        assert exc_info.value.code == "STATUS_001"

    def test_missing_dependency_fails_even_if_marked_completed(self) -> None:
        nodes = [spiral_node("a", 1, dependencies=("ghost",))]
        with pytest.raises(JourneyLogicalInconsistencyError):
            compute_node_statuses(nodes, {"ghost"})

    def test_result_keys_follow_catalog_order(self, mixed_catalog: ModelNodeCatalog) -> None:
        statuses = compute_base_statuses(mixed_catalog.nodes, frozenset())
        assert list(statuses) == mixed_catalog.node_ids()

    def test_accepts_one_shot_iterable(self) -> None:
        nodes = [spiral_node("a", 1), spiral_node("b", 2, dependencies=("a",))]
        statuses = compute_base_statuses(nodes, (node_id for node_id in ["a"]))
        assert statuses["b"].status is EnumNodeStatus.AVAILABLE


# =============================================================================
# Full computation
# =============================================================================


@pytest.mark.unit
@pytest.mark.status
class TestComputeNodeStatuses:
    """Pass one plus promotion of the recommended node."""

    def test_single_available_node_becomes_next(self) -> None:
        statuses = compute_node_statuses([spiral_node("a", 1)], frozenset())
        assert statuses["a"].status is EnumNodeStatus.NEXT
        assert statuses["a"].recommended_reason is EnumRecommendationReason.SPIRAL_LOWEST_ORDER

    def test_all_completed_has_no_next(self) -> None:
        nodes = [spiral_node("a", 1), spiral_node("b", 2, dependencies=("a",))]
        statuses = compute_node_statuses(nodes, {"a", "b"})
        assert all(s.status is EnumNodeStatus.COMPLETED for s in statuses.values())

    def test_locked_nodes_never_become_next(self) -> None:
        nodes = [
            spiral_node("a", 1),
            spiral_node("b", 2, dependencies=("a",)),
        ]
        statuses = compute_node_statuses(
            nodes, frozenset(), ModelJourneySettings(current_spiral_order=2)
        )
        assert statuses["b"].status is EnumNodeStatus.LOCKED
        assert statuses["a"].status is EnumNodeStatus.NEXT

    def test_idempotent(self, mixed_catalog: ModelNodeCatalog) -> None:
        settings = ModelJourneySettings(current_node_id="ego", current_spiral_order=2)
        first = compute_node_statuses(mixed_catalog.nodes, {"ego"}, settings)
        second = compute_node_statuses(mixed_catalog.nodes, {"ego"}, settings)
        assert first == second
        assert list(first) == list(second)

    def test_caller_set_is_not_modified(self, mixed_catalog: ModelNodeCatalog) -> None:
        completed = {"ego"}
        compute_node_statuses(mixed_catalog.nodes, completed)
        assert completed == {"ego"}

    def test_single_next_invariant_over_all_completion_subsets(
        self, mixed_catalog: ModelNodeCatalog
    ) -> None:
        ids = mixed_catalog.node_ids()
        for size in range(len(ids) + 1):
            for completed in combinations(ids, size):
                statuses = compute_node_statuses(mixed_catalog.nodes, completed)
                next_count = sum(
                    1 for s in statuses.values() if s.status is EnumNodeStatus.NEXT
                )
                available_count = sum(
                    1 for s in statuses.values() if s.status is EnumNodeStatus.AVAILABLE
                )
                if next_count == 0:
                    assert available_count == 0
                else:
                    assert next_count == 1

    def test_completing_a_node_never_locks_another(
        self, mixed_catalog: ModelNodeCatalog
    ) -> None:
        ids = mixed_catalog.node_ids()
        unlocked = {EnumNodeStatus.AVAILABLE, EnumNodeStatus.NEXT}
        for size in range(len(ids)):
            for completed in combinations(ids, size):
                before = compute_node_statuses(mixed_catalog.nodes, completed)
                for extra in set(ids) - set(completed):
                    after = compute_node_statuses(
                        mixed_catalog.nodes, {*completed, extra}
                    )
                    for node_id, entry in before.items():
                        if entry.status in unlocked:
                            assert after[node_id].status is not EnumNodeStatus.LOCKED
                        if entry.status is EnumNodeStatus.COMPLETED:
                            assert after[node_id].status is EnumNodeStatus.COMPLETED

    def test_tree_only_catalog_still_recommends(self) -> None:
        nodes = [tree_node("root", 0.0), tree_node("leaf", 20.0, parent_id="root")]
        statuses = compute_node_statuses(nodes, frozenset())
        assert statuses["root"].status is EnumNodeStatus.NEXT
        assert statuses["root"].recommended_reason is EnumRecommendationReason.CATALOG_ORDER
        # Tree parent links are layout only, not dependencies.
        assert statuses["leaf"].status is EnumNodeStatus.AVAILABLE
