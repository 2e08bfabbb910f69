# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for InMemoryJourneyRepository.

Pytest marks: unit, repository
"""

from __future__ import annotations

import threading

import pytest

from omnijourney.models import ModelJourneySettings, ModelNodeCatalog
from omnijourney.protocols import ProtocolCatalogSource, ProtocolJourneyStateStore
from omnijourney.repositories import (
    DEFAULT_SPIRAL_ORDER,
    InMemoryJourneyRepository,
    UnknownNodeError,
    default_settings_for,
)
from omnijourney.settings import JourneyEngineSettings
from tests.fixtures.catalog_builders import make_node, tree_node


@pytest.mark.unit
@pytest.mark.repository
class TestDefaultSettings:
    """Initial settings derived from the catalog."""

    def test_first_spiral_node_is_current(self, mixed_catalog: ModelNodeCatalog) -> None:
        settings = default_settings_for(mixed_catalog.nodes)
        assert settings == ModelJourneySettings(
            current_node_id="ego", current_spiral_order=1
        )

    def test_spiral_node_without_placement_uses_default_order(self) -> None:
        settings = default_settings_for([make_node("bare")])
        assert settings.current_node_id == "bare"
        assert settings.current_spiral_order == DEFAULT_SPIRAL_ORDER

    def test_spiral_preference_from_engine_settings(
        self, mixed_catalog: ModelNodeCatalog
    ) -> None:
        settings = default_settings_for(
            mixed_catalog.nodes, JourneyEngineSettings(prefer_spiral_continuation=False)
        )
        assert settings.prefer_spiral_continuation is False
        assert settings.current_node_id == "ego"

    def test_spiral_preference_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("JOURNEY_PREFER_SPIRAL_CONTINUATION", "false")
        settings = default_settings_for([tree_node("t", 0.0)])
        assert settings.prefer_spiral_continuation is False

    def test_catalog_without_spiral_nodes(self) -> None:
        settings = default_settings_for([tree_node("t", 0.0)])
        assert settings.current_node_id is None
        assert settings.current_spiral_order == DEFAULT_SPIRAL_ORDER


@pytest.mark.unit
@pytest.mark.repository
class TestInMemoryJourneyRepository:
    """Mutations, snapshots and protocol conformance."""

    def test_satisfies_both_protocols(self, mixed_catalog: ModelNodeCatalog) -> None:
        repo = InMemoryJourneyRepository(mixed_catalog)
        assert isinstance(repo, ProtocolCatalogSource)
        assert isinstance(repo, ProtocolJourneyStateStore)

    def test_list_nodes_in_catalog_order(self, mixed_catalog: ModelNodeCatalog) -> None:
        repo = InMemoryJourneyRepository(mixed_catalog)
        assert [n.id for n in repo.list_nodes()] == mixed_catalog.node_ids()

    def test_initial_completion_set(self, mixed_catalog: ModelNodeCatalog) -> None:
        repo = InMemoryJourneyRepository(mixed_catalog, ["ego", "persona"])
        assert repo.list_completed_ids() == frozenset({"ego", "persona"})

    def test_unknown_initial_completion_rejected(
        self, mixed_catalog: ModelNodeCatalog
    ) -> None:
        with pytest.raises(UnknownNodeError) as exc_info:
            InMemoryJourneyRepository(mixed_catalog, ["ghost"])
        assert exc_info.value.node_id == "ghost"
        assert str(exc_info.value) == "Unknown journey node: ghost"

    def test_snapshot_is_not_affected_by_later_mutations(
        self, mixed_catalog: ModelNodeCatalog
    ) -> None:
        repo = InMemoryJourneyRepository(mixed_catalog)
        snapshot = repo.list_completed_ids()
        repo.mark_completed("ego")
        assert snapshot == frozenset()
        assert repo.list_completed_ids() == frozenset({"ego"})

    def test_mark_and_unmark(self, mixed_catalog: ModelNodeCatalog) -> None:
        repo = InMemoryJourneyRepository(mixed_catalog)
        repo.mark_completed("ego")
        repo.mark_completed("ego")
        repo.mark_completed("ego", completed=False)
        repo.mark_completed("persona", completed=False)
        assert repo.list_completed_ids() == frozenset()

    @pytest.mark.parametrize("method", ["mark_completed", "set_current_node"])
    def test_unknown_ids_rejected(
        self, mixed_catalog: ModelNodeCatalog, method: str
    ) -> None:
        repo = InMemoryJourneyRepository(mixed_catalog)
        with pytest.raises(UnknownNodeError):
            getattr(repo, method)("ghost")

    def test_settings_updates(self, mixed_catalog: ModelNodeCatalog) -> None:
        repo = InMemoryJourneyRepository(mixed_catalog)
        repo.set_current_node("career")
        repo.set_current_spiral_order(None)
        repo.set_prefer_spiral_continuation(False)
        assert repo.get_settings() == ModelJourneySettings(
            current_node_id="career",
            current_spiral_order=None,
            prefer_spiral_continuation=False,
        )

    def test_explicit_settings_are_kept(self, mixed_catalog: ModelNodeCatalog) -> None:
        settings = ModelJourneySettings(current_spiral_order=3)
        repo = InMemoryJourneyRepository(mixed_catalog, settings=settings)
        assert repo.get_settings() is settings

    def test_concurrent_marks_are_not_lost(self, mixed_catalog: ModelNodeCatalog) -> None:
        repo = InMemoryJourneyRepository(mixed_catalog)
        ids = mixed_catalog.node_ids()
        threads = [
            threading.Thread(target=repo.mark_completed, args=(node_id,))
            for node_id in ids
            for _ in range(10)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert repo.list_completed_ids() == frozenset(ids)
