# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Pytest configuration and fixtures for omnijourney tests.

Shared catalogs used across node, repository and CLI tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from omnijourney.models import ModelNodeCatalog, ModelNodeRecord
from tests.fixtures.catalog_builders import spiral_node, tree_node

JOURNEY_ENV_VARS = (
    "JOURNEY_TREE_MIN_DISTANCE",
    "JOURNEY_SPIRAL_MIN_DISTANCE",
    "JOURNEY_POSITION_SCALE",
    "JOURNEY_PREFER_SPIRAL_CONTINUATION",
)


@pytest.fixture(autouse=True)
def clean_journey_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep JOURNEY_* variables from the outer environment out of every test."""
    for name in JOURNEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# =========================================================================
# Catalog Fixtures
# =========================================================================


@pytest.fixture
def three_spiral_nodes() -> tuple[ModelNodeRecord, ...]:
    """Spiral orders 1, 2, 3; orders 2 and 3 both depend on order 1."""
    return (
        spiral_node("s1", 1, tags=("ego",)),
        spiral_node("s2", 2, dependencies=("s1",), tags=("persona",)),
        spiral_node("s3", 3, dependencies=("s1",), tags=("shadow",)),
    )


@pytest.fixture
def mixed_catalog() -> ModelNodeCatalog:
    """Spiral track plus a small tree with a hybrid root.

    Dependency shape:
        ego -> persona -> shadow
        ego -> work_root (hybrid) -> career
        persona, work_root -> integration
    """
    return ModelNodeCatalog(
        nodes=(
            spiral_node("ego", 1, tags=("self", "identity")),
            spiral_node("persona", 2, dependencies=("ego",), tags=("mask", "identity")),
            spiral_node("shadow", 3, dependencies=("persona",), tags=("shadow",)),
            tree_node(
                "work_root",
                0.0,
                node_type="hybrid",
                dependencies=("ego",),
                tags=("work", "identity"),
            ),
            tree_node(
                "career",
                20.0,
                parent_id="work_root",
                dependencies=("work_root",),
                tags=("work",),
            ),
            tree_node(
                "integration",
                40.0,
                parent_id="work_root",
                dependencies=("persona", "work_root"),
                tags=("meaning",),
            ),
        )
    )


# =========================================================================
# Document Fixtures
# =========================================================================


@pytest.fixture
def catalog_document() -> dict[str, Any]:
    """Raw catalog document as authored on disk."""
    return {
        "schema_version": 1,
        "generated_at": "2025-01-01T00:00:00Z",
        "nodes": [
            {
                "id": "ego_formation",
                "title": "Ego Formation",
                "type": "spiral",
                "phase": "ego",
                "domain": "inner",
                "description": "Where the journey starts.",
                "dependencies": [],
                "tags": ["ego", "identity"],
                "prompt_template": "Tell me about {topic}.",
                "ui_position": {"spiral": {"theta": 0.0, "radius": 10.0, "order": 1}},
                "version": 1,
            },
            {
                "id": "persona_work",
                "title": "Persona",
                "type": "hybrid",
                "phase": "persona",
                "domain": "work",
                "description": "Masks we wear.",
                "dependencies": ["ego_formation"],
                "tags": ["persona", "identity"],
                "prompt_template": "",
                "ui_position": {
                    "spiral": {"theta": 3.14159, "radius": 30.0, "order": 2},
                    "tree": {
                        "x": 0,
                        "y": 0,
                        "branch": "work",
                        "level": 0,
                        "parent_id": None,
                    },
                },
                "version": 1,
            },
            {
                "id": "career_path",
                "title": "Career Path",
                "type": "tree",
                "phase": "domain",
                "domain": "work",
                "description": "",
                "dependencies": ["persona_work"],
                "tags": ["work"],
                "prompt_template": "",
                "ui_position": {
                    "tree": {
                        "x": 20,
                        "y": 10,
                        "branch": "work",
                        "level": 1,
                        "parent_id": "persona_work",
                    }
                },
                "version": 2,
            },
        ],
    }


@pytest.fixture
def catalog_schema() -> dict[str, Any]:
    """Minimal JSON Schema for the catalog envelope."""
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "required": ["schema_version", "nodes"],
        "properties": {
            "schema_version": {"type": "integer", "minimum": 1},
            "nodes": {
                "type": "array",
                "items": {
                    "type": "object",
                    "required": ["id", "type", "dependencies", "tags", "ui_position"],
                    "properties": {
                        "id": {"type": "string", "pattern": "^[a-z0-9_]+$"},
                        "type": {"enum": ["spiral", "tree", "hybrid"]},
                    },
                },
            },
        },
    }


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_document: dict[str, Any]) -> Path:
    path = tmp_path / "nodes.json"
    path.write_text(json.dumps(catalog_document), encoding="utf-8")
    return path


@pytest.fixture
def schema_file(tmp_path: Path, catalog_schema: dict[str, Any]) -> Path:
    path = tmp_path / "nodes.schema.json"
    path.write_text(json.dumps(catalog_schema), encoding="utf-8")
    return path
