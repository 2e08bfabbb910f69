# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Handlers for the catalog validator compute node."""

from omnijourney.nodes.node_catalog_validator_compute.handlers.exceptions import (
    CatalogStructuralError,
    DanglingDependencyError,
    DanglingTreeParentError,
    DependencyCycleError,
    DuplicateNodeIdError,
    IllegalTreeParentTypeError,
    TreeParentCycleError,
)
from omnijourney.nodes.node_catalog_validator_compute.handlers.handler_catalog_validation import (
    check_dependency_references,
    check_tree_parents,
    find_dependency_cycle,
    find_spacing_warnings,
    find_tree_parent_cycle,
    index_unique_nodes,
    validate_catalog,
)

__all__ = [
    "CatalogStructuralError",
    "DanglingDependencyError",
    "DanglingTreeParentError",
    "DependencyCycleError",
    "DuplicateNodeIdError",
    "IllegalTreeParentTypeError",
    "TreeParentCycleError",
    "check_dependency_references",
    "check_tree_parents",
    "find_dependency_cycle",
    "find_spacing_warnings",
    "find_tree_parent_cycle",
    "index_unique_nodes",
    "validate_catalog",
]
