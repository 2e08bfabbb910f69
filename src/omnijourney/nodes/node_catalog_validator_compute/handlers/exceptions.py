# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Exceptions for catalog validation handlers.

Every structural error is fatal: a catalog that raises any of these must not
be handed to the status engine.

Error Codes:
    - CATALOG_001: Duplicate node id
    - CATALOG_002: Dependency references a missing node
    - CATALOG_003: Dependency cycle
    - CATALOG_004: Tree parent references a missing node
    - CATALOG_005: Tree parent is not a tree or hybrid node
    - CATALOG_006: Tree parent cycle
"""

from __future__ import annotations


class CatalogStructuralError(Exception):
    """Base exception for fatal catalog structure errors.

    Attributes:
        message: Human-readable error description naming the offending id(s).
        code: Error code (CATALOG_0XX).
        node_id: Id of the node the error was found on.
    """

    code: str = "CATALOG_000"

    def __init__(self, message: str, node_id: str) -> None:
        super().__init__(message)
        self.message = message
        self.node_id = node_id


class DuplicateNodeIdError(CatalogStructuralError):
    """Raised when a node id appears more than once in the catalog."""

    code = "CATALOG_001"

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Duplicate node id: {node_id}", node_id)


class DanglingDependencyError(CatalogStructuralError):
    """Raised when a dependency references an id absent from the catalog.

    Attributes:
        missing_id: The referenced id that does not exist.
    """

    code = "CATALOG_002"

    def __init__(self, node_id: str, missing_id: str) -> None:
        super().__init__(
            f"Node '{node_id}' depends on missing node '{missing_id}'", node_id
        )
        self.missing_id = missing_id


class DependencyCycleError(CatalogStructuralError):
    """Raised when the dependency graph contains a cycle.

    Attributes:
        cycle: Ordered ids from the first repeated node back to itself,
            e.g. ("a", "b", "a"). Each consecutive pair is a dependency edge.
    """

    code = "CATALOG_003"

    def __init__(self, cycle: list[str]) -> None:
        super().__init__(
            f"Dependency cycle detected: {' -> '.join(cycle)}", cycle[0]
        )
        self.cycle = tuple(cycle)


class DanglingTreeParentError(CatalogStructuralError):
    """Raised when a tree parent_id references an id absent from the catalog."""

    code = "CATALOG_004"

    def __init__(self, node_id: str, parent_id: str) -> None:
        super().__init__(
            f"Tree node '{node_id}' references missing parent_id '{parent_id}'",
            node_id,
        )
        self.parent_id = parent_id


class IllegalTreeParentTypeError(CatalogStructuralError):
    """Raised when a tree parent is neither a tree nor a hybrid node."""

    code = "CATALOG_005"

    def __init__(self, node_id: str, parent_id: str, parent_type: str) -> None:
        super().__init__(
            f"Tree node '{node_id}' parent_id '{parent_id}' is type "
            f"'{parent_type}', expected 'tree' or 'hybrid'",
            node_id,
        )
        self.parent_id = parent_id
        self.parent_type = parent_type


class TreeParentCycleError(CatalogStructuralError):
    """Raised when a node is its own tree ancestor.

    Attributes:
        cycle: Ordered ids following parent links back to the first node.
    """

    code = "CATALOG_006"

    def __init__(self, cycle: list[str]) -> None:
        super().__init__(
            f"Tree parent cycle detected: {' -> '.join(cycle)}", cycle[0]
        )
        self.cycle = tuple(cycle)


__all__ = [
    "CatalogStructuralError",
    "DanglingDependencyError",
    "DanglingTreeParentError",
    "DependencyCycleError",
    "DuplicateNodeIdError",
    "IllegalTreeParentTypeError",
    "TreeParentCycleError",
]
