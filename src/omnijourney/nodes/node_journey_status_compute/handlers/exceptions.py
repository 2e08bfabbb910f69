# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Exceptions for journey status handlers.

Error Codes:
    - STATUS_001: Catalog inconsistency found during status computation
"""

from __future__ import annotations


class JourneyLogicalInconsistencyError(Exception):
    """Raised when a dependency id is absent from the catalog at status time.

    A validated catalog never triggers this. Treating the missing dependency
    as satisfied could unlock a node prematurely, so computation stops.

    Attributes:
        message: Human-readable error description.
        code: Always "STATUS_001".
        node_id: Node declaring the dependency.
        missing_id: The dependency id that does not exist.
    """

    code = "STATUS_001"

    def __init__(self, node_id: str, missing_id: str) -> None:
        message = (
            f"Node '{node_id}' depends on '{missing_id}', which is not in the "
            "catalog; validate the catalog before computing statuses"
        )
        super().__init__(message)
        self.message = message
        self.node_id = node_id
        self.missing_id = missing_id


__all__ = ["JourneyLogicalInconsistencyError"]
