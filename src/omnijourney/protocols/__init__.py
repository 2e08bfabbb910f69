# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Boundary protocols for the journey core's external collaborators.

The core only reads through these interfaces. Persistence, locking, and the
meaning of "current node" storage belong to the implementation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from omnijourney.models import ModelJourneySettings, ModelNodeRecord


@runtime_checkable
class ProtocolCatalogSource(Protocol):
    """Read access to the node catalog and the completion set.

    Both reads must be consistent for the duration of one status computation.
    """

    def list_nodes(self) -> Sequence[ModelNodeRecord]:
        """Return catalog entries in catalog order."""
        ...

    def list_completed_ids(self) -> frozenset[str]:
        """Return a snapshot of completed node ids."""
        ...


@runtime_checkable
class ProtocolJourneyStateStore(Protocol):
    """Mutation and settings access owned by the persistence collaborator."""

    def mark_completed(self, node_id: str, completed: bool = True) -> None:
        """Add or remove ``node_id`` from the completion set."""
        ...

    def set_current_node(self, node_id: str) -> None:
        """Record the node the user is focused on."""
        ...

    def set_current_spiral_order(self, order: int | None) -> None:
        """Record the spiral order to resume from."""
        ...

    def get_settings(self) -> ModelJourneySettings:
        """Return the current recommendation settings."""
        ...


__all__ = ["ProtocolCatalogSource", "ProtocolJourneyStateStore"]
