# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Catalog envelope holding the ordered node list."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnijourney.models.model_node_record import ModelNodeRecord


class ModelNodeCatalog(BaseModel):
    """Immutable node catalog.

    Node order is significant: it is the catalog order used for deterministic
    traversal, error messages, and recommendation tie-breaks.

    Attributes:
        schema_version: Version of the catalog document format.
        generated_at: Optional authoring timestamp, carried verbatim.
        nodes: Catalog entries in insertion order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    schema_version: int = Field(default=1, ge=1)
    generated_at: str | None = None
    nodes: tuple[ModelNodeRecord, ...] = ()

    def node_ids(self) -> list[str]:
        """Return node ids in catalog order (duplicates preserved)."""
        return [node.id for node in self.nodes]

    def get_node(self, node_id: str) -> ModelNodeRecord | None:
        """Return the first node with the given id, or None."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None


__all__ = ["ModelNodeCatalog"]
