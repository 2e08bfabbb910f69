# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""In-memory journey state repository.

Implements both ProtocolCatalogSource and ProtocolJourneyStateStore over a
loaded catalog. Mutations are serialized with a lock; reads hand out immutable
snapshots, so a status computation never observes a half-applied mutation.

Persistent stores (local database, remote API) are external collaborators and
only need to satisfy the same protocols.

Usage:
    >>> repo = InMemoryJourneyRepository(catalog)
    >>> repo.mark_completed("ego_formation")
    >>> statuses = query_node_statuses(repo, repo)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence

from omnijourney.enums import EnumJourneyNodeType
from omnijourney.models import ModelJourneySettings, ModelNodeCatalog, ModelNodeRecord
from omnijourney.settings import JourneyEngineSettings

logger = logging.getLogger(__name__)

DEFAULT_SPIRAL_ORDER: int = 1


class UnknownNodeError(KeyError):
    """Raised when a mutation names a node id absent from the catalog."""

    def __init__(self, node_id: str) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Unknown journey node: {self.node_id}"


def default_settings_for(
    nodes: Sequence[ModelNodeRecord],
    engine_settings: JourneyEngineSettings | None = None,
) -> ModelJourneySettings:
    """Initial settings for a freshly loaded catalog.

    The current node is the first spiral-type node in catalog order and the
    current spiral order is that node's order (1 when it has no placement or
    there is no spiral node). ``prefer_spiral_continuation`` comes from
    ``engine_settings`` (loaded from the environment when None).
    """
    if engine_settings is None:
        engine_settings = JourneyEngineSettings()
    prefer = engine_settings.prefer_spiral_continuation

    first_spiral = next(
        (node for node in nodes if node.type is EnumJourneyNodeType.SPIRAL), None
    )
    if first_spiral is None:
        return ModelJourneySettings(
            current_spiral_order=DEFAULT_SPIRAL_ORDER,
            prefer_spiral_continuation=prefer,
        )

    spiral = first_spiral.spiral_position
    return ModelJourneySettings(
        current_node_id=first_spiral.id,
        current_spiral_order=spiral.order if spiral is not None else DEFAULT_SPIRAL_ORDER,
        prefer_spiral_continuation=prefer,
    )


class InMemoryJourneyRepository:
    """Thread-safe in-memory catalog source and journey state store.

    Attributes:
        catalog: The immutable catalog this repository serves.
    """

    def __init__(
        self,
        catalog: ModelNodeCatalog,
        completed_ids: Iterable[str] = (),
        settings: ModelJourneySettings | None = None,
        engine_settings: JourneyEngineSettings | None = None,
    ) -> None:
        self.catalog = catalog
        self._known_ids = frozenset(catalog.node_ids())
        self._lock = threading.Lock()

        completed = set(completed_ids)
        for node_id in completed:
            self._require_known(node_id)
        self._completed: frozenset[str] = frozenset(completed)
        if settings is None:
            settings = default_settings_for(catalog.nodes, engine_settings)
        self._settings = settings

    def _require_known(self, node_id: str) -> None:
        if node_id not in self._known_ids:
            raise UnknownNodeError(node_id)

    # --- ProtocolCatalogSource ---

    def list_nodes(self) -> Sequence[ModelNodeRecord]:
        return self.catalog.nodes

    def list_completed_ids(self) -> frozenset[str]:
        with self._lock:
            return self._completed

    # --- ProtocolJourneyStateStore ---

    def mark_completed(self, node_id: str, completed: bool = True) -> None:
        """Add or remove ``node_id`` from the completion set.

        Raises:
            UnknownNodeError: ``node_id`` is not in the catalog.
        """
        self._require_known(node_id)
        with self._lock:
            if completed:
                self._completed = self._completed | {node_id}
            else:
                self._completed = self._completed - {node_id}
        logger.info(
            "Journey node completion changed",
            extra={"node_id": node_id, "completed": completed},
        )

    def set_current_node(self, node_id: str) -> None:
        """Record the node the user is focused on.

        Raises:
            UnknownNodeError: ``node_id`` is not in the catalog.
        """
        self._require_known(node_id)
        with self._lock:
            self._settings = self._settings.model_copy(update={"current_node_id": node_id})
        logger.info("Current journey node set", extra={"node_id": node_id})

    def set_current_spiral_order(self, order: int | None) -> None:
        with self._lock:
            self._settings = self._settings.model_copy(
                update={"current_spiral_order": order}
            )
        logger.info("Current spiral order set", extra={"spiral_order": order})

    def set_prefer_spiral_continuation(self, prefer: bool) -> None:
        with self._lock:
            self._settings = self._settings.model_copy(
                update={"prefer_spiral_continuation": prefer}
            )

    def get_settings(self) -> ModelJourneySettings:
        with self._lock:
            return self._settings


__all__ = [
    "DEFAULT_SPIRAL_ORDER",
    "InMemoryJourneyRepository",
    "UnknownNodeError",
    "default_settings_for",
]
