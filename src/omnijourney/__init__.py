# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OmniJourney - journey graph core.

Derives per-node journey status (locked / available / next / completed) from
an immutable node catalog and a set of completed node ids, validates catalog
structure, and projects spiral/tree layout coordinates.

Quick Start:
    >>> from omnijourney import compute_node_statuses, parse_catalog
    >>> catalog = parse_catalog({"nodes": [{"id": "a", "type": "spiral"}]})
    >>> statuses = compute_node_statuses(catalog.nodes, frozenset())
    >>> statuses["a"].status.value
    'next'
"""

from omnijourney.enums import EnumJourneyNodeType, EnumNodeStatus
from omnijourney.models import (
    ModelComputedNodeStatus,
    ModelJourneySettings,
    ModelNodeCatalog,
    ModelNodeRecord,
)
from omnijourney.nodes.node_catalog_validator_compute.handlers import (
    CatalogStructuralError,
    validate_catalog,
)
from omnijourney.nodes.node_journey_status_compute.handlers import (
    compute_node_statuses,
)
from omnijourney.nodes.node_next_recommendation_compute.handlers import (
    select_next_node_id,
)
from omnijourney.utils.catalog_loader import load_catalog, parse_catalog

__version__ = "0.1.0"

__all__ = [
    "CatalogStructuralError",
    "EnumJourneyNodeType",
    "EnumNodeStatus",
    "ModelComputedNodeStatus",
    "ModelJourneySettings",
    "ModelNodeCatalog",
    "ModelNodeRecord",
    "__version__",
    "compute_node_statuses",
    "load_catalog",
    "parse_catalog",
    "select_next_node_id",
    "validate_catalog",
]
