# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Catalog Validator Compute Node package."""

from omnijourney.nodes.node_catalog_validator_compute.handlers import (
    CatalogStructuralError,
    validate_catalog,
)
from omnijourney.nodes.node_catalog_validator_compute.models import (
    ModelCatalogValidationReport,
    ModelSpacingThresholds,
    ModelSpacingWarning,
)

__all__ = [
    "CatalogStructuralError",
    "ModelCatalogValidationReport",
    "ModelSpacingThresholds",
    "ModelSpacingWarning",
    "validate_catalog",
]
