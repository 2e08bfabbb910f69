# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Utility modules for omnijourney."""

from omnijourney.utils.catalog_loader import (
    MAX_CATALOG_SIZE_BYTES,
    CatalogLoadError,
    check_against_schema,
    load_catalog,
    parse_catalog,
)

__all__ = [
    "MAX_CATALOG_SIZE_BYTES",
    "CatalogLoadError",
    "check_against_schema",
    "load_catalog",
    "parse_catalog",
]
