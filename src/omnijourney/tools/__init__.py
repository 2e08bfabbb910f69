# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
OmniJourney tools package.

Provides CLI tools for journey catalog authoring and CI validation.
"""

from omnijourney.tools.catalog_validator import main, main_cli

__all__ = ["main", "main_cli"]
