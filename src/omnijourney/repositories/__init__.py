# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Journey state repositories."""

from omnijourney.repositories.repository_journey_state import (
    DEFAULT_SPIRAL_ORDER,
    InMemoryJourneyRepository,
    UnknownNodeError,
    default_settings_for,
)

__all__ = [
    "DEFAULT_SPIRAL_ORDER",
    "InMemoryJourneyRepository",
    "UnknownNodeError",
    "default_settings_for",
]
