# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Computed node status enum."""

from enum import Enum


class EnumNodeStatus(str, Enum):
    """User-facing status of a journey node.

    Status is always derived from the catalog and the completion set and is
    never persisted.

    Attributes:
        LOCKED: At least one dependency is not completed.
        AVAILABLE: All dependencies completed, node itself not completed.
        NEXT: The single recommended available node.
        COMPLETED: Node is in the completion set.
    """

    LOCKED = "locked"
    AVAILABLE = "available"
    NEXT = "next"
    COMPLETED = "completed"


__all__ = ["EnumNodeStatus"]
