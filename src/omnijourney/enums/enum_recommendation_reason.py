# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Reason codes attached to the recommended next node."""

from enum import Enum


class EnumRecommendationReason(str, Enum):
    """Which selection rule picked the recommended node.

    Attributes:
        SPIRAL_CONTINUATION: First available spiral node at or after the
            current spiral order.
        SPIRAL_LOWEST_ORDER: Lowest-order available spiral node.
        TAG_OVERLAP: Best tag overlap with the current node.
        CATALOG_ORDER: No current node; first available node in catalog order.
    """

    SPIRAL_CONTINUATION = "spiral_continuation"
    SPIRAL_LOWEST_ORDER = "spiral_lowest_order"
    TAG_OVERLAP = "tag_overlap"
    CATALOG_ORDER = "catalog_order"


__all__ = ["EnumRecommendationReason"]
