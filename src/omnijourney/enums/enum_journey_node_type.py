# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Journey node type enum."""

from enum import Enum


class EnumJourneyNodeType(str, Enum):
    """Which layout(s) a journey node belongs to.

    Attributes:
        SPIRAL: Placed on the polar spiral track only.
        TREE: Placed in the branch/tree layout only.
        HYBRID: Participates in both layouts.

    Note:
        Only TREE and HYBRID nodes may act as a tree parent.
    """

    SPIRAL = "spiral"
    TREE = "tree"
    HYBRID = "hybrid"

    @property
    def can_parent_tree(self) -> bool:
        """Whether nodes of this type are legal tree parents."""
        return self in (EnumJourneyNodeType.TREE, EnumJourneyNodeType.HYBRID)


__all__ = ["EnumJourneyNodeType"]
