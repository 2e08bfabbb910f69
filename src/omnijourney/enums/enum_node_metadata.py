# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Authoring metadata enums carried on catalog nodes.

These values are carried through the catalog unchanged; the status and
recommendation engines never branch on them.
"""

from enum import Enum


class EnumNodePhase(str, Enum):
    """Journey phase a node belongs to."""

    EGO = "ego"
    PERSONA = "persona"
    SHADOW = "shadow"
    INNER_OTHER = "inner_other"
    DISINTEGRATION = "disintegration"
    RECENTER = "recenter"
    INTEGRATION = "integration"
    REENTRY = "reentry"
    DOMAIN = "domain"
    META = "meta"


class EnumNodeDomain(str, Enum):
    """Life domain a node addresses."""

    META = "meta"
    INNER = "inner"
    WORK = "work"
    RELATIONSHIPS = "relationships"
    MEANING = "meaning"
    BODY = "body"


__all__ = ["EnumNodeDomain", "EnumNodePhase"]
