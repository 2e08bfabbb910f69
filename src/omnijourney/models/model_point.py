# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Plane coordinate value type."""

from __future__ import annotations

from typing import NamedTuple


class ModelPoint(NamedTuple):
    """A point in the plane."""

    x: float
    y: float


__all__ = ["ModelPoint"]
