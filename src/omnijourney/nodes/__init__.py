# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Compute and orchestrator nodes for the journey core.

Each node package keeps its logic in ``handlers`` (pure functions) and its
node-local data types in ``models``.
"""
