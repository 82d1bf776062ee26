# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_connectivity_prober_effect."""

from netswitch.nodes.node_connectivity_prober_effect.handlers.handler_connectivity_prober import (
    ConnectivityProber,
)

__all__ = ["ConnectivityProber"]
