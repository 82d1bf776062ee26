# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_connectivity_prober_effect."""

from netswitch.nodes.node_connectivity_prober_effect.models.model_connectivity_prober_config import (
    ModelConnectivityProberConfig,
)

__all__ = ["ModelConnectivityProberConfig"]
