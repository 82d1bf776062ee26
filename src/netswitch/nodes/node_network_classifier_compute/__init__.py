# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""NetworkClassifierCompute — maps a network identity onto home / not home."""

from netswitch.nodes.node_network_classifier_compute.handlers import (
    classify_network,
    is_home_network,
    normalize_network_name,
)

__all__ = ["classify_network", "is_home_network", "normalize_network_name"]
