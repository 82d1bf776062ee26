# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_network_classifier_compute."""

from netswitch.nodes.node_network_classifier_compute.handlers.handler_network_classifier import (
    classify_network,
    is_home_network,
    normalize_network_name,
)

__all__ = ["classify_network", "is_home_network", "normalize_network_name"]
