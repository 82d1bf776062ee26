# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Policy for WiFi networks whose identity cannot be detected."""

from enum import Enum


class EnumUnidentifiedNetworkPolicy(str, Enum):
    """Classification applied when on WiFi but the SSID is unavailable.

    HOME:
        Treat the network as home.  Favors the common case of detection
        failing on the user's own router.
    EXTERNAL:
        Treat the network as foreign.
    """

    HOME = "home"
    EXTERNAL = "external"


__all__ = ["EnumUnidentifiedNetworkPolicy"]
