# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ConnectivityProberEffect — validated-internet flag and DNS reachability probe."""

from netswitch.nodes.node_connectivity_prober_effect.handlers import ConnectivityProber
from netswitch.nodes.node_connectivity_prober_effect.models import (
    ModelConnectivityProberConfig,
)

__all__ = ["ConnectivityProber", "ModelConnectivityProberConfig"]
