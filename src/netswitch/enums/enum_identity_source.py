# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Which detection strategy produced a network identity."""

from enum import Enum


class EnumIdentitySource(str, Enum):
    """Origin of the SSID in a ``ModelNetworkIdentity``.

    Members are listed in fallback-chain order.
    """

    CAPABILITIES = "capabilities"
    WIFI_MANAGER = "wifi_manager"
    SYSTEM_CONFIG = "system_config"
    MANUAL_OVERRIDE = "manual_override"
    NONE = "none"


__all__ = ["EnumIdentitySource"]
