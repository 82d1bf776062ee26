# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Platform network event types."""

from enum import Enum


class EnumNetworkEventType(str, Enum):
    """Kinds of platform network callbacks fed into the controller."""

    AVAILABLE = "available"
    LOST = "lost"
    CAPABILITIES_CHANGED = "capabilities_changed"


__all__ = ["EnumNetworkEventType"]
