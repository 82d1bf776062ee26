# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""netswitch - network-aware internal/external URL resolution.

Decides which of two configured endpoints (a LAN URL and a public URL) a
client should use, based on the WiFi network the device is on, and drives a
content view between them without thrashing during network handoffs.

Quick Start:
    >>> from netswitch import InMemorySettingsStore, create_url_controller
    >>> store = InMemorySettingsStore(home_networks=["HomeNet"])
    >>> controller = create_url_controller(store, my_view)
    >>> async with controller:
    ...     ...
"""

from netswitch.enums import (
    EnumConnectionMode,
    EnumLoadErrorKind,
    EnumTransitionPhase,
    EnumUrlKind,
)
from netswitch.errors import ControllerNotStartedError, NetSwitchError
from netswitch.models import ModelEndpointConfig, ModelResolvedUrl
from netswitch.runtime import (
    InMemorySettingsStore,
    ModelNetSwitchSettings,
    create_url_controller,
)

__version__ = "0.1.0"

__all__ = [
    "ControllerNotStartedError",
    "EnumConnectionMode",
    "EnumLoadErrorKind",
    "EnumTransitionPhase",
    "EnumUrlKind",
    "InMemorySettingsStore",
    "ModelEndpointConfig",
    "ModelNetSwitchSettings",
    "ModelResolvedUrl",
    "NetSwitchError",
    "create_url_controller",
]
