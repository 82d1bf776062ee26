# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Value models shared across netswitch nodes."""

from netswitch.models.model_endpoint_config import ModelEndpointConfig
from netswitch.models.model_network_capabilities import ModelNetworkCapabilities
from netswitch.models.model_network_event import ModelNetworkEvent
from netswitch.models.model_network_identity import ModelNetworkIdentity
from netswitch.models.model_resolved_url import ModelResolvedUrl
from netswitch.models.model_url_decision import ModelUrlDecision

__all__ = [
    "ModelEndpointConfig",
    "ModelNetworkCapabilities",
    "ModelNetworkEvent",
    "ModelNetworkIdentity",
    "ModelResolvedUrl",
    "ModelUrlDecision",
]
