# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""IdentityResolverEffect — WiFi identity detection through an ordered fallback chain.

Determines the current SSID and WiFi association under incomplete platform
permissions, returning a bounded, deterministic answer even when every
detection strategy fails.
"""

from netswitch.nodes.node_identity_resolver_effect.handlers import (
    IdentityResolver,
    clean_ssid,
)
from netswitch.nodes.node_identity_resolver_effect.models import (
    ModelIdentityResolverConfig,
)

__all__ = ["IdentityResolver", "ModelIdentityResolverConfig", "clean_ssid"]
