# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_identity_resolver_effect."""

from netswitch.nodes.node_identity_resolver_effect.handlers.handler_identity_resolver import (
    IdentityResolver,
    clean_ssid,
)
from netswitch.nodes.node_identity_resolver_effect.handlers.identity_cache import (
    IdentityCache,
)

__all__ = ["IdentityCache", "IdentityResolver", "clean_ssid"]
