# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_identity_resolver_effect."""

from netswitch.nodes.node_identity_resolver_effect.models.model_identity_resolver_config import (
    ModelIdentityResolverConfig,
)

__all__ = ["ModelIdentityResolverConfig"]
