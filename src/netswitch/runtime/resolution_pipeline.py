# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resolution pipeline: identity -> classifier -> URL engine.

Settings are read on every evaluation; nothing here caches configuration.
The only cache is the identity resolver's short TTL, which ``invalidate()``
drops.
"""

from __future__ import annotations

import logging

from netswitch.enums.enum_unidentified_network_policy import (
    EnumUnidentifiedNetworkPolicy,
)
from netswitch.models.model_resolved_url import ModelResolvedUrl
from netswitch.models.model_url_decision import ModelUrlDecision
from netswitch.nodes.node_identity_resolver_effect import IdentityResolver
from netswitch.nodes.node_network_classifier_compute import classify_network
from netswitch.nodes.node_url_resolution_compute import resolve_url
from netswitch.protocols import ProtocolSettingsStore
from netswitch.utils.url_display import safe_url_display

logger = logging.getLogger(__name__)


class NetworkAwareUrlPipeline:
    """``ProtocolUrlResolutionPipeline`` built from the decision nodes."""

    def __init__(
        self,
        identity_resolver: IdentityResolver,
        settings: ProtocolSettingsStore,
        *,
        unidentified_policy: EnumUnidentifiedNetworkPolicy = EnumUnidentifiedNetworkPolicy.HOME,
    ) -> None:
        self._identity_resolver = identity_resolver
        self._settings = settings
        self._unidentified_policy = unidentified_policy

    async def resolve_current(self) -> ModelResolvedUrl:
        decision = await self.decide()
        return decision.resolved

    async def decide(self) -> ModelUrlDecision:
        """Run one full evaluation and return every intermediate value."""
        identity = await self._identity_resolver.resolve_identity()
        mode = self._settings.get_connection_mode()
        is_home = classify_network(
            identity,
            mode,
            self._settings.get_home_networks(),
            self._settings.get_manual_override(),
            unidentified_policy=self._unidentified_policy,
        )
        resolved = resolve_url(is_home, mode, self._settings.get_endpoint_config())

        logger.info(
            "URL resolved",
            extra={
                "ssid": identity.ssid,
                "on_wifi": identity.on_wifi,
                "source": identity.source.value,
                "mode": mode.value,
                "is_home": is_home,
                "url": safe_url_display(resolved.url),
                "url_kind": resolved.kind.value,
            },
        )
        return ModelUrlDecision(
            identity=identity, mode=mode, is_home=is_home, resolved=resolved
        )

    def invalidate(self) -> None:
        self._identity_resolver.invalidate()


__all__ = ["NetworkAwareUrlPipeline"]
