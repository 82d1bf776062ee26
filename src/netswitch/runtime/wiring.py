# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Default object graph for netswitch.

Wires the decision nodes to the operating-system clients:

    SystemNetworkPlatform --> IdentityResolver --> NetworkAwareUrlPipeline
    SystemNetworkPlatform + AsyncioHostResolver --> ConnectivityProber
    pipeline + prober + consumer --> UrlTransitionController

Every dependency can be replaced; tests pass fakes for the platform and the
host resolver.
"""

from __future__ import annotations

import logging

from netswitch.clients.client_dns_resolver import AsyncioHostResolver
from netswitch.clients.client_system_network import SystemNetworkPlatform
from netswitch.enums.enum_unidentified_network_policy import (
    EnumUnidentifiedNetworkPolicy,
)
from netswitch.nodes.node_connectivity_prober_effect import (
    ConnectivityProber,
    ModelConnectivityProberConfig,
)
from netswitch.nodes.node_identity_resolver_effect import (
    IdentityResolver,
    ModelIdentityResolverConfig,
)
from netswitch.nodes.node_url_transition_reducer import (
    ModelTransitionControllerConfig,
    UrlTransitionController,
)
from netswitch.nodes.node_url_transition_reducer.handlers.handler_transition_controller import (
    StatusListener,
)
from netswitch.protocols import (
    ProtocolConnectivityProber,
    ProtocolHostResolver,
    ProtocolNetworkEventSource,
    ProtocolNetworkPlatform,
    ProtocolSettingsStore,
    ProtocolUrlConsumer,
)
from netswitch.runtime.resolution_pipeline import NetworkAwareUrlPipeline

logger = logging.getLogger(__name__)


def create_url_pipeline(
    settings_store: ProtocolSettingsStore,
    *,
    platform: ProtocolNetworkPlatform | None = None,
    identity_config: ModelIdentityResolverConfig | None = None,
    unidentified_policy: EnumUnidentifiedNetworkPolicy = EnumUnidentifiedNetworkPolicy.HOME,
) -> NetworkAwareUrlPipeline:
    """Build identity resolver + pipeline over ``platform``."""
    resolver = IdentityResolver(
        platform=platform or SystemNetworkPlatform(),
        settings=settings_store,
        config=identity_config,
    )
    return NetworkAwareUrlPipeline(
        resolver, settings_store, unidentified_policy=unidentified_policy
    )


def create_url_controller(
    settings_store: ProtocolSettingsStore,
    consumer: ProtocolUrlConsumer,
    *,
    platform: ProtocolNetworkPlatform | None = None,
    host_resolver: ProtocolHostResolver | None = None,
    config: ModelTransitionControllerConfig | None = None,
    event_source: ProtocolNetworkEventSource | None = None,
    identity_config: ModelIdentityResolverConfig | None = None,
    prober_config: ModelConnectivityProberConfig | None = None,
    unidentified_policy: EnumUnidentifiedNetworkPolicy = EnumUnidentifiedNetworkPolicy.HOME,
    status_listener: StatusListener | None = None,
) -> UrlTransitionController:
    """Wire the default graph and return an unstarted controller.

    One platform instance is shared by the identity resolver and the
    prober.  The caller owns the returned controller and must ``close()``
    it.
    """
    platform = platform or SystemNetworkPlatform()
    pipeline = create_url_pipeline(
        settings_store,
        platform=platform,
        identity_config=identity_config,
        unidentified_policy=unidentified_policy,
    )
    prober: ProtocolConnectivityProber = ConnectivityProber(
        platform, host_resolver or AsyncioHostResolver(), prober_config
    )
    logger.debug(
        "URL controller wired",
        extra={
            "platform": type(platform).__name__,
            "event_source": type(event_source).__name__ if event_source else None,
            "unidentified_policy": unidentified_policy.value,
        },
    )
    return UrlTransitionController(
        pipeline,
        prober,
        consumer,
        config,
        event_source=event_source,
        status_listener=status_listener,
    )


__all__ = ["create_url_controller", "create_url_pipeline"]
