# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Identity resolver: which WiFi network is the device on?

Platform SSID APIs are permission-gated and differ between OS versions, so
no single query is reliable.  The resolver walks a fixed fallback chain and
stops at the first usable answer:

1. Capabilities query.  Not associated with WiFi -> return immediately.
2. SSID from the capabilities' transport info.
3. Legacy/direct WiFi manager SSID.
4. Low-level system configuration SSID.
5. Manual override identity from the settings store.
6. Nothing: ``ssid=None, on_wifi=True`` (detection failure).

The order is most-precise-first and is part of the contract: reordering it
changes which SSID wins on devices where two strategies disagree.

Handler Contract:
-----------------
``resolve_identity()`` never raises.  Each platform query runs in a worker
thread under ``query_timeout_seconds``; a query that raises or times out is
treated as "no answer" and the chain moves on.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import TypeVar

from netswitch.enums.enum_identity_source import EnumIdentitySource
from netswitch.models.model_network_capabilities import ModelNetworkCapabilities
from netswitch.models.model_network_identity import ModelNetworkIdentity
from netswitch.nodes.node_identity_resolver_effect.handlers.identity_cache import (
    IdentityCache,
)
from netswitch.nodes.node_identity_resolver_effect.models import (
    ModelIdentityResolverConfig,
)
from netswitch.protocols import ProtocolNetworkPlatform, ProtocolSettingsStore

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def clean_ssid(raw: str | None, sentinels: frozenset[str]) -> str | None:
    """Return a usable SSID or None.

    Strips whitespace and one pair of surrounding double quotes (some
    platforms quote SSIDs), then rejects empty and sentinel values.
    """
    if raw is None:
        return None
    ssid = raw.strip()
    if len(ssid) >= 2 and ssid.startswith('"') and ssid.endswith('"'):
        ssid = ssid[1:-1].strip()
    if not ssid or ssid.lower() in sentinels:
        return None
    return ssid


class IdentityResolver:
    """Resolve the current ``ModelNetworkIdentity`` through the fallback chain.

    Example:
        ```python
        resolver = IdentityResolver(platform=SystemNetworkPlatform(), settings=store)
        identity = await resolver.resolve_identity()
        if identity.detection_failed:
            ...
        ```
    """

    def __init__(
        self,
        platform: ProtocolNetworkPlatform,
        settings: ProtocolSettingsStore,
        config: ModelIdentityResolverConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._platform = platform
        self._settings = settings
        self._config = config or ModelIdentityResolverConfig()
        self._cache = IdentityCache(self._config.cache_ttl_seconds, clock=clock)

    @property
    def config(self) -> ModelIdentityResolverConfig:
        return self._config

    def invalidate(self) -> None:
        """Force the next ``resolve_identity()`` through the platform."""
        if self._cache.invalidate():
            logger.debug("Identity cache invalidated")

    def last_known(self) -> ModelNetworkIdentity | None:
        """Last resolved identity, even if its cache entry has expired."""
        return self._cache.peek()

    async def resolve_identity(self) -> ModelNetworkIdentity:
        """Return the current identity.  Never raises."""
        cached = self._cache.get()
        if cached is not None:
            return cached

        try:
            identity = await self._resolve_uncached()
        except Exception:
            logger.exception("Unhandled exception in resolve_identity")
            return ModelNetworkIdentity()

        self._cache.put(identity)
        logger.debug(
            "Network identity resolved",
            extra={
                "ssid": identity.ssid,
                "on_wifi": identity.on_wifi,
                "validated_internet": identity.validated_internet,
                "source": identity.source.value,
            },
        )
        return identity

    # ------------------------------------------------------------------
    # Fallback chain
    # ------------------------------------------------------------------

    async def _resolve_uncached(self) -> ModelNetworkIdentity:
        sentinels = self._config.sentinel_ssids

        # Step 1: association check
        capabilities: ModelNetworkCapabilities | None = await self._query(
            "capabilities", self._platform.get_capabilities
        )
        validated = bool(
            capabilities is not None
            and capabilities.has_internet
            and capabilities.validated
        )
        if capabilities is not None and not capabilities.on_wifi:
            return ModelNetworkIdentity.not_on_wifi(validated_internet=validated)

        # Step 2: capabilities transport info
        if capabilities is not None:
            ssid = clean_ssid(capabilities.transport_ssid, sentinels)
            if ssid is not None:
                return self._identity(ssid, validated, EnumIdentitySource.CAPABILITIES)

        # Step 3: legacy WiFi manager
        ssid = clean_ssid(
            await self._query("wifi_manager", self._platform.get_wifi_manager_ssid),
            sentinels,
        )
        if ssid is not None:
            return self._identity(ssid, validated, EnumIdentitySource.WIFI_MANAGER)

        # Step 4: low-level system configuration
        ssid = clean_ssid(
            await self._query("system_config", self._platform.get_system_config_ssid),
            sentinels,
        )
        if ssid is not None:
            return self._identity(ssid, validated, EnumIdentitySource.SYSTEM_CONFIG)

        # Association unknown and no strategy saw a WiFi network.
        if capabilities is None:
            return ModelNetworkIdentity.not_on_wifi(validated_internet=validated)

        # Step 5: manual override
        override = self._manual_override()
        if override is not None:
            logger.debug(
                "SSID detection failed, using manual override identity",
                extra={"ssid": override},
            )
            return self._identity(override, validated, EnumIdentitySource.MANUAL_OVERRIDE)

        # Step 6: detection failure
        logger.info("On WiFi but SSID could not be determined by any method")
        return ModelNetworkIdentity(
            ssid=None,
            on_wifi=True,
            validated_internet=validated,
            source=EnumIdentitySource.NONE,
        )

    @staticmethod
    def _identity(
        ssid: str, validated: bool, source: EnumIdentitySource
    ) -> ModelNetworkIdentity:
        return ModelNetworkIdentity(
            ssid=ssid, on_wifi=True, validated_internet=validated, source=source
        )

    def _manual_override(self) -> str | None:
        try:
            raw = self._settings.get_manual_override()
        except Exception:
            logger.exception("Settings store failed reading manual override")
            return None
        return clean_ssid(raw, self._config.sentinel_ssids)

    async def _query(self, step: str, query: Callable[[], _T]) -> _T | None:
        """Run one blocking platform query in a thread, bounded by the timeout."""
        timeout = self._config.query_timeout_seconds
        try:
            return await asyncio.wait_for(asyncio.to_thread(query), timeout=timeout)
        except TimeoutError:
            logger.warning(
                "Platform query timed out",
                extra={"step": step, "timeout_seconds": timeout},
            )
        except Exception as exc:
            logger.warning(
                "Platform query failed",
                extra={"step": step, "error": f"{type(exc).__name__}: {exc}"},
            )
        return None


__all__ = ["IdentityResolver", "clean_ssid"]
