# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for IdentityResolver.

Tests the fallback chain order:
  capabilities -> wifi manager -> system config -> manual override -> nothing
and that failing, slow or sentinel answers move the chain along.
"""

from __future__ import annotations

import pytest

from netswitch.enums.enum_identity_source import EnumIdentitySource
from netswitch.models.model_network_capabilities import ModelNetworkCapabilities
from netswitch.nodes.node_identity_resolver_effect import (
    IdentityResolver,
    ModelIdentityResolverConfig,
    clean_ssid,
)
from netswitch.protocols import ProtocolNetworkPlatform, ProtocolSettingsStore
from netswitch.runtime.settings_store import InMemorySettingsStore
from netswitch.testing import MockNetworkPlatform

pytestmark = pytest.mark.unit

_NO_CACHE = ModelIdentityResolverConfig(cache_ttl_seconds=0.0)
_SENTINELS = ModelIdentityResolverConfig().sentinel_ssids


def _wifi(transport_ssid: str | None = None, *, validated: bool = True):
    return ModelNetworkCapabilities(
        on_wifi=True,
        has_internet=validated,
        validated=validated,
        transport_ssid=transport_ssid,
    )


def _resolver(
    platform: MockNetworkPlatform,
    store: InMemorySettingsStore | None = None,
    config: ModelIdentityResolverConfig = _NO_CACHE,
    clock=None,
) -> IdentityResolver:
    kwargs = {"clock": clock} if clock is not None else {}
    return IdentityResolver(
        platform, store or InMemorySettingsStore(), config, **kwargs
    )


class TestCleanSsid:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("HomeNet", "HomeNet"),
            ('"HomeNet"', "HomeNet"),
            ("  HomeNet ", "HomeNet"),
            ("<unknown ssid>", None),
            ("<UNKNOWN SSID>", None),
            ("0x", None),
            ('""', None),
            ("", None),
            (None, None),
        ],
    )
    def test_clean(self, raw: str | None, expected: str | None) -> None:
        assert clean_ssid(raw, _SENTINELS) == expected


class TestProtocolConformance:
    def test_mocks_satisfy_protocols(self) -> None:
        assert isinstance(MockNetworkPlatform(), ProtocolNetworkPlatform)
        assert isinstance(InMemorySettingsStore(), ProtocolSettingsStore)


class TestFallbackChain:
    @pytest.mark.asyncio
    async def test_capabilities_ssid_wins(self) -> None:
        platform = MockNetworkPlatform(_wifi("HomeNet"), wifi_manager_ssid="Other")
        identity = await _resolver(platform).resolve_identity()
        assert identity.ssid == "HomeNet"
        assert identity.source is EnumIdentitySource.CAPABILITIES
        assert identity.validated_internet is True
        assert platform.calls == ["capabilities"]

    @pytest.mark.asyncio
    async def test_not_on_wifi_returns_immediately(self) -> None:
        platform = MockNetworkPlatform(
            ModelNetworkCapabilities(on_wifi=False, has_internet=True, validated=True),
            wifi_manager_ssid="HomeNet",
        )
        identity = await _resolver(platform).resolve_identity()
        assert identity.on_wifi is False
        assert identity.ssid is None
        assert identity.validated_internet is True
        assert platform.calls == ["capabilities"]

    @pytest.mark.asyncio
    async def test_sentinel_falls_through_to_wifi_manager(self) -> None:
        platform = MockNetworkPlatform(
            _wifi("<unknown ssid>"), wifi_manager_ssid='"HomeNet"'
        )
        identity = await _resolver(platform).resolve_identity()
        assert identity.ssid == "HomeNet"
        assert identity.source is EnumIdentitySource.WIFI_MANAGER

    @pytest.mark.asyncio
    async def test_system_config_step(self) -> None:
        platform = MockNetworkPlatform(
            _wifi(None), wifi_manager_ssid="unknown ssid", system_config_ssid="Cabin"
        )
        identity = await _resolver(platform).resolve_identity()
        assert identity.ssid == "Cabin"
        assert identity.source is EnumIdentitySource.SYSTEM_CONFIG
        assert platform.calls == ["capabilities", "wifi_manager", "system_config"]

    @pytest.mark.asyncio
    async def test_manual_override_step(self) -> None:
        platform = MockNetworkPlatform(_wifi(None))
        store = InMemorySettingsStore(manual_override="HomeNet")
        identity = await _resolver(platform, store).resolve_identity()
        assert identity.ssid == "HomeNet"
        assert identity.on_wifi is True
        assert identity.source is EnumIdentitySource.MANUAL_OVERRIDE

    @pytest.mark.asyncio
    async def test_detection_failure(self) -> None:
        platform = MockNetworkPlatform(_wifi(None, validated=False))
        identity = await _resolver(platform).resolve_identity()
        assert identity.detection_failed is True
        assert identity.on_wifi is True
        assert identity.validated_internet is False
        assert identity.source is EnumIdentitySource.NONE

    @pytest.mark.asyncio
    async def test_ssid_without_capabilities_means_on_wifi(self) -> None:
        platform = MockNetworkPlatform(None, wifi_manager_ssid="HomeNet")
        identity = await _resolver(platform).resolve_identity()
        assert identity.on_wifi is True
        assert identity.ssid == "HomeNet"

    @pytest.mark.asyncio
    async def test_nothing_known_means_not_on_wifi(self) -> None:
        platform = MockNetworkPlatform(None)
        store = InMemorySettingsStore(manual_override="HomeNet")
        identity = await _resolver(platform, store).resolve_identity()
        assert identity.on_wifi is False
        assert identity.ssid is None


class TestFailureHandling:
    @pytest.mark.asyncio
    async def test_raising_query_moves_on(self) -> None:
        platform = MockNetworkPlatform(
            _wifi(None), system_config_ssid="Cabin", failing=["wifi_manager"]
        )
        identity = await _resolver(platform).resolve_identity()
        assert identity.ssid == "Cabin"

    @pytest.mark.asyncio
    async def test_raising_capabilities_is_unknown_association(self) -> None:
        platform = MockNetworkPlatform(
            _wifi("HomeNet"), wifi_manager_ssid="HomeNet", failing=["capabilities"]
        )
        identity = await _resolver(platform).resolve_identity()
        assert identity.ssid == "HomeNet"
        assert identity.source is EnumIdentitySource.WIFI_MANAGER
        assert identity.validated_internet is False

    @pytest.mark.asyncio
    async def test_slow_query_times_out(self) -> None:
        platform = MockNetworkPlatform(
            _wifi(None),
            wifi_manager_ssid="TooLate",
            system_config_ssid="Cabin",
            blocking=["wifi_manager"],
            block_seconds=0.5,
        )
        config = ModelIdentityResolverConfig(
            cache_ttl_seconds=0.0, query_timeout_seconds=0.05
        )
        identity = await _resolver(platform, config=config).resolve_identity()
        assert identity.ssid == "Cabin"


class TestCaching:
    @pytest.mark.asyncio
    async def test_cached_within_ttl(self) -> None:
        now = [100.0]
        platform = MockNetworkPlatform(_wifi("HomeNet"))
        resolver = _resolver(
            platform,
            config=ModelIdentityResolverConfig(cache_ttl_seconds=3.0),
            clock=lambda: now[0],
        )
        await resolver.resolve_identity()
        platform.capabilities = _wifi("CoffeeShop")

        now[0] += 2.0
        assert (await resolver.resolve_identity()).ssid == "HomeNet"

        now[0] += 1.5
        assert (await resolver.resolve_identity()).ssid == "CoffeeShop"

    @pytest.mark.asyncio
    async def test_invalidate_forces_platform_query(self) -> None:
        platform = MockNetworkPlatform(_wifi("HomeNet"))
        resolver = _resolver(
            platform, config=ModelIdentityResolverConfig(cache_ttl_seconds=5.0)
        )
        await resolver.resolve_identity()
        platform.capabilities = _wifi("CoffeeShop")
        resolver.invalidate()
        assert (await resolver.resolve_identity()).ssid == "CoffeeShop"
        assert platform.calls.count("capabilities") == 2

    @pytest.mark.asyncio
    async def test_last_known_survives_expiry(self) -> None:
        now = [0.0]
        platform = MockNetworkPlatform(_wifi("HomeNet"))
        resolver = _resolver(
            platform,
            config=ModelIdentityResolverConfig(cache_ttl_seconds=1.0),
            clock=lambda: now[0],
        )
        assert resolver.last_known() is None
        await resolver.resolve_identity()
        now[0] = 50.0
        known = resolver.last_known()
        assert known is not None
        assert known.ssid == "HomeNet"
