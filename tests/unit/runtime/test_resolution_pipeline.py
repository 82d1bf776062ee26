# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for NetworkAwareUrlPipeline and the default wiring."""

from __future__ import annotations

import asyncio

import pytest

from netswitch.enums.enum_connection_mode import EnumConnectionMode
from netswitch.enums.enum_identity_source import EnumIdentitySource
from netswitch.enums.enum_transition_phase import EnumTransitionPhase
from netswitch.enums.enum_unidentified_network_policy import (
    EnumUnidentifiedNetworkPolicy,
)
from netswitch.enums.enum_url_kind import EnumUrlKind
from netswitch.models.model_network_capabilities import ModelNetworkCapabilities
from netswitch.protocols import ProtocolUrlResolutionPipeline
from netswitch.runtime.resolution_pipeline import NetworkAwareUrlPipeline
from netswitch.runtime.settings_store import InMemorySettingsStore
from netswitch.runtime.wiring import create_url_controller, create_url_pipeline
from netswitch.testing import MockHostResolver, MockNetworkPlatform, MockUrlConsumer

pytestmark = pytest.mark.unit


def _wifi(ssid: str | None) -> MockNetworkPlatform:
    return MockNetworkPlatform(
        capabilities=ModelNetworkCapabilities(
            on_wifi=True, has_internet=True, validated=True, transport_ssid=ssid
        )
    )


def _cellular() -> MockNetworkPlatform:
    return MockNetworkPlatform(
        capabilities=ModelNetworkCapabilities(
            on_wifi=False, has_internet=True, validated=True
        )
    )


class TestNetworkAwareUrlPipeline:
    def test_satisfies_protocol(self, settings_store: InMemorySettingsStore) -> None:
        pipeline = create_url_pipeline(settings_store, platform=_cellular())
        assert isinstance(pipeline, NetworkAwareUrlPipeline)
        assert isinstance(pipeline, ProtocolUrlResolutionPipeline)

    @pytest.mark.asyncio
    async def test_home_wifi_resolves_internal(
        self,
        settings_store: InMemorySettingsStore,
        home_platform: MockNetworkPlatform,
    ) -> None:
        decision = await create_url_pipeline(
            settings_store, platform=home_platform
        ).decide()
        assert decision.is_home is True
        assert decision.identity.ssid == "HomeNet"
        assert decision.identity.source is EnumIdentitySource.CAPABILITIES
        assert decision.resolved.url == "http://nvr.lan:5000"
        assert decision.resolved.kind is EnumUrlKind.INTERNAL

    @pytest.mark.asyncio
    async def test_foreign_wifi_resolves_external(
        self, settings_store: InMemorySettingsStore
    ) -> None:
        pipeline = create_url_pipeline(settings_store, platform=_wifi("CoffeeShop"))
        resolved = await pipeline.resolve_current()
        assert resolved.url == "https://nvr.example.org"
        assert resolved.kind is EnumUrlKind.EXTERNAL

    @pytest.mark.asyncio
    async def test_cellular_resolves_external(
        self, settings_store: InMemorySettingsStore
    ) -> None:
        resolved = await create_url_pipeline(
            settings_store, platform=_cellular()
        ).resolve_current()
        assert resolved.url == "https://nvr.example.org"

    @pytest.mark.asyncio
    async def test_forced_mode_skips_detection(
        self, settings_store: InMemorySettingsStore
    ) -> None:
        settings_store.set_connection_mode(EnumConnectionMode.FORCE_INTERNAL)
        resolved = await create_url_pipeline(
            settings_store, platform=_cellular()
        ).resolve_current()
        assert resolved.url == "http://nvr.lan:5000"

    @pytest.mark.asyncio
    async def test_undetectable_ssid_follows_policy(
        self, settings_store: InMemorySettingsStore
    ) -> None:
        platform = _wifi("<unknown ssid>")
        home = await create_url_pipeline(
            settings_store, platform=platform
        ).resolve_current()
        away = await create_url_pipeline(
            settings_store,
            platform=platform,
            unidentified_policy=EnumUnidentifiedNetworkPolicy.EXTERNAL,
        ).resolve_current()
        assert home.kind is EnumUrlKind.INTERNAL
        assert away.kind is EnumUrlKind.EXTERNAL

    @pytest.mark.asyncio
    async def test_settings_read_on_every_evaluation(
        self,
        settings_store: InMemorySettingsStore,
        home_platform: MockNetworkPlatform,
    ) -> None:
        pipeline = create_url_pipeline(settings_store, platform=home_platform)
        assert (await pipeline.resolve_current()).kind is EnumUrlKind.INTERNAL

        settings_store.remove_home_network("HomeNet")
        assert (await pipeline.resolve_current()).kind is EnumUrlKind.EXTERNAL

    @pytest.mark.asyncio
    async def test_invalidate_drops_cached_identity(
        self,
        settings_store: InMemorySettingsStore,
        home_platform: MockNetworkPlatform,
    ) -> None:
        pipeline = create_url_pipeline(settings_store, platform=home_platform)
        assert (await pipeline.resolve_current()).kind is EnumUrlKind.INTERNAL

        home_platform.capabilities = ModelNetworkCapabilities(
            on_wifi=False, has_internet=True, validated=True
        )
        assert (await pipeline.resolve_current()).kind is EnumUrlKind.INTERNAL

        pipeline.invalidate()
        assert (await pipeline.resolve_current()).kind is EnumUrlKind.EXTERNAL


class TestCreateUrlController:
    @pytest.mark.asyncio
    async def test_wired_controller_loads_home_url(
        self,
        settings_store: InMemorySettingsStore,
        home_platform: MockNetworkPlatform,
    ) -> None:
        consumer = MockUrlConsumer()
        controller = create_url_controller(
            settings_store,
            consumer,
            platform=home_platform,
            host_resolver=MockHostResolver({"dns.google": ["8.8.8.8"]}),
        )
        consumer.controller = controller
        assert not controller.is_running

        async with controller:
            snapshot = await _wait_loaded(controller)
        assert snapshot.phase is EnumTransitionPhase.LOADED
        assert consumer.loads == ["http://nvr.lan:5000"]


async def _wait_loaded(controller):
    for _ in range(400):
        snapshot = controller.snapshot()
        if snapshot.phase is EnumTransitionPhase.LOADED:
            return snapshot
        await asyncio.sleep(0.005)
    raise AssertionError(f"controller stuck in {controller.snapshot().phase}")
