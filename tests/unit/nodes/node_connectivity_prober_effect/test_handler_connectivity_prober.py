# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ConnectivityProber."""

from __future__ import annotations

import time

import pytest
from pydantic import ValidationError

from netswitch.models.model_network_capabilities import ModelNetworkCapabilities
from netswitch.nodes.node_connectivity_prober_effect import (
    ConnectivityProber,
    ModelConnectivityProberConfig,
)
from netswitch.protocols import ProtocolConnectivityProber, ProtocolHostResolver
from netswitch.testing import MockHostResolver, MockNetworkPlatform

pytestmark = pytest.mark.unit

PRIMARY = "probe-a.test"
SECONDARY = "probe-b.test"
_CONFIG = ModelConnectivityProberConfig(probe_hosts=(PRIMARY, SECONDARY))


def _prober(
    resolver: MockHostResolver,
    platform: MockNetworkPlatform | None = None,
    config: ModelConnectivityProberConfig = _CONFIG,
) -> ConnectivityProber:
    return ConnectivityProber(platform or MockNetworkPlatform(), resolver, config)


class TestConfig:
    def test_blank_host_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelConnectivityProberConfig(probe_hosts=("dns.google", " "))

    def test_mock_resolver_satisfies_protocol(self) -> None:
        assert isinstance(MockHostResolver(), ProtocolHostResolver)

    def test_prober_satisfies_protocol(self) -> None:
        prober = _prober(MockHostResolver())
        assert isinstance(prober, ProtocolConnectivityProber)


class TestProbeReachability:
    @pytest.mark.asyncio
    async def test_primary_success(self) -> None:
        resolver = MockHostResolver({PRIMARY: ["192.0.2.1"]})
        assert await _prober(resolver).probe_reachability(1.0) is True
        assert resolver.calls == [PRIMARY]

    @pytest.mark.asyncio
    async def test_secondary_after_primary_failure(self) -> None:
        resolver = MockHostResolver({SECONDARY: ["192.0.2.2"]})
        assert await _prober(resolver).probe_reachability(1.0) is True
        assert resolver.calls == [PRIMARY, SECONDARY]

    @pytest.mark.asyncio
    async def test_secondary_retried_once(self) -> None:
        resolver = MockHostResolver(
            {SECONDARY: ["192.0.2.2"]}, failures={SECONDARY: 1}
        )
        assert await _prober(resolver).probe_reachability(1.0) is True
        assert resolver.calls == [PRIMARY, SECONDARY, SECONDARY]

    @pytest.mark.asyncio
    async def test_all_attempts_fail(self) -> None:
        resolver = MockHostResolver()
        assert await _prober(resolver).probe_reachability(1.0) is False
        assert resolver.calls == [PRIMARY, SECONDARY, SECONDARY]

    @pytest.mark.asyncio
    async def test_total_budget_bounds_attempts(self) -> None:
        resolver = MockHostResolver(
            {PRIMARY: ["192.0.2.1"], SECONDARY: ["192.0.2.2"]}, delay_seconds=0.5
        )
        started = time.monotonic()
        assert await _prober(resolver).probe_reachability(0.05) is False
        assert time.monotonic() - started < 0.4
        assert resolver.calls[0] == PRIMARY


class TestInternetValidated:
    @pytest.mark.parametrize(
        ("capabilities", "expected"),
        [
            (ModelNetworkCapabilities(on_wifi=True, has_internet=True, validated=True), True),
            (ModelNetworkCapabilities(on_wifi=False, has_internet=True, validated=True), True),
            (ModelNetworkCapabilities(on_wifi=True, has_internet=True, validated=False), False),
            (ModelNetworkCapabilities(on_wifi=True, has_internet=False, validated=True), False),
            (None, False),
        ],
    )
    def test_flag(
        self, capabilities: ModelNetworkCapabilities | None, expected: bool
    ) -> None:
        prober = _prober(MockHostResolver(), MockNetworkPlatform(capabilities))
        assert prober.is_internet_validated() is expected

    def test_platform_error_is_not_validated(self) -> None:
        platform = MockNetworkPlatform(failing=["capabilities"])
        assert _prober(MockHostResolver(), platform).is_internet_validated() is False
