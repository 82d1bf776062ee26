# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Pytest configuration and fixtures for netswitch tests.

Shared fixtures for the decision nodes, the transition controller and the
runtime layer.
"""

from __future__ import annotations

import pytest

from netswitch.enums.enum_url_kind import EnumUrlKind
from netswitch.models.model_endpoint_config import ModelEndpointConfig
from netswitch.models.model_network_capabilities import ModelNetworkCapabilities
from netswitch.models.model_resolved_url import ModelResolvedUrl
from netswitch.runtime.settings_store import InMemorySettingsStore
from netswitch.testing import MockNetworkPlatform

# =========================================================================
# Endpoints
# =========================================================================

INTERNAL_URL = "http://nvr.lan:5000"
EXTERNAL_URL = "https://nvr.example.org"


@pytest.fixture
def endpoints() -> ModelEndpointConfig:
    return ModelEndpointConfig(internal_url=INTERNAL_URL, external_url=EXTERNAL_URL)


@pytest.fixture
def internal_url() -> ModelResolvedUrl:
    return ModelResolvedUrl(url=INTERNAL_URL, kind=EnumUrlKind.INTERNAL)


@pytest.fixture
def external_url() -> ModelResolvedUrl:
    return ModelResolvedUrl(url=EXTERNAL_URL, kind=EnumUrlKind.EXTERNAL)


# =========================================================================
# Settings and platform
# =========================================================================


@pytest.fixture
def settings_store(endpoints: ModelEndpointConfig) -> InMemorySettingsStore:
    return InMemorySettingsStore(endpoints=endpoints, home_networks=["HomeNet"])


@pytest.fixture
def home_platform() -> MockNetworkPlatform:
    """Platform reporting the home WiFi with validated internet."""
    return MockNetworkPlatform(
        capabilities=ModelNetworkCapabilities(
            on_wifi=True, has_internet=True, validated=True, transport_ssid="HomeNet"
        )
    )
