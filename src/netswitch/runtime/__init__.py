# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime layer: settings, pipeline, network monitor, wiring and launcher."""

from netswitch.runtime.network_monitor import NetworkMonitor
from netswitch.runtime.resolution_pipeline import NetworkAwareUrlPipeline
from netswitch.runtime.settings import ModelNetSwitchSettings
from netswitch.runtime.settings_store import InMemorySettingsStore
from netswitch.runtime.wiring import create_url_controller, create_url_pipeline

__all__ = [
    "InMemorySettingsStore",
    "ModelNetSwitchSettings",
    "NetworkAwareUrlPipeline",
    "NetworkMonitor",
    "create_url_controller",
    "create_url_pipeline",
]
