# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Testing utilities for netswitch.

Modules:
    mock_network: Mock implementations of the platform, resolver, pipeline,
        prober and consumer protocols
"""

from netswitch.testing.mock_network import (
    MockCommandRunner,
    MockEventSource,
    MockHostResolver,
    MockNetworkPlatform,
    MockProber,
    MockUrlConsumer,
    MockUrlPipeline,
    RecordingSleep,
)

__all__ = [
    "MockCommandRunner",
    "MockEventSource",
    "MockHostResolver",
    "MockNetworkPlatform",
    "MockProber",
    "MockUrlConsumer",
    "MockUrlPipeline",
    "RecordingSleep",
]
