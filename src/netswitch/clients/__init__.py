# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transport clients for netswitch.

Nodes must not import ``subprocess`` or ``socket`` directly; they receive
these clients through the protocols in ``netswitch.protocols``.
"""

from netswitch.clients.client_dns_resolver import AsyncioHostResolver
from netswitch.clients.client_system_network import SystemNetworkPlatform
from netswitch.clients.command_runner import CommandResult, SubprocessRunner

__all__ = [
    "AsyncioHostResolver",
    "CommandResult",
    "SubprocessRunner",
    "SystemNetworkPlatform",
]
