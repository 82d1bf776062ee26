# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared protocol definitions for netswitch.

These protocols define the seams between the decision core and the outside
world: the operating system, the settings store and the consuming content
view.  Nodes depend only on these protocols; concrete transports live in
``netswitch.clients`` and are injected by ``netswitch.runtime.wiring``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from netswitch.clients.command_runner import CommandResult
    from netswitch.enums.enum_connection_mode import EnumConnectionMode
    from netswitch.models.model_endpoint_config import ModelEndpointConfig
    from netswitch.models.model_network_capabilities import ModelNetworkCapabilities
    from netswitch.models.model_network_event import ModelNetworkEvent
    from netswitch.models.model_resolved_url import ModelResolvedUrl


@runtime_checkable
class ProtocolNetworkPlatform(Protocol):
    """Best-effort, version-dependent platform network queries.

    Methods are synchronous and may block; callers run them in a worker
    thread under a timeout.  Each method returns ``None`` when the platform
    cannot answer.
    """

    def get_capabilities(self) -> ModelNetworkCapabilities | None:
        """Return the active network's capabilities (richest API)."""
        ...

    def get_wifi_manager_ssid(self) -> str | None:
        """Return the SSID from the legacy/direct WiFi manager API."""
        ...

    def get_system_config_ssid(self) -> str | None:
        """Return the SSID from low-level system configuration keys."""
        ...


@runtime_checkable
class ProtocolNetworkEventSource(Protocol):
    """Source of platform network callbacks.

    Listeners may be invoked from any thread.
    """

    def add_listener(self, listener: Callable[[ModelNetworkEvent], None]) -> None:
        """Register a callback for network events."""
        ...

    def remove_listener(self, listener: Callable[[ModelNetworkEvent], None]) -> None:
        """Unregister a previously registered callback."""
        ...


@runtime_checkable
class ProtocolHostResolver(Protocol):
    """DNS resolution primitive used by the connectivity prober."""

    async def resolve(self, host: str) -> list[str]:
        """Resolve ``host`` to a list of addresses.

        Raises:
            OSError: If resolution fails.
        """
        ...


@runtime_checkable
class ProtocolConnectivityProber(Protocol):
    """Connectivity gate consulted before the controller dispatches a load."""

    def is_internet_validated(self) -> bool:
        """Return the platform's validated-internet flag.  May block."""
        ...

    async def probe_reachability(self, timeout_seconds: float) -> bool:
        """Return True if a DNS probe succeeds within ``timeout_seconds``."""
        ...


@runtime_checkable
class ProtocolSettingsStore(Protocol):
    """Synchronous reads of user configuration.

    No caching contract is assumed: every call must return current values,
    and implementations must tolerate concurrent writes.
    """

    def get_connection_mode(self) -> EnumConnectionMode: ...

    def get_endpoint_config(self) -> ModelEndpointConfig: ...

    def get_home_networks(self) -> frozenset[str]: ...

    def get_manual_override(self) -> str | None: ...


@runtime_checkable
class ProtocolUrlConsumer(Protocol):
    """The content view driven by the transition controller."""

    def on_resolved_url_changed(self, url: str) -> None:
        """Instruction to load ``url``.

        The consumer reports the outcome back through
        ``UrlTransitionController.report_load_succeeded`` or
        ``report_load_failed``.
        """
        ...


@runtime_checkable
class ProtocolUrlResolutionPipeline(Protocol):
    """Identity -> classification -> URL, evaluated on demand."""

    async def resolve_current(self) -> ModelResolvedUrl:
        """Return the URL that should be active right now."""
        ...

    def invalidate(self) -> None:
        """Drop any short-lived cached identity."""
        ...


@runtime_checkable
class ProtocolCommandRunner(Protocol):
    """Runs an external command; allows faking subprocess calls in tests."""

    def run(self, cmd: Sequence[str], timeout: float | None = None) -> CommandResult:
        """Run ``cmd`` and return its captured output.  Never raises."""
        ...


__all__ = [
    "ProtocolCommandRunner",
    "ProtocolConnectivityProber",
    "ProtocolHostResolver",
    "ProtocolNetworkEventSource",
    "ProtocolNetworkPlatform",
    "ProtocolSettingsStore",
    "ProtocolUrlConsumer",
    "ProtocolUrlResolutionPipeline",
]
