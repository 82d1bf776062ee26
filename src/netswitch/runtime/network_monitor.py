# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Polling ``ProtocolNetworkEventSource`` for hosts without push callbacks.

Desktop operating systems have no portable network-callback API, so the
monitor samples ``ProtocolNetworkPlatform`` every ``poll_interval_seconds``
and turns differences between consecutive samples into network events:

- nothing -> connected: AVAILABLE
- connected -> nothing: LOST
- any other change of association, validation or SSID: CAPABILITIES_CHANGED

The first sample only records a baseline.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from netswitch.enums.enum_network_event_type import EnumNetworkEventType
from netswitch.models.model_network_event import ModelNetworkEvent
from netswitch.protocols import ProtocolNetworkPlatform

logger = logging.getLogger(__name__)

NetworkListener = Callable[[ModelNetworkEvent], None]

_DEFAULT_POLL_INTERVAL_S: float = 5.0
_DEFAULT_QUERY_TIMEOUT_S: float = 5.0


@dataclass(frozen=True)
class NetworkSample:
    """One observation of the platform network state."""

    on_wifi: bool
    has_internet: bool
    validated: bool
    ssid: str | None

    @property
    def connected(self) -> bool:
        return self.on_wifi or self.has_internet


def diff_samples(
    previous: NetworkSample | None, current: NetworkSample
) -> ModelNetworkEvent | None:
    """Return the event implied by moving from ``previous`` to ``current``."""
    if previous is None or previous == current:
        return None
    if not previous.connected and current.connected:
        event_type = EnumNetworkEventType.AVAILABLE
    elif previous.connected and not current.connected:
        event_type = EnumNetworkEventType.LOST
    else:
        event_type = EnumNetworkEventType.CAPABILITIES_CHANGED
    return ModelNetworkEvent(
        event_type=event_type,
        on_wifi=current.on_wifi,
        validated=current.validated,
        transport_ssid=current.ssid,
    )


class NetworkMonitor:
    """Periodically sample the platform and notify listeners of changes.

    Args:
        platform: Network queries (run in a worker thread).
        poll_interval_seconds: Delay between samples.
        query_timeout_seconds: Bound for one sample.
    """

    def __init__(
        self,
        platform: ProtocolNetworkPlatform,
        *,
        poll_interval_seconds: float = _DEFAULT_POLL_INTERVAL_S,
        query_timeout_seconds: float = _DEFAULT_QUERY_TIMEOUT_S,
    ) -> None:
        self._platform = platform
        self._interval = poll_interval_seconds
        self._query_timeout = query_timeout_seconds
        self._listeners: list[NetworkListener] = []
        self._listeners_lock = threading.Lock()
        self._last_sample: NetworkSample | None = None
        self._task: asyncio.Task[None] | None = None

    # ------------------------------------------------------------------
    # ProtocolNetworkEventSource
    # ------------------------------------------------------------------

    def add_listener(self, listener: NetworkListener) -> None:
        with self._listeners_lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: NetworkListener) -> None:
        with self._listeners_lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def last_sample(self) -> NetworkSample | None:
        return self._last_sample

    async def start(self) -> None:
        """Start polling on the running event loop.  Idempotent."""
        if self._task is not None and not self._task.done():
            return
        self._task = asyncio.get_running_loop().create_task(
            self._poll_loop(), name="netswitch-network-monitor"
        )
        logger.info(
            "Network monitor started", extra={"poll_interval_seconds": self._interval}
        )

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        logger.info("Network monitor stopped")

    async def poll_once(self) -> ModelNetworkEvent | None:
        """Take one sample, notify listeners on change, return the event."""
        sample = await self._sample()
        if sample is None:
            return None
        event = diff_samples(self._last_sample, sample)
        self._last_sample = sample
        if event is not None:
            logger.info(
                "Network change detected",
                extra={
                    "event_type": event.event_type.value,
                    "on_wifi": sample.on_wifi,
                    "validated": sample.validated,
                    "ssid": sample.ssid,
                },
            )
            self._emit(event)
        return event

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    async def _poll_loop(self) -> None:
        while True:
            await self.poll_once()
            await asyncio.sleep(self._interval)

    async def _sample(self) -> NetworkSample | None:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._read_platform), timeout=self._query_timeout
            )
        except TimeoutError:
            logger.warning(
                "Network sample timed out",
                extra={"timeout_seconds": self._query_timeout},
            )
        except Exception as exc:
            logger.warning(
                "Network sample failed",
                extra={"error": f"{type(exc).__name__}: {exc}"},
            )
        return None

    def _read_platform(self) -> NetworkSample:
        capabilities = self._platform.get_capabilities()
        if capabilities is not None:
            return NetworkSample(
                on_wifi=capabilities.on_wifi,
                has_internet=capabilities.has_internet,
                validated=capabilities.validated,
                ssid=capabilities.transport_ssid,
            )
        # No capabilities API (macOS): association is inferred from the SSID.
        ssid = self._platform.get_wifi_manager_ssid()
        return NetworkSample(
            on_wifi=ssid is not None,
            has_internet=False,
            validated=False,
            ssid=ssid,
        )

    def _emit(self, event: ModelNetworkEvent) -> None:
        with self._listeners_lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Network listener raised",
                    extra={"event_type": event.event_type.value},
                )


__all__ = ["NetworkMonitor", "NetworkSample", "diff_samples"]
