# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connectivity prober: does the active network actually route traffic?

Being associated with a network is necessary but not sufficient.  Right
after a WiFi handoff the link can be up while nothing routes yet, and
loading a URL at that moment is a guaranteed failure.  Two checks exist:

``is_internet_validated()``
    Cheap.  Reads the platform's validated-internet capability flag.

``probe_reachability(timeout_seconds)``
    Expensive.  Resolves the primary probe host; on failure resolves the
    secondary host, retrying it once before declaring failure.  The whole
    probe is bounded by ``timeout_seconds``.

Handler Contract:
-----------------
Neither method raises.  ``False`` means "not ready yet", never a permanent
error; the transition controller answers it with backoff.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from netswitch.nodes.node_connectivity_prober_effect.models import (
    ModelConnectivityProberConfig,
)
from netswitch.protocols import ProtocolHostResolver, ProtocolNetworkPlatform

logger = logging.getLogger(__name__)


class ConnectivityProber:
    """Validated-internet flag plus DNS reachability probe.

    Example:
        ```python
        prober = ConnectivityProber(platform, AsyncioHostResolver())
        if prober.is_internet_validated() or await prober.probe_reachability(5.0):
            ...
        ```
    """

    def __init__(
        self,
        platform: ProtocolNetworkPlatform,
        resolver: ProtocolHostResolver,
        config: ModelConnectivityProberConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._platform = platform
        self._resolver = resolver
        self._config = config or ModelConnectivityProberConfig()
        self._clock = clock

    @property
    def config(self) -> ModelConnectivityProberConfig:
        return self._config

    def is_internet_validated(self) -> bool:
        """Return True if the platform reports validated internet access."""
        try:
            capabilities = self._platform.get_capabilities()
        except Exception as exc:
            logger.warning(
                "Capabilities query failed during validation check",
                extra={"error": f"{type(exc).__name__}: {exc}"},
            )
            return False
        if capabilities is None:
            return False
        return capabilities.has_internet and capabilities.validated

    async def probe_reachability(self, timeout_seconds: float) -> bool:
        """Return True if either probe host resolves within the time budget.

        Attempt order: primary, secondary, secondary again.
        """
        primary, secondary = self._config.probe_hosts
        deadline = self._clock() + timeout_seconds

        for attempt, host in enumerate((primary, secondary, secondary), start=1):
            remaining = deadline - self._clock()
            if remaining <= 0:
                break
            budget = min(self._config.attempt_timeout_seconds, remaining)
            if await self._attempt(host, budget, attempt):
                return True

        logger.info(
            "Reachability probe failed",
            extra={"hosts": [primary, secondary], "timeout_seconds": timeout_seconds},
        )
        return False

    async def _attempt(self, host: str, timeout: float, attempt: int) -> bool:
        try:
            addresses = await asyncio.wait_for(self._resolver.resolve(host), timeout)
        except TimeoutError:
            logger.debug(
                "Probe attempt timed out",
                extra={"host": host, "attempt": attempt, "timeout_seconds": timeout},
            )
            return False
        except Exception as exc:
            logger.debug(
                "Probe attempt failed",
                extra={
                    "host": host,
                    "attempt": attempt,
                    "error": f"{type(exc).__name__}: {exc}",
                },
            )
            return False
        if not addresses:
            return False
        logger.debug(
            "Probe host resolved",
            extra={"host": host, "attempt": attempt, "addresses": addresses[:3]},
        )
        return True


__all__ = ["ConnectivityProber"]
