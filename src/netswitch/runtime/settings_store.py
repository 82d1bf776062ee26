# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory, thread-safe ``ProtocolSettingsStore``.

Every getter returns the current value; a settings UI may call the mutators
from any thread while the controller evaluates on the event loop.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from netswitch.enums.enum_connection_mode import EnumConnectionMode
from netswitch.models.model_endpoint_config import ModelEndpointConfig
from netswitch.nodes.node_network_classifier_compute import normalize_network_name
from netswitch.runtime.settings import ModelNetSwitchSettings

logger = logging.getLogger(__name__)


class InMemorySettingsStore:
    """Settings held in memory behind a lock.

    Home networks are deduplicated with the classifier's normalization, so
    ``"HomeNet"`` and ``'"homenet"'`` are one entry.  The first spelling
    added is kept for display.
    """

    def __init__(
        self,
        *,
        connection_mode: EnumConnectionMode = EnumConnectionMode.AUTO,
        endpoints: ModelEndpointConfig | None = None,
        home_networks: Iterable[str] = (),
        manual_override: str | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._connection_mode = connection_mode
        self._endpoints = endpoints or ModelEndpointConfig()
        self._home_networks: dict[str, str] = {}
        for name in home_networks:
            self._add_home_locked(name)
        self._manual_override = manual_override

    @classmethod
    def from_settings(cls, settings: ModelNetSwitchSettings) -> InMemorySettingsStore:
        return cls(
            connection_mode=settings.connection_mode,
            endpoints=settings.to_endpoint_config(),
            home_networks=settings.home_networks,
            manual_override=settings.manual_override,
        )

    # ------------------------------------------------------------------
    # ProtocolSettingsStore
    # ------------------------------------------------------------------

    def get_connection_mode(self) -> EnumConnectionMode:
        with self._lock:
            return self._connection_mode

    def get_endpoint_config(self) -> ModelEndpointConfig:
        with self._lock:
            return self._endpoints

    def get_home_networks(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._home_networks.values())

    def get_manual_override(self) -> str | None:
        with self._lock:
            return self._manual_override

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_connection_mode(self, mode: EnumConnectionMode) -> None:
        with self._lock:
            self._connection_mode = mode
        logger.info("Connection mode changed", extra={"mode": mode.value})

    def set_endpoint_config(self, endpoints: ModelEndpointConfig) -> None:
        with self._lock:
            self._endpoints = endpoints

    def add_home_network(self, name: str) -> bool:
        """Add ``name``; returns False if blank or already present."""
        with self._lock:
            return self._add_home_locked(name)

    def remove_home_network(self, name: str) -> bool:
        """Remove ``name`` (any spelling); returns False if absent."""
        key = normalize_network_name(name)
        with self._lock:
            return self._home_networks.pop(key, None) is not None

    def set_manual_override(self, identity: str | None) -> None:
        with self._lock:
            self._manual_override = (identity or "").strip() or None

    def _add_home_locked(self, name: str) -> bool:
        key = normalize_network_name(name)
        if not key or key in self._home_networks:
            return False
        self._home_networks[key] = name.strip()
        return True


__all__ = ["InMemorySettingsStore"]
