# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelNetSwitchSettings — environment-backed configuration for the runtime.

Environment variables (prefix ``NETSWITCH_``):
    CONNECTION_MODE: auto | internal | external (default auto)
    INTERNAL_URL / EXTERNAL_URL: endpoint URLs (blank -> built-in default)
    HOME_NETWORKS: comma-separated SSIDs, or a JSON list
    MANUAL_OVERRIDE: identity used when SSID detection fails
    UNIDENTIFIED_POLICY: home | external (default home)
    LOG_LEVEL: DEBUG | INFO | WARNING | ERROR (default INFO)
    DEBOUNCE_SECONDS, MODE_SWITCH_DEBOUNCE_SECONDS,
    CONNECTIVITY_TIMEOUT_SECONDS, RETRY_BASE_DELAY_SECONDS, MAX_RETRIES,
    LOAD_TIMEOUT_SECONDS, NETWORK_SETTLE_SECONDS, POLL_INTERVAL_SECONDS
"""

from __future__ import annotations

import json
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from netswitch.constants import DEFAULT_EXTERNAL_URL, DEFAULT_INTERNAL_URL
from netswitch.enums.enum_connection_mode import EnumConnectionMode
from netswitch.enums.enum_log_level import EnumLogLevel
from netswitch.enums.enum_unidentified_network_policy import (
    EnumUnidentifiedNetworkPolicy,
)
from netswitch.models.model_endpoint_config import ModelEndpointConfig
from netswitch.nodes.node_url_transition_reducer.models import (
    ModelTransitionControllerConfig,
)


class ModelNetSwitchSettings(BaseSettings):
    """Pydantic Settings for netswitch, loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="NETSWITCH_",
        extra="ignore",
    )

    connection_mode: EnumConnectionMode = Field(
        default=EnumConnectionMode.AUTO,
        description="auto, internal or external",
    )
    internal_url: str = Field(
        default=DEFAULT_INTERNAL_URL,
        description="URL used on a home network",
    )
    external_url: str = Field(
        default=DEFAULT_EXTERNAL_URL,
        description="URL used everywhere else",
    )
    home_networks: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="SSIDs treated as home",
    )
    manual_override: str | None = Field(
        default=None,
        description="Identity used when SSID detection fails",
    )
    unidentified_policy: EnumUnidentifiedNetworkPolicy = Field(
        default=EnumUnidentifiedNetworkPolicy.HOME,
        description="Classification for WiFi networks with no detectable SSID",
    )
    log_level: EnumLogLevel = Field(
        default=EnumLogLevel.INFO,
        description="Root log level for the launcher",
    )

    debounce_seconds: float = Field(default=10.0, ge=0.0)
    mode_switch_debounce_seconds: float = Field(default=0.5, ge=0.0)
    connectivity_timeout_seconds: float = Field(default=5.0, gt=0.0)
    retry_base_delay_seconds: float = Field(default=1.0, ge=0.0)
    max_retries: int = Field(default=3, ge=0, le=10)
    load_timeout_seconds: float = Field(default=30.0, gt=0.0)
    network_settle_seconds: float = Field(default=0.5, ge=0.0)
    poll_interval_seconds: float = Field(
        default=5.0,
        gt=0.0,
        description="Network monitor polling interval",
    )

    @field_validator("home_networks", mode="before")
    @classmethod
    def _split_home_networks(cls, value: object) -> object:
        if isinstance(value, str):
            text = value.strip()
            if text.startswith("["):
                return json.loads(text)
            return [part.strip() for part in text.split(",") if part.strip()]
        return value

    @field_validator("manual_override", mode="before")
    @classmethod
    def _blank_override_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_endpoint_config(self) -> ModelEndpointConfig:
        return ModelEndpointConfig(
            internal_url=self.internal_url, external_url=self.external_url
        )

    def to_controller_config(self) -> ModelTransitionControllerConfig:
        """Convert timing settings to a frozen controller config."""
        return ModelTransitionControllerConfig(
            debounce_seconds=self.debounce_seconds,
            mode_switch_debounce_seconds=self.mode_switch_debounce_seconds,
            connectivity_timeout_seconds=self.connectivity_timeout_seconds,
            retry_base_delay_seconds=self.retry_base_delay_seconds,
            max_retries=self.max_retries,
            load_timeout_seconds=self.load_timeout_seconds,
            network_settle_seconds=self.network_settle_seconds,
        )


__all__ = ["ModelNetSwitchSettings"]
