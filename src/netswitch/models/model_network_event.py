# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelNetworkEvent — a platform network callback."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from netswitch.enums.enum_network_event_type import EnumNetworkEventType


class ModelNetworkEvent(BaseModel):
    """One platform network callback.

    The optional fields mirror what a capabilities-changed callback carries.
    They only drive identity-cache invalidation; the resolver still queries
    the platform for the authoritative values.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    event_type: EnumNetworkEventType = Field(..., description="Callback kind.")
    on_wifi: bool | None = Field(default=None, description="WiFi transport flag.")
    validated: bool | None = Field(default=None, description="Validated flag.")
    transport_ssid: str | None = Field(default=None, description="Raw SSID.")
    observed_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the callback fired (UTC).",
    )


__all__ = ["ModelNetworkEvent"]
