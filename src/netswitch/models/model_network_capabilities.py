# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelNetworkCapabilities — snapshot of the active network's capabilities."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelNetworkCapabilities(BaseModel):
    """What the platform's richest network API reports about the active network.

    ``transport_ssid`` may be a sentinel such as ``<unknown ssid>`` when the
    platform withholds it; the identity resolver rejects those.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    on_wifi: bool = Field(
        ..., description="True if the active network uses the WiFi transport."
    )
    has_internet: bool = Field(
        default=False, description="Network claims an internet route."
    )
    validated: bool = Field(
        default=False,
        description="Platform confirmed the internet route actually works.",
    )
    transport_ssid: str | None = Field(
        default=None, description="SSID exposed by the transport info, raw."
    )


__all__ = ["ModelNetworkCapabilities"]
