# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelNetworkIdentity — which network the device is on right now."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from netswitch.enums.enum_identity_source import EnumIdentitySource


class ModelNetworkIdentity(BaseModel):
    """Transient identity of the active network.

    Recomputed on every evaluation and never persisted.  ``ssid=None`` with
    ``on_wifi=True`` means detection failed, which is different from not
    being on WiFi at all.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ssid: str | None = Field(default=None, description="Cleaned SSID, if known.")
    on_wifi: bool = Field(default=False, description="Associated with WiFi.")
    validated_internet: bool = Field(
        default=False, description="Platform-validated internet access."
    )
    source: EnumIdentitySource = Field(
        default=EnumIdentitySource.NONE,
        description="Fallback-chain step that produced the SSID.",
    )

    @property
    def detection_failed(self) -> bool:
        """True when on WiFi but no strategy produced an SSID."""
        return self.on_wifi and self.ssid is None

    @classmethod
    def not_on_wifi(cls, *, validated_internet: bool = False) -> ModelNetworkIdentity:
        """Identity for a device that is not associated with WiFi."""
        return cls(on_wifi=False, validated_internet=validated_internet)


__all__ = ["ModelNetworkIdentity"]
