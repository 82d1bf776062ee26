# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelUrlDecision — one pass of identity -> classification -> URL."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from netswitch.enums.enum_connection_mode import EnumConnectionMode
from netswitch.models.model_network_identity import ModelNetworkIdentity
from netswitch.models.model_resolved_url import ModelResolvedUrl


class ModelUrlDecision(BaseModel):
    """Everything that went into choosing ``resolved``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    identity: ModelNetworkIdentity
    mode: EnumConnectionMode
    is_home: bool = Field(..., description="Classifier output.")
    resolved: ModelResolvedUrl


__all__ = ["ModelUrlDecision"]
