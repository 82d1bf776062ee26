# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelTransitionSnapshot — read-only view of the controller state."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from netswitch.enums.enum_load_error_kind import EnumLoadErrorKind
from netswitch.enums.enum_transition_phase import EnumTransitionPhase
from netswitch.models.model_resolved_url import ModelResolvedUrl


class ModelTransitionSnapshot(BaseModel):
    """Copy of ``TransitionState`` handed to observers and tests."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    phase: EnumTransitionPhase
    currently_loaded: ModelResolvedUrl | None = None
    target: ModelResolvedUrl | None = None
    pending: ModelResolvedUrl | None = None
    queued: ModelResolvedUrl | None = None
    in_flight: bool = False
    retry_count: int = Field(default=0, ge=0)
    last_switch_at: float | None = Field(
        default=None, description="Monotonic clock reading of the last dispatch."
    )
    last_error: EnumLoadErrorKind | None = None
    failure_reason: str | None = None

    @property
    def currently_loaded_url(self) -> str | None:
        return self.currently_loaded.url if self.currently_loaded else None


__all__ = ["ModelTransitionSnapshot"]
