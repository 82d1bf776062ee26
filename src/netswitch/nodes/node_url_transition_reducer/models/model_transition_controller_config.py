# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelTransitionControllerConfig — debounce, probe and backoff timings.

All windows are configurable so tests can shrink them to milliseconds.
Defaults follow the behavior users already know from the mobile client:
10 s for same-side URL changes, 500 ms for internal/external switches,
1 s / 2 s / 4 s backoff.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from netswitch.constants import DEFAULT_IGNORED_ERROR_MARKERS

_DEFAULT_DEBOUNCE_S: float = 10.0
_DEFAULT_MODE_SWITCH_DEBOUNCE_S: float = 0.5
_DEFAULT_CONNECTIVITY_TIMEOUT_S: float = 5.0
_DEFAULT_RETRY_BASE_DELAY_S: float = 1.0
_DEFAULT_MAX_RETRIES: int = 3
_DEFAULT_LOAD_TIMEOUT_S: float = 30.0
_DEFAULT_NETWORK_SETTLE_S: float = 0.5


class ModelTransitionControllerConfig(BaseModel):
    """Configuration for ``UrlTransitionController``."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    debounce_seconds: float = Field(
        default=_DEFAULT_DEBOUNCE_S,
        ge=0.0,
        description="Quiet window for URL changes that stay on the same side.",
    )
    mode_switch_debounce_seconds: float = Field(
        default=_DEFAULT_MODE_SWITCH_DEBOUNCE_S,
        ge=0.0,
        description="Quiet window for internal <-> external switches.",
    )
    connectivity_timeout_seconds: float = Field(
        default=_DEFAULT_CONNECTIVITY_TIMEOUT_S,
        gt=0.0,
        description="Bound for one reachability probe.",
    )
    retry_base_delay_seconds: float = Field(
        default=_DEFAULT_RETRY_BASE_DELAY_S,
        ge=0.0,
        description="First backoff delay; doubled on each retry.",
    )
    max_retries: int = Field(
        default=_DEFAULT_MAX_RETRIES,
        ge=0,
        le=10,
        description="Retries before giving up and entering FAILED.",
    )
    load_timeout_seconds: float = Field(
        default=_DEFAULT_LOAD_TIMEOUT_S,
        gt=0.0,
        description="How long to wait for the consumer's load report.",
    )
    network_settle_seconds: float = Field(
        default=_DEFAULT_NETWORK_SETTLE_S,
        ge=0.0,
        description=(
            "Delay between a network event and re-resolution.  Restarted by "
            "every new event, so a burst of callbacks resolves once."
        ),
    )
    ignored_error_markers: tuple[str, ...] = Field(
        default=DEFAULT_IGNORED_ERROR_MARKERS,
        description="Sub-resource error URLs containing these are ignored.",
    )

    @model_validator(mode="after")
    def _mode_switch_is_faster(self) -> ModelTransitionControllerConfig:
        if self.mode_switch_debounce_seconds > self.debounce_seconds:
            raise ValueError(
                "mode_switch_debounce_seconds must not exceed debounce_seconds"
            )
        return self

    def backoff_delay(self, retry_index: int) -> float:
        """Delay before retry number ``retry_index`` (0-based)."""
        return self.retry_base_delay_seconds * (2**retry_index)


__all__ = ["ModelTransitionControllerConfig"]
