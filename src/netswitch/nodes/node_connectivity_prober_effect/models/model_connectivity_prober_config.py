# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelConnectivityProberConfig — hosts and timeouts for the reachability probe."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from netswitch.constants import DEFAULT_PROBE_HOSTS

_DEFAULT_ATTEMPT_TIMEOUT_S: float = 2.0


class ModelConnectivityProberConfig(BaseModel):
    """Configuration for ``ConnectivityProber``.

    Two independent hosts are required so that one provider's outage is not
    mistaken for a dead network.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    probe_hosts: tuple[str, str] = Field(
        default=DEFAULT_PROBE_HOSTS,
        description="Primary and secondary host names to resolve.",
    )
    attempt_timeout_seconds: float = Field(
        default=_DEFAULT_ATTEMPT_TIMEOUT_S,
        gt=0.0,
        description="Upper bound for a single resolution attempt.",
    )

    @field_validator("probe_hosts")
    @classmethod
    def _hosts_not_blank(cls, value: tuple[str, str]) -> tuple[str, str]:
        if any(not host.strip() for host in value):
            raise ValueError("probe_hosts must not contain blank host names")
        return value


__all__ = ["ModelConnectivityProberConfig"]
