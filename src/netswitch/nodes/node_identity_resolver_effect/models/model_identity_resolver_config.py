# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelIdentityResolverConfig — timing and sentinel settings for SSID detection."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from netswitch.constants import SENTINEL_SSIDS

_DEFAULT_CACHE_TTL_S: float = 3.0
_DEFAULT_QUERY_TIMEOUT_S: float = 2.0


class ModelIdentityResolverConfig(BaseModel):
    """Configuration for ``IdentityResolver``.

    The cache only coalesces bursts of duplicate platform callbacks, so the
    TTL is capped at single-digit seconds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    cache_ttl_seconds: float = Field(
        default=_DEFAULT_CACHE_TTL_S,
        ge=0.0,
        lt=10.0,
        description="How long a resolved identity is reused.  0 disables caching.",
    )
    query_timeout_seconds: float = Field(
        default=_DEFAULT_QUERY_TIMEOUT_S,
        gt=0.0,
        description="Upper bound for each platform query in the fallback chain.",
    )
    sentinel_ssids: frozenset[str] = Field(
        default=SENTINEL_SSIDS,
        description="Lower-cased values rejected as 'SSID withheld by platform'.",
    )


__all__ = ["ModelIdentityResolverConfig"]
