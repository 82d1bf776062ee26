# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelEndpointConfig — the internal/external endpoint pair."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from netswitch.constants import DEFAULT_EXTERNAL_URL, DEFAULT_INTERNAL_URL


class ModelEndpointConfig(BaseModel):
    """Configured endpoint URLs.

    URL validity is not enforced here; an empty field resolves to the
    built-in default through the ``effective_*`` accessors.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    internal_url: str = Field(
        default=DEFAULT_INTERNAL_URL,
        description="URL used on a home network (LAN hostname or IP).",
    )
    external_url: str = Field(
        default=DEFAULT_EXTERNAL_URL,
        description="URL used everywhere else (public hostname).",
    )

    def effective_internal_url(self) -> str:
        """Return the internal URL, or the built-in default when blank."""
        return self.internal_url.strip() or DEFAULT_INTERNAL_URL

    def effective_external_url(self) -> str:
        """Return the external URL, or the built-in default when blank."""
        return self.external_url.strip() or DEFAULT_EXTERNAL_URL


__all__ = ["ModelEndpointConfig"]
