# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelResolvedUrl — the URL the controller should be driving toward."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from netswitch.enums.enum_url_kind import EnumUrlKind


class ModelResolvedUrl(BaseModel):
    """A URL tagged with the side of the internal/external boundary it is on."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str = Field(..., description="Absolute URL to load.")
    kind: EnumUrlKind = Field(..., description="Internal or external endpoint.")

    @property
    def base_url(self) -> str:
        """URL without its fragment."""
        return self.url.split("#", 1)[0]

    def crosses_boundary(self, other: ModelResolvedUrl) -> bool:
        """True if switching between ``self`` and ``other`` is a mode switch."""
        return self.kind is not other.kind


__all__ = ["ModelResolvedUrl"]
