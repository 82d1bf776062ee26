# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Which side of the internal/external boundary a resolved URL lives on."""

from enum import Enum


class EnumUrlKind(str, Enum):
    """Tag carried alongside every resolved URL.

    Computed once by the URL resolution engine; the transition controller
    compares tags to detect mode switches and never inspects URL text.
    """

    INTERNAL = "internal"
    EXTERNAL = "external"


__all__ = ["EnumUrlKind"]
