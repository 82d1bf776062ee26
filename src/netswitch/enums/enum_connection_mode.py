# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""User-selected connection mode."""

from enum import Enum


class EnumConnectionMode(str, Enum):
    """How the active endpoint is chosen.

    AUTO:
        Follow network detection (home network -> internal URL).
    FORCE_INTERNAL:
        Always use the internal URL, detection is skipped.
    FORCE_EXTERNAL:
        Always use the external URL, detection is skipped.

    Values match the stored preference strings, so persisted settings parse
    without a translation table.
    """

    AUTO = "auto"
    FORCE_INTERNAL = "internal"
    FORCE_EXTERNAL = "external"


__all__ = ["EnumConnectionMode"]
