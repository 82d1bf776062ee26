# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Log level enum for launcher configuration."""

import logging
from enum import Enum


class EnumLogLevel(str, Enum):
    """Log levels accepted by ``NETSWITCH_LOG_LEVEL``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def to_logging_level(self) -> int:
        """Return the numeric ``logging`` level."""
        return int(logging.getLevelName(self.value))


__all__ = ["EnumLogLevel"]
