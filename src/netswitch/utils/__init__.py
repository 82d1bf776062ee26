# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for netswitch.

Available modules:
- url_display: credential-free URL formatting for log records
"""

from netswitch.utils.url_display import safe_url_display

__all__ = ["safe_url_display"]
