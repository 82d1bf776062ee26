# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""UrlResolutionCompute — picks the internal or external endpoint URL."""

from netswitch.nodes.node_url_resolution_compute.handlers import (
    resolve_url,
    select_url_kind,
)

__all__ = ["resolve_url", "select_url_kind"]
