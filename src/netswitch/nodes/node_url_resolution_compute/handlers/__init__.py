# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_url_resolution_compute."""

from netswitch.nodes.node_url_resolution_compute.handlers.handler_url_resolution import (
    resolve_url,
    select_url_kind,
)

__all__ = ["resolve_url", "select_url_kind"]
