# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Built-in defaults shared by netswitch components."""

from __future__ import annotations

# Endpoint defaults used when the settings store holds empty values.
DEFAULT_INTERNAL_URL: str = "http://frigate.local"
DEFAULT_EXTERNAL_URL: str = "https://example.com/frigate"

# Values some platforms return instead of a real SSID when location or
# nearby-device permission is missing.
SENTINEL_SSIDS: frozenset[str] = frozenset(
    {
        "<unknown ssid>",
        "unknown ssid",
        "0x",
        "current wifi",
    }
)

# Two independent well-known hosts for the DNS reachability probe.
DEFAULT_PROBE_HOSTS: tuple[str, str] = ("dns.google", "one.one.one.one")

# Load-error URLs containing any of these markers are sub-resource noise.
DEFAULT_IGNORED_ERROR_MARKERS: tuple[str, ...] = ("cloudflareinsights", "analytics")

__all__ = [
    "DEFAULT_EXTERNAL_URL",
    "DEFAULT_IGNORED_ERROR_MARKERS",
    "DEFAULT_INTERNAL_URL",
    "DEFAULT_PROBE_HOSTS",
    "SENTINEL_SSIDS",
]
