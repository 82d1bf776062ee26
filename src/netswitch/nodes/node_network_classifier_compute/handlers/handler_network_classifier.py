# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Network classifier: is the active context "home"?

Pure functions, no I/O.  Decision order:

1. FORCE_INTERNAL -> True, FORCE_EXTERNAL -> False (detection skipped).
2. Not on WiFi -> False.
3. SSID known -> membership in the home network set.
4. SSID unknown -> manual override in the home network set -> True.
5. Still undetermined on WiFi -> ``unidentified_policy`` (default HOME).

Step 5 is a deliberate UX trade-off: detection usually fails on the user's
own router (missing location permission) rather than on a foreign network.
It is exposed as a policy because the opposite default is equally valid for
some deployments.
"""

from __future__ import annotations

from collections.abc import Iterable

from netswitch.enums.enum_connection_mode import EnumConnectionMode
from netswitch.enums.enum_unidentified_network_policy import (
    EnumUnidentifiedNetworkPolicy,
)
from netswitch.models.model_network_identity import ModelNetworkIdentity


def normalize_network_name(name: str) -> str:
    """Canonical form used for every network-name comparison.

    Strips whitespace and one pair of surrounding double quotes, then
    casefolds.
    """
    cleaned = name.strip()
    if len(cleaned) >= 2 and cleaned.startswith('"') and cleaned.endswith('"'):
        cleaned = cleaned[1:-1].strip()
    return cleaned.casefold()


def is_home_network(name: str | None, home_networks: Iterable[str]) -> bool:
    """Case- and quote-insensitive membership test."""
    if not name:
        return False
    wanted = normalize_network_name(name)
    if not wanted:
        return False
    return any(normalize_network_name(home) == wanted for home in home_networks)


def classify_network(
    identity: ModelNetworkIdentity,
    mode: EnumConnectionMode,
    home_networks: Iterable[str],
    manual_override: str | None = None,
    *,
    unidentified_policy: EnumUnidentifiedNetworkPolicy = EnumUnidentifiedNetworkPolicy.HOME,
) -> bool:
    """Return True if the active context should be treated as home.

    Args:
        identity: Current network identity.
        mode: User-selected connection mode.
        home_networks: Network names the user designated as home.
        manual_override: Optional identity used when detection fails.
        unidentified_policy: Outcome for WiFi networks with no detectable SSID.
    """
    if mode is EnumConnectionMode.FORCE_INTERNAL:
        return True
    if mode is EnumConnectionMode.FORCE_EXTERNAL:
        return False

    if not identity.on_wifi:
        return False

    homes = tuple(home_networks)

    if identity.ssid is not None:
        return is_home_network(identity.ssid, homes)

    if manual_override and is_home_network(manual_override, homes):
        return True

    return unidentified_policy is EnumUnidentifiedNetworkPolicy.HOME


__all__ = ["classify_network", "is_home_network", "normalize_network_name"]
