# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""netswitch nodes.

Lazy imports keep ``import netswitch.nodes`` cheap; import from the node
packages directly in production code.

Example:
    # Recommended - direct import from specific node:
    from netswitch.nodes.node_url_resolution_compute import resolve_url

    # Convenience import:
    from netswitch.nodes import UrlTransitionController
"""

from typing import TYPE_CHECKING

_lazy_imports = {
    "ConnectivityProber": "netswitch.nodes.node_connectivity_prober_effect",
    "IdentityResolver": "netswitch.nodes.node_identity_resolver_effect",
    "UrlTransitionController": "netswitch.nodes.node_url_transition_reducer",
    "classify_network": "netswitch.nodes.node_network_classifier_compute",
    "resolve_url": "netswitch.nodes.node_url_resolution_compute",
}

__all__ = [
    "ConnectivityProber",
    "IdentityResolver",
    "UrlTransitionController",
    "classify_network",
    "resolve_url",
]


def __getattr__(name: str):
    """Lazy import for module attributes."""
    if name in _lazy_imports:
        import importlib

        module = importlib.import_module(_lazy_imports[name])
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


if TYPE_CHECKING:
    from netswitch.nodes.node_connectivity_prober_effect import ConnectivityProber
    from netswitch.nodes.node_identity_resolver_effect import IdentityResolver
    from netswitch.nodes.node_network_classifier_compute import classify_network
    from netswitch.nodes.node_url_resolution_compute import resolve_url
    from netswitch.nodes.node_url_transition_reducer import UrlTransitionController
