# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""UrlTransitionReducer — debounce, connectivity gating and backoff for URL switches.

Owns the only mutable state in netswitch.  Consumes the stream of resolved
URLs and emits at most one load instruction at a time to the consumer.
"""

from netswitch.nodes.node_url_transition_reducer.handlers import (
    TransitionState,
    UrlTransitionController,
)
from netswitch.nodes.node_url_transition_reducer.models import (
    ModelTransitionControllerConfig,
    ModelTransitionSnapshot,
)

__all__ = [
    "ModelTransitionControllerConfig",
    "ModelTransitionSnapshot",
    "TransitionState",
    "UrlTransitionController",
]
