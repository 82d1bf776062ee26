# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_url_transition_reducer."""

from netswitch.nodes.node_url_transition_reducer.handlers.handler_transition_controller import (
    UrlTransitionController,
)
from netswitch.nodes.node_url_transition_reducer.handlers.transition_state import (
    TransitionState,
)

__all__ = ["TransitionState", "UrlTransitionController"]
