# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_url_transition_reducer."""

from netswitch.nodes.node_url_transition_reducer.models.model_transition_controller_config import (
    ModelTransitionControllerConfig,
)
from netswitch.nodes.node_url_transition_reducer.models.model_transition_snapshot import (
    ModelTransitionSnapshot,
)

__all__ = ["ModelTransitionControllerConfig", "ModelTransitionSnapshot"]
