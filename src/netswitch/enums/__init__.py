# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations shared across netswitch nodes."""

from netswitch.enums.enum_connection_mode import EnumConnectionMode
from netswitch.enums.enum_identity_source import EnumIdentitySource
from netswitch.enums.enum_load_error_kind import EnumLoadErrorKind
from netswitch.enums.enum_log_level import EnumLogLevel
from netswitch.enums.enum_network_event_type import EnumNetworkEventType
from netswitch.enums.enum_transition_phase import EnumTransitionPhase
from netswitch.enums.enum_unidentified_network_policy import (
    EnumUnidentifiedNetworkPolicy,
)
from netswitch.enums.enum_url_kind import EnumUrlKind

__all__ = [
    "EnumConnectionMode",
    "EnumIdentitySource",
    "EnumLoadErrorKind",
    "EnumLogLevel",
    "EnumNetworkEventType",
    "EnumTransitionPhase",
    "EnumUnidentifiedNetworkPolicy",
    "EnumUrlKind",
]
