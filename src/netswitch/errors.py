# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exception types for netswitch.

Recoverable conditions (detection failure, connectivity not ready, network
load errors, missing configuration) are handled inside the controller and
never raised.  These exceptions signal programmer errors only.
"""


class NetSwitchError(Exception):
    """Base exception for netswitch errors."""


class ControllerNotStartedError(NetSwitchError):
    """Raised when the transition controller is used before ``start()``."""


__all__ = ["ControllerNotStartedError", "NetSwitchError"]
