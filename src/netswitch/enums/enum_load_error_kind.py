# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Load error classification reported by the consuming view."""

from enum import Enum


class EnumLoadErrorKind(str, Enum):
    """Why the consumer failed to load a URL.

    The first four members are network-related and recoverable through the
    controller's retry/backoff machinery.  CONTENT covers everything else
    (HTTP error pages, renderer problems) and is surfaced without retry.
    """

    HOST_LOOKUP = "host_lookup"
    CONNECT = "connect"
    TIMEOUT = "timeout"
    TLS_HANDSHAKE = "tls_handshake"
    CONTENT = "content"

    @property
    def is_network(self) -> bool:
        """True for errors that a retry on a working network can fix."""
        return self is not EnumLoadErrorKind.CONTENT


__all__ = ["EnumLoadErrorKind"]
