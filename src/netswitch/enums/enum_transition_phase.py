# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Phases of the URL transition state machine."""

from enum import Enum


class EnumTransitionPhase(str, Enum):
    """State of ``UrlTransitionController``.

    IDLE:
        Nothing loaded yet and no switch in progress.
    AWAITING_CONNECTIVITY:
        A switch is due; the reachability probe is running.
    LOADING:
        The consumer was told to load a URL and has not reported back.
    LOADED:
        The consumer reported a successful load.
    RETRY_BACKOFF:
        Waiting out an exponential backoff delay before the next attempt.
    FAILED:
        Retries exhausted or a non-network load error. The controller waits
        passively for the next network event or forced refresh.
    """

    IDLE = "idle"
    AWAITING_CONNECTIVITY = "awaiting_connectivity"
    LOADING = "loading"
    LOADED = "loaded"
    RETRY_BACKOFF = "retry_backoff"
    FAILED = "failed"


__all__ = ["EnumTransitionPhase"]
