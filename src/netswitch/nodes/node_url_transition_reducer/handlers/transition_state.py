# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutable controller state and the internal messages that drive it.

``TransitionState`` is only ever touched by the controller's run loop.
Everything else (platform callbacks, timers, consumer reports) reaches it by
posting one of the message types below onto the controller queue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from netswitch.enums.enum_load_error_kind import EnumLoadErrorKind
from netswitch.enums.enum_transition_phase import EnumTransitionPhase
from netswitch.models.model_network_event import ModelNetworkEvent
from netswitch.models.model_resolved_url import ModelResolvedUrl
from netswitch.nodes.node_url_transition_reducer.models import (
    ModelTransitionSnapshot,
)


class EnumEvaluationCause(str, Enum):
    """Why the controller asked the pipeline for a fresh resolution."""

    INITIAL = "initial"
    NETWORK_EVENT = "network_event"
    FORCED_REFRESH = "forced_refresh"
    RETRY = "retry"


@dataclass(frozen=True)
class QueuedSwitch:
    """A switch deferred until the in-flight load reports back."""

    target: ModelResolvedUrl
    direct: bool
    forced: bool = False


@dataclass
class TransitionState:
    """Single-writer state of ``UrlTransitionController``.

    ``target`` is the URL of the current attempt (awaiting connectivity,
    backing off, or loading).  ``pending`` is a debounced value whose quiet
    window has not elapsed yet.  ``queued`` waits for the in-flight load.
    """

    phase: EnumTransitionPhase = EnumTransitionPhase.IDLE
    currently_loaded: ModelResolvedUrl | None = None
    target: ModelResolvedUrl | None = None
    pending: ModelResolvedUrl | None = None
    pending_is_mode_switch: bool = False
    queued: QueuedSwitch | None = None
    in_flight: bool = False
    retry_count: int = 0
    last_switch_at: float | None = None
    last_error: EnumLoadErrorKind | None = None
    failure_reason: str | None = None
    attempt_is_first: bool = False
    backoff_reresolve: bool = False

    @property
    def attempting(self) -> bool:
        """True while connectivity is being checked or a retry is pending."""
        return self.target is not None and self.phase in (
            EnumTransitionPhase.AWAITING_CONNECTIVITY,
            EnumTransitionPhase.RETRY_BACKOFF,
        )

    def snapshot(self) -> ModelTransitionSnapshot:
        return ModelTransitionSnapshot(
            phase=self.phase,
            currently_loaded=self.currently_loaded,
            target=self.target,
            pending=self.pending,
            queued=self.queued.target if self.queued else None,
            in_flight=self.in_flight,
            retry_count=self.retry_count,
            last_switch_at=self.last_switch_at,
            last_error=self.last_error,
            failure_reason=self.failure_reason,
        )


# ---------------------------------------------------------------------------
# Queue messages
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MsgNetworkEvent:
    event: ModelNetworkEvent


@dataclass(frozen=True)
class MsgResolvedUrl:
    resolved: ModelResolvedUrl


@dataclass(frozen=True)
class MsgForcedRefresh:
    pass


@dataclass(frozen=True)
class MsgEvaluate:
    cause: EnumEvaluationCause


@dataclass(frozen=True)
class MsgEvaluationDone:
    generation: int
    cause: EnumEvaluationCause
    resolved: ModelResolvedUrl | None


@dataclass(frozen=True)
class MsgDebounceElapsed:
    generation: int


@dataclass(frozen=True)
class MsgConnectivityChecked:
    generation: int
    ok: bool


@dataclass(frozen=True)
class MsgBackoffElapsed:
    generation: int


@dataclass(frozen=True)
class MsgLoadSucceeded:
    url: str


@dataclass(frozen=True)
class MsgLoadFailed:
    url: str
    error_kind: EnumLoadErrorKind
    main_frame: bool = True


@dataclass(frozen=True)
class MsgLoadTimedOut:
    generation: int


__all__ = [
    "EnumEvaluationCause",
    "MsgBackoffElapsed",
    "MsgConnectivityChecked",
    "MsgDebounceElapsed",
    "MsgEvaluate",
    "MsgEvaluationDone",
    "MsgForcedRefresh",
    "MsgLoadFailed",
    "MsgLoadSucceeded",
    "MsgLoadTimedOut",
    "MsgNetworkEvent",
    "MsgResolvedUrl",
    "QueuedSwitch",
    "TransitionState",
]
