# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""URL transition controller: turns resolved-URL updates into safe loads.

The resolution pipeline can change its answer several times a second during
a WiFi handoff.  Acting on every change would tear down and rebuild the
consumer's view repeatedly, and loading right after a handoff usually fails
because nothing routes yet.  The controller sits between the two:

- Debounce.  An internal <-> external mode switch waits
  ``mode_switch_debounce_seconds``; any other change waits the longer
  ``debounce_seconds``.  A newer value restarts the window (last write wins).
- Connectivity gate.  Before dispatching, a mode switch (or forced refresh)
  checks the platform's validated-internet flag and falls back to the
  DNS reachability probe when the flag is unset; everything else runs the
  probe directly.
- Backoff.  A failed gate or a network-level load error schedules a retry
  after ``retry_base_delay_seconds * 2**n``.  After ``max_retries`` retries
  the controller enters FAILED and stays on the last loaded URL until the
  next network event or refresh.
- One load at a time.  While a load is in flight, a newer switch is queued
  and dispatched once the consumer reports back.

Concurrency model:
------------------
Every input (platform callbacks from any thread, consumer reports, timer
expiries, pipeline results) is posted as a message onto one
``asyncio.Queue`` and applied by a single run loop, so ``TransitionState``
has exactly one writer.  Timers and connectivity checks run as tasks that
carry a generation number; superseded tasks are cancelled and any message
they still manage to post is dropped as stale.

Handler Contract:
-----------------
Inputs never raise once the controller is started.  Failures of the
pipeline, the prober or the consumer are logged and folded into the state
machine.  Using the controller before ``start()`` raises
``ControllerNotStartedError``.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Coroutine
from dataclasses import dataclass
from typing import Any

from netswitch.enums.enum_load_error_kind import EnumLoadErrorKind
from netswitch.enums.enum_network_event_type import EnumNetworkEventType
from netswitch.enums.enum_transition_phase import EnumTransitionPhase
from netswitch.errors import ControllerNotStartedError
from netswitch.models.model_network_event import ModelNetworkEvent
from netswitch.models.model_resolved_url import ModelResolvedUrl
from netswitch.nodes.node_url_transition_reducer.handlers.transition_state import (
    EnumEvaluationCause,
    MsgBackoffElapsed,
    MsgConnectivityChecked,
    MsgDebounceElapsed,
    MsgEvaluate,
    MsgEvaluationDone,
    MsgForcedRefresh,
    MsgLoadFailed,
    MsgLoadSucceeded,
    MsgLoadTimedOut,
    MsgNetworkEvent,
    MsgResolvedUrl,
    QueuedSwitch,
    TransitionState,
)
from netswitch.nodes.node_url_transition_reducer.models import (
    ModelTransitionControllerConfig,
    ModelTransitionSnapshot,
)
from netswitch.protocols import (
    ProtocolConnectivityProber,
    ProtocolNetworkEventSource,
    ProtocolUrlConsumer,
    ProtocolUrlResolutionPipeline,
)
from netswitch.utils.url_display import safe_url_display

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[Any]]
StatusListener = Callable[[ModelTransitionSnapshot], None]

_CACHE_INVALIDATING_EVENTS = frozenset(
    {EnumNetworkEventType.AVAILABLE, EnumNetworkEventType.LOST}
)


@dataclass(frozen=True)
class _MsgBarrier:
    done: asyncio.Future[None]


class UrlTransitionController:
    """Drive a ``ProtocolUrlConsumer`` toward the currently resolved URL.

    Example:
        ```python
        controller = UrlTransitionController(pipeline, prober, webview)
        async with controller:
            ...
            # from the view's callbacks (any thread):
            controller.report_load_succeeded(url)
            controller.report_load_failed(url, EnumLoadErrorKind.CONNECT)
        ```

    Args:
        pipeline: Produces the URL that should be active.
        prober: Connectivity gate.
        consumer: Receives load instructions.
        config: Timing configuration.
        event_source: Optional platform callback source; subscribed on
            ``start()`` and unsubscribed on ``close()``.
        status_listener: Called with a snapshot on every phase change.
        evaluate_on_start: Resolve once as soon as the controller starts.
        sleep: Awaitable sleep used for every timer (tests inject a fake).
        clock: Monotonic clock for ``last_switch_at``.
    """

    def __init__(
        self,
        pipeline: ProtocolUrlResolutionPipeline,
        prober: ProtocolConnectivityProber,
        consumer: ProtocolUrlConsumer,
        config: ModelTransitionControllerConfig | None = None,
        *,
        event_source: ProtocolNetworkEventSource | None = None,
        status_listener: StatusListener | None = None,
        evaluate_on_start: bool = True,
        sleep: SleepFn = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._pipeline = pipeline
        self._prober = prober
        self._consumer = consumer
        self._config = config or ModelTransitionControllerConfig()
        self._event_source = event_source
        self._status_listener = status_listener
        self._evaluate_on_start = evaluate_on_start
        self._sleep = sleep
        self._clock = clock

        self._state = TransitionState()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._queue: asyncio.Queue[object] | None = None
        self._run_task: asyncio.Task[None] | None = None
        self._closed = False

        self._evaluation_task: asyncio.Task[None] | None = None
        self._debounce_task: asyncio.Task[None] | None = None
        self._attempt_task: asyncio.Task[None] | None = None
        self._load_timeout_task: asyncio.Task[None] | None = None

        self._evaluation_gen = 0
        self._debounce_gen = 0
        self._attempt_gen = 0
        self._load_gen = 0

        self._refresh_requested = False
        self._last_event_on_wifi: bool | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def config(self) -> ModelTransitionControllerConfig:
        return self._config

    @property
    def is_running(self) -> bool:
        return self._run_task is not None and not self._closed

    async def start(self) -> None:
        """Start the run loop on the current event loop.  Idempotent."""
        if self._closed:
            raise ControllerNotStartedError("Controller has been closed")
        if self._run_task is not None:
            return
        self._loop = asyncio.get_running_loop()
        self._queue = asyncio.Queue()
        self._run_task = self._loop.create_task(
            self._run(), name="netswitch-transition-controller"
        )
        if self._event_source is not None:
            self._event_source.add_listener(self.notify_network_event)
        logger.info(
            "URL transition controller started",
            extra={
                "debounce_seconds": self._config.debounce_seconds,
                "mode_switch_debounce_seconds": self._config.mode_switch_debounce_seconds,
                "max_retries": self._config.max_retries,
            },
        )
        if self._evaluate_on_start:
            self._post(MsgEvaluate(EnumEvaluationCause.INITIAL))

    def close(self) -> None:
        """Cancel every pending timer and in-flight check.

        Must be called on the controller's event loop thread.  After close
        no further load instruction reaches the consumer.  Idempotent.
        """
        if self._closed:
            return
        self._closed = True
        if self._event_source is not None:
            try:
                self._event_source.remove_listener(self.notify_network_event)
            except Exception:
                logger.exception("Failed to unregister network listener")
        for task in self._tasks():
            task.cancel()
        logger.info("URL transition controller closed")

    async def aclose(self) -> None:
        """``close()`` and wait for the cancelled tasks to finish."""
        tasks = self._tasks()
        self.close()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def __aenter__(self) -> UrlTransitionController:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _tasks(self) -> list[asyncio.Task[None]]:
        return [
            task
            for task in (
                self._evaluation_task,
                self._debounce_task,
                self._attempt_task,
                self._load_timeout_task,
                self._run_task,
            )
            if task is not None and not task.done()
        ]

    # ------------------------------------------------------------------
    # Inputs (thread-safe)
    # ------------------------------------------------------------------

    def notify_network_event(self, event: ModelNetworkEvent) -> None:
        """Platform network callback.  Safe to call from any thread."""
        self._post(MsgNetworkEvent(event))

    def submit_resolved_url(self, resolved: ModelResolvedUrl) -> None:
        """Feed a resolution produced outside the controller's own pipeline."""
        self._post(MsgResolvedUrl(resolved))

    def request_forced_refresh(self) -> None:
        """User-initiated refresh: re-resolve now and reload unconditionally."""
        self._post(MsgForcedRefresh())

    def report_load_succeeded(self, url: str) -> None:
        """Consumer callback: the main frame finished loading."""
        self._post(MsgLoadSucceeded(url))

    def report_load_failed(
        self,
        url: str,
        error_kind: EnumLoadErrorKind,
        *,
        main_frame: bool = True,
    ) -> None:
        """Consumer callback: a load failed.

        Sub-resource failures (``main_frame=False``) and known third-party
        noise are ignored.
        """
        self._post(MsgLoadFailed(url, error_kind, main_frame))

    def snapshot(self) -> ModelTransitionSnapshot:
        """Return a read-only copy of the current state."""
        return self._state.snapshot()

    async def wait_idle(self) -> ModelTransitionSnapshot:
        """Wait until every message posted so far has been applied.

        Timers and checks still running keep running; this only drains the
        queue.  Must be awaited on the controller's event loop.
        """
        loop = self._require_loop()
        if self._closed:
            return self.snapshot()
        done: asyncio.Future[None] = loop.create_future()
        self._post(_MsgBarrier(done))
        await done
        return self.snapshot()

    def _require_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None or self._queue is None:
            raise ControllerNotStartedError(
                "UrlTransitionController.start() has not been awaited"
            )
        return self._loop

    def _post(self, message: object) -> None:
        loop = self._require_loop()
        if self._closed:
            logger.debug(
                "Controller closed, dropping message",
                extra={"message_type": type(message).__name__},
            )
            return
        queue = self._queue
        assert queue is not None
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            queue.put_nowait(message)
            return
        try:
            loop.call_soon_threadsafe(queue.put_nowait, message)
        except RuntimeError:
            logger.debug(
                "Controller event loop closed, dropping message",
                extra={"message_type": type(message).__name__},
            )

    # ------------------------------------------------------------------
    # Run loop
    # ------------------------------------------------------------------

    async def _run(self) -> None:
        queue = self._queue
        assert queue is not None
        while True:
            message = await queue.get()
            if self._closed:
                return
            try:
                self._dispatch(message)
            except Exception:
                logger.exception(
                    "Unhandled exception in transition controller",
                    extra={"message_type": type(message).__name__},
                )

    def _dispatch(self, message: object) -> None:
        if isinstance(message, MsgNetworkEvent):
            self._on_network_event(message.event)
        elif isinstance(message, MsgResolvedUrl):
            self._on_resolved(message.resolved, forced=False)
        elif isinstance(message, MsgForcedRefresh):
            self._on_forced_refresh()
        elif isinstance(message, MsgEvaluate):
            self._start_evaluation(message.cause, settle_seconds=0.0)
        elif isinstance(message, MsgEvaluationDone):
            self._on_evaluation_done(message)
        elif isinstance(message, MsgDebounceElapsed):
            self._on_debounce_elapsed(message)
        elif isinstance(message, MsgConnectivityChecked):
            self._on_connectivity_checked(message)
        elif isinstance(message, MsgBackoffElapsed):
            self._on_backoff_elapsed(message)
        elif isinstance(message, MsgLoadSucceeded):
            self._on_load_succeeded(message)
        elif isinstance(message, MsgLoadFailed):
            self._on_load_failed(message)
        elif isinstance(message, MsgLoadTimedOut):
            self._on_load_timed_out(message)
        elif isinstance(message, _MsgBarrier):
            if not message.done.done():
                message.done.set_result(None)
        else:
            logger.warning(
                "Unknown controller message",
                extra={"message_type": type(message).__name__},
            )

    # ------------------------------------------------------------------
    # Network events and evaluation
    # ------------------------------------------------------------------

    def _on_network_event(self, event: ModelNetworkEvent) -> None:
        invalidate = event.event_type in _CACHE_INVALIDATING_EVENTS
        if (
            event.event_type is EnumNetworkEventType.CAPABILITIES_CHANGED
            and event.on_wifi is not None
            and event.on_wifi != self._last_event_on_wifi
        ):
            invalidate = True

        if event.event_type is EnumNetworkEventType.LOST:
            self._last_event_on_wifi = None
        elif event.on_wifi is not None:
            self._last_event_on_wifi = event.on_wifi

        if invalidate:
            self._pipeline.invalidate()

        logger.debug(
            "Network event received",
            extra={
                "event_type": event.event_type.value,
                "on_wifi": event.on_wifi,
                "cache_invalidated": invalidate,
            },
        )
        self._state.retry_count = 0
        self._start_evaluation(
            EnumEvaluationCause.NETWORK_EVENT,
            settle_seconds=self._config.network_settle_seconds,
        )

    def _on_forced_refresh(self) -> None:
        logger.info("Forced refresh requested")
        self._refresh_requested = True
        self._cancel_debounce()
        self._pipeline.invalidate()
        self._state.retry_count = 0
        self._start_evaluation(EnumEvaluationCause.FORCED_REFRESH, settle_seconds=0.0)

    def _start_evaluation(
        self, cause: EnumEvaluationCause, *, settle_seconds: float
    ) -> None:
        _cancel(self._evaluation_task)
        self._evaluation_gen += 1
        self._evaluation_task = self._spawn(
            self._evaluate(self._evaluation_gen, cause, settle_seconds),
            "netswitch-evaluate",
        )

    async def _evaluate(
        self, generation: int, cause: EnumEvaluationCause, settle_seconds: float
    ) -> None:
        if settle_seconds > 0:
            await self._sleep(settle_seconds)
        resolved: ModelResolvedUrl | None
        try:
            resolved = await self._pipeline.resolve_current()
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(
                "URL resolution pipeline failed", extra={"cause": cause.value}
            )
            resolved = None
        self._post(MsgEvaluationDone(generation, cause, resolved))

    def _on_evaluation_done(self, message: MsgEvaluationDone) -> None:
        if message.generation != self._evaluation_gen:
            return
        self._evaluation_task = None
        if message.resolved is None:
            if (
                message.cause is EnumEvaluationCause.RETRY
                and self._state.phase is EnumTransitionPhase.RETRY_BACKOFF
            ):
                # Nothing else is scheduled; keep spending retries.
                logger.warning(
                    "Re-resolution failed during retry",
                    extra={"retry_count": self._state.retry_count},
                )
                self._schedule_backoff(reresolve=True)
            return

        forced = self._refresh_requested
        self._refresh_requested = False
        if (
            message.cause is EnumEvaluationCause.RETRY
            and not forced
            and self._state.phase is EnumTransitionPhase.RETRY_BACKOFF
        ):
            self._begin_attempt(message.resolved, direct=False, first=False)
            return
        self._on_resolved(message.resolved, forced=forced)

    # ------------------------------------------------------------------
    # Resolved values
    # ------------------------------------------------------------------

    def _on_resolved(self, new: ModelResolvedUrl, *, forced: bool) -> None:
        state = self._state
        loaded = state.currently_loaded

        if forced:
            self._cancel_debounce()
            state.retry_count = 0
            self._request_switch(new, direct=True, forced=True)
            return

        if state.phase is EnumTransitionPhase.FAILED:
            # Any fresh resolution is a recovery attempt, same URL or not.
            logger.info(
                "Recovering from FAILED", extra={"url": safe_url_display(new.url)}
            )
            self._cancel_debounce()
            state.retry_count = 0
            state.failure_reason = None
            self._request_switch(
                new, direct=loaded is not None, first=loaded is None
            )
            return

        if state.attempting and state.target is not None and state.target.url == new.url:
            self._cancel_debounce()
            if state.phase is EnumTransitionPhase.RETRY_BACKOFF:
                # Network changed while backing off; try again now.
                self._begin_attempt(new, direct=False, first=state.attempt_is_first)
            return

        if state.in_flight and state.target is not None and state.target.url == new.url:
            self._cancel_debounce()
            state.queued = None
            return

        if loaded is None:
            self._cancel_debounce()
            self._request_switch(new, direct=False, first=True)
            return

        if new.url == loaded.url and not state.in_flight:
            if state.pending is not None or state.attempting:
                logger.debug(
                    "Resolution returned to the loaded URL, dropping pending switch",
                    extra={"url": safe_url_display(new.url)},
                )
                self._cancel_debounce()
                self._cancel_attempt()
                self._settle_phase()
            return

        reference = state.target if state.in_flight and state.target else loaded
        mode_switch = new.crosses_boundary(reference)
        if state.attempting:
            self._cancel_attempt()
            self._settle_phase()
        self._schedule_debounce(new, mode_switch=mode_switch)

    def _schedule_debounce(self, new: ModelResolvedUrl, *, mode_switch: bool) -> None:
        state = self._state
        _cancel(self._debounce_task)
        self._debounce_gen += 1
        state.pending = new
        state.pending_is_mode_switch = mode_switch
        window = (
            self._config.mode_switch_debounce_seconds
            if mode_switch
            else self._config.debounce_seconds
        )
        logger.debug(
            "URL change debounced",
            extra={
                "url": safe_url_display(new.url),
                "url_kind": new.kind.value,
                "mode_switch": mode_switch,
                "window_seconds": window,
            },
        )
        self._debounce_task = self._spawn(
            self._post_after(window, MsgDebounceElapsed(self._debounce_gen)),
            "netswitch-debounce",
        )

    def _on_debounce_elapsed(self, message: MsgDebounceElapsed) -> None:
        state = self._state
        if message.generation != self._debounce_gen or state.pending is None:
            return
        self._debounce_task = None
        target = state.pending
        direct = state.pending_is_mode_switch
        state.pending = None
        state.pending_is_mode_switch = False
        self._request_switch(target, direct=direct)

    def _cancel_debounce(self) -> None:
        _cancel(self._debounce_task)
        self._debounce_task = None
        self._debounce_gen += 1
        self._state.pending = None
        self._state.pending_is_mode_switch = False

    # ------------------------------------------------------------------
    # Attempts: connectivity gate and backoff
    # ------------------------------------------------------------------

    def _request_switch(
        self,
        target: ModelResolvedUrl,
        *,
        direct: bool,
        first: bool = False,
        forced: bool = False,
    ) -> None:
        state = self._state
        if state.in_flight:
            state.queued = QueuedSwitch(target=target, direct=direct, forced=forced)
            logger.debug(
                "Load in flight, switch queued",
                extra={"url": safe_url_display(target.url), "forced": forced},
            )
            return
        self._begin_attempt(target, direct=direct, first=first)

    def _begin_attempt(
        self, target: ModelResolvedUrl, *, direct: bool, first: bool
    ) -> None:
        self._cancel_attempt()
        state = self._state
        state.target = target
        state.attempt_is_first = first
        state.backoff_reresolve = False
        self._set_phase(EnumTransitionPhase.AWAITING_CONNECTIVITY)

        if direct:
            check = self._check_validated(self._attempt_gen)
        else:
            check = self._check_reachable(self._attempt_gen)
        self._attempt_task = self._spawn(check, "netswitch-connectivity")

    async def _check_validated(self, generation: int) -> None:
        try:
            ok = await asyncio.to_thread(self._prober.is_internet_validated)
        except Exception:
            logger.exception("Validated-internet check failed")
            ok = False
        if not ok:
            # Flag unset or unknown (no capabilities API): confirm by probing.
            logger.debug("Validated-internet flag not set, probing reachability")
            ok = await self._probe_reachable()
        self._post(MsgConnectivityChecked(generation, ok))

    async def _check_reachable(self, generation: int) -> None:
        self._post(MsgConnectivityChecked(generation, await self._probe_reachable()))

    async def _probe_reachable(self) -> bool:
        try:
            return await self._prober.probe_reachability(
                self._config.connectivity_timeout_seconds
            )
        except Exception:
            logger.exception("Reachability probe failed unexpectedly")
            return False

    def _on_connectivity_checked(self, message: MsgConnectivityChecked) -> None:
        state = self._state
        if message.generation != self._attempt_gen or state.target is None:
            return
        self._attempt_task = None

        if message.ok:
            self._dispatch_load(state.target)
            return

        logger.info(
            "Connectivity not ready",
            extra={
                "url": safe_url_display(state.target.url),
                "retry_count": state.retry_count,
            },
        )
        if state.attempt_is_first:
            self._fail("connectivity_unavailable")
            return
        self._schedule_backoff(reresolve=False)

    def _schedule_backoff(self, *, reresolve: bool) -> None:
        state = self._state
        if state.retry_count >= self._config.max_retries:
            self._fail("retries_exhausted")
            return

        delay = self._config.backoff_delay(state.retry_count)
        state.retry_count += 1
        state.backoff_reresolve = reresolve
        self._set_phase(EnumTransitionPhase.RETRY_BACKOFF)
        logger.info(
            "Retry scheduled",
            extra={
                "url": safe_url_display(state.target.url if state.target else None),
                "retry_count": state.retry_count,
                "delay_seconds": delay,
                "reresolve": reresolve,
            },
        )
        self._attempt_task = self._spawn(
            self._post_after(delay, MsgBackoffElapsed(self._attempt_gen)),
            "netswitch-backoff",
        )

    def _on_backoff_elapsed(self, message: MsgBackoffElapsed) -> None:
        state = self._state
        if message.generation != self._attempt_gen or state.target is None:
            return
        self._attempt_task = None

        if state.backoff_reresolve:
            self._start_evaluation(EnumEvaluationCause.RETRY, settle_seconds=0.0)
            return

        self._set_phase(EnumTransitionPhase.AWAITING_CONNECTIVITY)
        self._attempt_task = self._spawn(
            self._check_reachable(self._attempt_gen), "netswitch-connectivity"
        )

    def _cancel_attempt(self) -> None:
        _cancel(self._attempt_task)
        self._attempt_task = None
        self._attempt_gen += 1
        if not self._state.in_flight:
            self._state.target = None

    def _fail(self, reason: str) -> None:
        state = self._state
        state.failure_reason = reason
        logger.warning(
            "URL transition failed, staying on last loaded URL",
            extra={
                "reason": reason,
                "url": safe_url_display(state.target.url if state.target else None),
                "loaded_url": safe_url_display(
                    state.currently_loaded.url if state.currently_loaded else None
                ),
                "retry_count": state.retry_count,
                "last_error": state.last_error.value if state.last_error else None,
            },
        )
        self._set_phase(EnumTransitionPhase.FAILED)

    # ------------------------------------------------------------------
    # Loads
    # ------------------------------------------------------------------

    def _dispatch_load(self, target: ModelResolvedUrl) -> None:
        state = self._state
        state.target = target
        state.in_flight = True
        state.last_error = None
        state.failure_reason = None
        state.last_switch_at = self._clock()
        self._set_phase(EnumTransitionPhase.LOADING)

        _cancel(self._load_timeout_task)
        self._load_gen += 1
        self._load_timeout_task = self._spawn(
            self._post_after(
                self._config.load_timeout_seconds, MsgLoadTimedOut(self._load_gen)
            ),
            "netswitch-load-timeout",
        )

        logger.info(
            "Dispatching URL to consumer",
            extra={"url": safe_url_display(target.url), "url_kind": target.kind.value},
        )
        try:
            self._consumer.on_resolved_url_changed(target.url)
        except Exception:
            logger.exception(
                "Consumer raised while handling load instruction",
                extra={"url": safe_url_display(target.url)},
            )
            self._on_load_failed(MsgLoadFailed(target.url, EnumLoadErrorKind.CONNECT))

    def _finish_load(self) -> ModelResolvedUrl | None:
        _cancel(self._load_timeout_task)
        self._load_timeout_task = None
        self._load_gen += 1
        self._state.in_flight = False
        return self._state.target

    def _on_load_succeeded(self, message: MsgLoadSucceeded) -> None:
        state = self._state
        if not state.in_flight:
            logger.debug(
                "Load success reported with nothing in flight",
                extra={"url": safe_url_display(message.url)},
            )
            return

        target = state.target
        previous = state.currently_loaded
        if target is not None and not message.url.startswith(target.base_url):
            if (
                previous is not None
                and message.url.startswith(previous.base_url)
                and not target.base_url.startswith(previous.base_url)
            ):
                logger.info(
                    "Ignoring late load success for the previous URL",
                    extra={
                        "url": safe_url_display(message.url),
                        "target_url": safe_url_display(target.url),
                    },
                )
                return
            logger.warning(
                "Load success reported for a URL other than the target",
                extra={
                    "url": safe_url_display(message.url),
                    "target_url": safe_url_display(target.url),
                },
            )

        # Redirects may change the reported URL; the resolved target is what
        # the controller compares future resolutions against.
        state.currently_loaded = self._finish_load()
        state.target = None
        state.retry_count = 0
        state.last_error = None
        logger.info(
            "URL loaded",
            extra={
                "url": safe_url_display(
                    state.currently_loaded.url if state.currently_loaded else None
                ),
            },
        )
        self._set_phase(EnumTransitionPhase.LOADED)
        self._drain_queued()

    def _on_load_failed(self, message: MsgLoadFailed) -> None:
        state = self._state
        if self._is_ignored_error(message):
            logger.debug(
                "Ignoring sub-resource load error",
                extra={
                    "url": safe_url_display(message.url),
                    "error_kind": message.error_kind.value,
                },
            )
            return

        if state.in_flight:
            failed = self._finish_load()
        elif state.phase is EnumTransitionPhase.LOADED:
            failed = state.currently_loaded
        else:
            # A recovery is already underway.
            return
        if failed is None:
            return

        state.last_error = message.error_kind
        logger.warning(
            "Load failed",
            extra={
                "url": safe_url_display(message.url),
                "error_kind": message.error_kind.value,
                "retry_count": state.retry_count,
            },
        )

        if state.queued is not None:
            state.target = None
            self._settle_phase()
            self._drain_queued()
            return

        state.target = failed
        if not message.error_kind.is_network:
            self._fail("content_error")
            return
        self._schedule_backoff(reresolve=True)

    def _on_load_timed_out(self, message: MsgLoadTimedOut) -> None:
        state = self._state
        if message.generation != self._load_gen or not state.in_flight:
            return
        target = state.target
        logger.warning(
            "Consumer did not report within load timeout",
            extra={
                "url": safe_url_display(target.url if target else None),
                "timeout_seconds": self._config.load_timeout_seconds,
            },
        )
        self._on_load_failed(
            MsgLoadFailed(target.url if target else "", EnumLoadErrorKind.TIMEOUT)
        )

    def _is_ignored_error(self, message: MsgLoadFailed) -> bool:
        if not message.main_frame:
            return True
        state = self._state
        url = message.url
        for known in (state.target, state.currently_loaded):
            if known is not None and url.startswith(known.base_url):
                return False
        lowered = url.lower()
        return any(marker in lowered for marker in self._config.ignored_error_markers)

    def _drain_queued(self) -> None:
        state = self._state
        queued = state.queued
        state.queued = None
        if queued is None:
            return
        loaded = state.currently_loaded
        if (
            not queued.forced
            and loaded is not None
            and queued.target.url == loaded.url
            and state.phase is EnumTransitionPhase.LOADED
        ):
            return
        self._begin_attempt(
            queued.target,
            direct=queued.direct,
            first=loaded is None and not queued.direct,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _settle_phase(self) -> None:
        state = self._state
        if state.in_flight:
            return
        self._set_phase(
            EnumTransitionPhase.LOADED
            if state.currently_loaded is not None
            else EnumTransitionPhase.IDLE
        )

    def _set_phase(self, phase: EnumTransitionPhase) -> None:
        previous = self._state.phase
        if previous is phase:
            return
        self._state.phase = phase
        logger.debug(
            "Transition phase changed",
            extra={"from_phase": previous.value, "to_phase": phase.value},
        )
        if self._status_listener is not None:
            try:
                self._status_listener(self._state.snapshot())
            except Exception:
                logger.exception("Status listener raised")

    def _spawn(
        self, coro: Coroutine[Any, Any, None], name: str
    ) -> asyncio.Task[None]:
        return self._require_loop().create_task(coro, name=name)

    async def _post_after(self, delay: float, message: object) -> None:
        await self._sleep(delay)
        self._post(message)


def _cancel(task: asyncio.Task[None] | None) -> None:
    if task is not None and not task.done():
        task.cancel()


__all__ = ["UrlTransitionController"]
