# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command-line launcher for netswitch.

Usage:
    python -m netswitch resolve
    python -m netswitch resolve --home-network HomeNet --mode auto
    python -m netswitch watch --poll-interval 2

``resolve`` runs one evaluation and prints the decision as JSON.  ``watch``
starts the network monitor and the transition controller with a consumer
that logs every load instruction and acknowledges it, and runs until SIGINT
or SIGTERM.

Configuration comes from ``NETSWITCH_*`` environment variables
(``ModelNetSwitchSettings``); command-line flags override them.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys
from collections.abc import Sequence

from netswitch.clients.client_system_network import SystemNetworkPlatform
from netswitch.enums.enum_connection_mode import EnumConnectionMode
from netswitch.enums.enum_log_level import EnumLogLevel
from netswitch.nodes.node_url_transition_reducer import (
    ModelTransitionSnapshot,
    UrlTransitionController,
)
from netswitch.runtime.network_monitor import NetworkMonitor
from netswitch.runtime.settings import ModelNetSwitchSettings
from netswitch.runtime.settings_store import InMemorySettingsStore
from netswitch.runtime.wiring import create_url_controller, create_url_pipeline
from netswitch.utils.url_display import safe_url_display

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: EnumLogLevel) -> None:
    logging.basicConfig(level=level.to_logging_level(), format=_LOG_FORMAT)


class LoggingUrlConsumer:
    """Headless consumer: logs each instruction and reports it as loaded."""

    def __init__(self) -> None:
        self.controller: UrlTransitionController | None = None
        self.loaded: list[str] = []

    def on_resolved_url_changed(self, url: str) -> None:
        logger.info("Load instruction: %s", safe_url_display(url))
        self.loaded.append(url)
        if self.controller is not None:
            self.controller.report_load_succeeded(url)


def _log_status(snapshot: ModelTransitionSnapshot) -> None:
    logger.info(
        "Controller phase: %s",
        snapshot.phase.value,
        extra={
            "retry_count": snapshot.retry_count,
            "url": safe_url_display(snapshot.currently_loaded_url),
        },
    )


def build_settings(args: argparse.Namespace) -> ModelNetSwitchSettings:
    """Environment settings with command-line overrides applied."""
    overrides: dict[str, object] = {}
    if args.mode is not None:
        overrides["connection_mode"] = EnumConnectionMode(args.mode)
    if args.internal_url is not None:
        overrides["internal_url"] = args.internal_url
    if args.external_url is not None:
        overrides["external_url"] = args.external_url
    if args.home_network:
        overrides["home_networks"] = list(args.home_network)
    if args.manual_override is not None:
        overrides["manual_override"] = args.manual_override
    if args.log_level is not None:
        overrides["log_level"] = EnumLogLevel(args.log_level)
    if getattr(args, "poll_interval", None) is not None:
        overrides["poll_interval_seconds"] = args.poll_interval
    settings = ModelNetSwitchSettings()
    if not overrides:
        return settings
    return settings.model_copy(update=overrides)


async def run_resolve(settings: ModelNetSwitchSettings) -> int:
    """Run one evaluation and print the decision as JSON."""
    store = InMemorySettingsStore.from_settings(settings)
    pipeline = create_url_pipeline(
        store, unidentified_policy=settings.unidentified_policy
    )
    decision = await pipeline.decide()
    sys.stdout.write(decision.model_dump_json(indent=2) + "\n")
    return 0


async def run_watch(settings: ModelNetSwitchSettings) -> int:
    """Run monitor + controller until a shutdown signal arrives."""
    store = InMemorySettingsStore.from_settings(settings)
    platform = SystemNetworkPlatform()
    monitor = NetworkMonitor(
        platform, poll_interval_seconds=settings.poll_interval_seconds
    )
    consumer = LoggingUrlConsumer()
    controller = create_url_controller(
        store,
        consumer,
        platform=platform,
        config=settings.to_controller_config(),
        event_source=monitor,
        unidentified_policy=settings.unidentified_policy,
        status_listener=_log_status,
    )
    consumer.controller = controller

    shutdown_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def handle_signal(sig_name: str) -> None:
        logger.info("Received %s, initiating shutdown", sig_name)
        shutdown_event.set()

    try:
        loop.add_signal_handler(signal.SIGTERM, handle_signal, "SIGTERM")
        loop.add_signal_handler(signal.SIGINT, handle_signal, "SIGINT")
    except NotImplementedError:
        signal.signal(signal.SIGTERM, lambda *_: shutdown_event.set())
        signal.signal(signal.SIGINT, lambda *_: shutdown_event.set())

    logger.info("=" * 60)
    logger.info("Starting netswitch watch")
    logger.info("=" * 60)
    try:
        async with controller:
            await monitor.start()
            await shutdown_event.wait()
    finally:
        await monitor.stop()
        logger.info("netswitch watch shutdown complete")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in EnumConnectionMode],
        default=None,
        help="Connection mode (overrides NETSWITCH_CONNECTION_MODE)",
    )
    parser.add_argument("--internal-url", default=None, help="Internal endpoint URL")
    parser.add_argument("--external-url", default=None, help="External endpoint URL")
    parser.add_argument(
        "--home-network",
        action="append",
        default=[],
        help="Home network SSID (repeatable)",
    )
    parser.add_argument(
        "--manual-override",
        default=None,
        help="Identity used when SSID detection fails",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in EnumLogLevel],
        default=None,
        help="Log level (overrides NETSWITCH_LOG_LEVEL)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netswitch",
        description="Network-aware internal/external URL resolution",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve the active URL once and print the decision"
    )
    _add_common_arguments(resolve_parser)

    watch_parser = subparsers.add_parser(
        "watch", help="Follow network changes and log URL transitions"
    )
    _add_common_arguments(watch_parser)
    watch_parser.add_argument(
        "--poll-interval",
        type=float,
        default=None,
        help="Network polling interval in seconds",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the selected command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = build_settings(args)
    configure_logging(settings.log_level)

    if args.command == "resolve":
        return asyncio.run(run_resolve(settings))
    return asyncio.run(run_watch(settings))


if __name__ == "__main__":
    sys.exit(main())
