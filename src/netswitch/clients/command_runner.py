# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Subprocess abstraction for OS network queries.

Platform adapters call external tools (``nmcli``, ``iwgetid``, ``wpa_cli``,
``networksetup``).  Routing those calls through a runner keeps the adapters
testable with canned output and guarantees every call is bounded by a
timeout.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Conventional shell exit codes for "timed out" and "command not found".
RETURNCODE_TIMEOUT = 124
RETURNCODE_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    stdout: str
    stderr: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class SubprocessRunner:
    """Runs commands with ``subprocess.run``; never raises."""

    def run(self, cmd: Sequence[str], timeout: float | None = None) -> CommandResult:
        try:
            proc = subprocess.run(  # noqa: S603 - cmd is controlled by caller
                list(cmd),
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False,
            )
            return CommandResult(
                stdout=proc.stdout, stderr=proc.stderr, returncode=proc.returncode
            )
        except subprocess.TimeoutExpired as exc:
            stdout = (
                exc.stdout.decode(errors="ignore")
                if isinstance(exc.stdout, bytes)
                else (exc.stdout or "")
            )
            logger.debug("Command timed out: %s (timeout=%s)", cmd[0], timeout)
            return CommandResult(
                stdout=stdout, stderr="timeout", returncode=RETURNCODE_TIMEOUT
            )
        except FileNotFoundError:
            return CommandResult(
                stdout="", stderr=f"{cmd[0]}: not found", returncode=RETURNCODE_NOT_FOUND
            )
        except OSError as exc:
            logger.debug("Command failed to start: %s: %s", cmd[0], exc)
            return CommandResult(stdout="", stderr=str(exc), returncode=1)


__all__ = [
    "RETURNCODE_NOT_FOUND",
    "RETURNCODE_TIMEOUT",
    "CommandResult",
    "SubprocessRunner",
]
