# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operating-system backed implementation of ``ProtocolNetworkPlatform``.

Each query maps to one rung of the identity resolver's fallback chain:

=====================  ==========================  ===========================
Query                  Linux                       macOS
=====================  ==========================  ===========================
capabilities           ``nmcli`` (NetworkManager)  not available
wifi manager SSID      ``iwgetid -r``              ``networksetup``
system config SSID     ``wpa_cli status``          not available
=====================  ==========================  ===========================

Every call goes through a ``ProtocolCommandRunner`` with a hard timeout and
returns ``None`` when the tool is missing, times out, or reports nothing.
Sentinel filtering is left to the resolver so that raw platform answers stay
observable in logs.
"""

from __future__ import annotations

import logging
import platform as _platform

from netswitch.clients.command_runner import SubprocessRunner
from netswitch.models.model_network_capabilities import ModelNetworkCapabilities
from netswitch.protocols import ProtocolCommandRunner

logger = logging.getLogger(__name__)

_DEFAULT_COMMAND_TIMEOUT_S: float = 2.0

# nmcli connectivity states (``nmcli networking connectivity``).
_NM_CONNECTIVITY_FULL = "full"
_NM_CONNECTIVITY_PARTIAL = frozenset({"limited", "portal"})


def _split_nmcli_fields(line: str) -> list[str]:
    """Split one line of ``nmcli -t`` output.

    Terse mode separates fields with ``:`` and escapes literal colons and
    backslashes inside values with a backslash.
    """
    fields: list[str] = []
    current: list[str] = []
    escaped = False
    for char in line:
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == ":":
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    return fields


class SystemNetworkPlatform:
    """Query the host OS for WiFi identity and connectivity.

    Args:
        runner: Command runner (defaults to ``SubprocessRunner``).
        command_timeout_seconds: Upper bound for each external command.
        system: Override for ``platform.system()`` (tests).
        wifi_interface: macOS WiFi device; auto-detected when omitted.
    """

    def __init__(
        self,
        runner: ProtocolCommandRunner | None = None,
        *,
        command_timeout_seconds: float = _DEFAULT_COMMAND_TIMEOUT_S,
        system: str | None = None,
        wifi_interface: str | None = None,
    ) -> None:
        self._runner = runner or SubprocessRunner()
        self._timeout = command_timeout_seconds
        self._system = system or _platform.system()
        self._wifi_interface = wifi_interface

    # ------------------------------------------------------------------
    # ProtocolNetworkPlatform
    # ------------------------------------------------------------------

    def get_capabilities(self) -> ModelNetworkCapabilities | None:
        if self._system != "Linux":
            return None

        devices = self._runner.run(
            ["nmcli", "-t", "-f", "TYPE,STATE", "device"], timeout=self._timeout
        )
        if not devices.ok:
            logger.debug(
                "nmcli device query unavailable",
                extra={"returncode": devices.returncode, "stderr": devices.stderr.strip()},
            )
            return None

        on_wifi = False
        for line in devices.stdout.splitlines():
            fields = _split_nmcli_fields(line)
            if len(fields) >= 2 and fields[0] == "wifi" and fields[1] == "connected":
                on_wifi = True
                break

        connectivity = self._runner.run(
            ["nmcli", "-t", "networking", "connectivity"], timeout=self._timeout
        )
        state = connectivity.stdout.strip().lower() if connectivity.ok else "unknown"
        validated = state == _NM_CONNECTIVITY_FULL
        has_internet = validated or state in _NM_CONNECTIVITY_PARTIAL

        return ModelNetworkCapabilities(
            on_wifi=on_wifi,
            has_internet=has_internet,
            validated=validated,
            transport_ssid=self._nmcli_active_ssid() if on_wifi else None,
        )

    def get_wifi_manager_ssid(self) -> str | None:
        if self._system == "Darwin":
            return self._networksetup_ssid()
        if self._system != "Linux":
            return None
        result = self._runner.run(["iwgetid", "-r"], timeout=self._timeout)
        if result.ok and result.stdout.strip():
            return result.stdout.strip()
        return None

    def get_system_config_ssid(self) -> str | None:
        if self._system != "Linux":
            return None
        result = self._runner.run(["wpa_cli", "status"], timeout=self._timeout)
        if not result.ok:
            return None
        values: dict[str, str] = {}
        for line in result.stdout.splitlines():
            key, sep, value = line.partition("=")
            if sep:
                values[key.strip()] = value.strip()
        if values.get("wpa_state") != "COMPLETED":
            return None
        return values.get("ssid") or None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _nmcli_active_ssid(self) -> str | None:
        result = self._runner.run(
            ["nmcli", "-t", "-f", "ACTIVE,SSID", "device", "wifi"],
            timeout=self._timeout,
        )
        if not result.ok:
            return None
        for line in result.stdout.splitlines():
            fields = _split_nmcli_fields(line)
            if len(fields) >= 2 and fields[0] == "yes":
                return fields[1]
        return None

    def _macos_wifi_interface(self) -> str:
        if self._wifi_interface:
            return self._wifi_interface
        result = self._runner.run(
            ["networksetup", "-listallhardwareports"], timeout=self._timeout
        )
        if result.ok:
            lines = result.stdout.splitlines()
            for index, line in enumerate(lines):
                if "Wi-Fi" in line and index + 1 < len(lines):
                    device_line = lines[index + 1]
                    if device_line.startswith("Device:"):
                        self._wifi_interface = device_line.split(":", 1)[1].strip()
                        return self._wifi_interface
        return "en0"

    def _networksetup_ssid(self) -> str | None:
        interface = self._macos_wifi_interface()
        result = self._runner.run(
            ["networksetup", "-getairportnetwork", interface], timeout=self._timeout
        )
        if not result.ok:
            return None
        # "Current Wi-Fi Network: <SSID>" or "You are not associated..."
        output = result.stdout.strip()
        prefix = "Current Wi-Fi Network:"
        if output.startswith(prefix):
            return output[len(prefix) :].strip() or None
        return None


__all__ = ["SystemNetworkPlatform"]
