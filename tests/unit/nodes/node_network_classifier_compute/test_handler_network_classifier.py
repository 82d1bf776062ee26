# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the network classifier.

Covers:
  1. Home-set membership (case and quote insensitive)
  2. Forced modes skip detection entirely
  3. Not on WiFi is never home
  4. Detection failure: manual override, then unidentified-network policy
"""

from __future__ import annotations

import pytest

from netswitch.enums.enum_connection_mode import EnumConnectionMode
from netswitch.enums.enum_identity_source import EnumIdentitySource
from netswitch.enums.enum_unidentified_network_policy import (
    EnumUnidentifiedNetworkPolicy,
)
from netswitch.models.model_network_identity import ModelNetworkIdentity
from netswitch.nodes.node_network_classifier_compute import (
    classify_network,
    is_home_network,
    normalize_network_name,
)

pytestmark = pytest.mark.unit

HOMES = frozenset({"HomeNet", "Cabin 5G"})


def _on_wifi(ssid: str | None) -> ModelNetworkIdentity:
    return ModelNetworkIdentity(
        ssid=ssid,
        on_wifi=True,
        source=EnumIdentitySource.CAPABILITIES if ssid else EnumIdentitySource.NONE,
    )


class TestNormalization:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("HomeNet", "homenet"),
            ('"HomeNet"', "homenet"),
            ("  HomeNet  ", "homenet"),
            ('" Cabin 5G "', "cabin 5g"),
            ("", ""),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_network_name(raw) == expected

    def test_membership_ignores_case_and_quotes(self) -> None:
        assert is_home_network('"homenet"', HOMES) is True
        assert is_home_network("CABIN 5G", HOMES) is True

    def test_membership_rejects_blank(self) -> None:
        assert is_home_network("", HOMES) is False
        assert is_home_network(None, HOMES) is False
        assert is_home_network('""', HOMES) is False


class TestAutoMode:
    def test_scenario_a_home_ssid(self) -> None:
        assert classify_network(_on_wifi("HomeNet"), EnumConnectionMode.AUTO, {"HomeNet"})

    def test_scenario_b_foreign_ssid(self) -> None:
        assert (
            classify_network(_on_wifi("CoffeeShop"), EnumConnectionMode.AUTO, {"HomeNet"})
            is False
        )

    def test_not_on_wifi_is_never_home(self) -> None:
        identity = ModelNetworkIdentity.not_on_wifi(validated_internet=True)
        assert classify_network(identity, EnumConnectionMode.AUTO, HOMES) is False

    def test_not_on_wifi_ignores_manual_override(self) -> None:
        identity = ModelNetworkIdentity.not_on_wifi()
        assert (
            classify_network(identity, EnumConnectionMode.AUTO, HOMES, "HomeNet")
            is False
        )

    def test_known_ssid_wins_over_manual_override(self) -> None:
        assert (
            classify_network(
                _on_wifi("CoffeeShop"), EnumConnectionMode.AUTO, HOMES, "HomeNet"
            )
            is False
        )

    def test_empty_home_set(self) -> None:
        assert classify_network(_on_wifi("HomeNet"), EnumConnectionMode.AUTO, ()) is False


class TestDetectionFailure:
    def test_defaults_to_home(self) -> None:
        assert classify_network(_on_wifi(None), EnumConnectionMode.AUTO, HOMES) is True

    def test_defaults_to_home_even_with_empty_home_set(self) -> None:
        assert classify_network(_on_wifi(None), EnumConnectionMode.AUTO, ()) is True

    def test_manual_override_in_home_set(self) -> None:
        assert (
            classify_network(
                _on_wifi(None),
                EnumConnectionMode.AUTO,
                HOMES,
                "homenet",
                unidentified_policy=EnumUnidentifiedNetworkPolicy.EXTERNAL,
            )
            is True
        )

    def test_external_policy(self) -> None:
        assert (
            classify_network(
                _on_wifi(None),
                EnumConnectionMode.AUTO,
                HOMES,
                "Elsewhere",
                unidentified_policy=EnumUnidentifiedNetworkPolicy.EXTERNAL,
            )
            is False
        )


class TestForcedModes:
    @pytest.mark.parametrize(
        "identity",
        [
            _on_wifi("HomeNet"),
            _on_wifi("CoffeeShop"),
            _on_wifi(None),
            ModelNetworkIdentity.not_on_wifi(),
        ],
    )
    def test_mode_short_circuits_every_identity(
        self, identity: ModelNetworkIdentity
    ) -> None:
        assert classify_network(identity, EnumConnectionMode.FORCE_INTERNAL, ()) is True
        assert (
            classify_network(identity, EnumConnectionMode.FORCE_EXTERNAL, HOMES)
            is False
        )


class TestPurity:
    def test_idempotent(self) -> None:
        identity = _on_wifi("HomeNet")
        results = {
            classify_network(identity, EnumConnectionMode.AUTO, HOMES) for _ in range(5)
        }
        assert results == {True}

    def test_accepts_any_iterable_once(self) -> None:
        homes = iter(["Other", "HomeNet"])
        assert classify_network(_on_wifi("HomeNet"), EnumConnectionMode.AUTO, homes)
