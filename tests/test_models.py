from __future__ import annotations

import pytest
from pydantic import ValidationError

from homehub.mock_home import sample_survey
from homehub.models import (
    Device,
    NetworkPeer,
    PeerStatus,
    PeerType,
    SecurityScheme,
    WirelessNetwork,
    WirelessSurvey,
)


def test_device_off_never_draws_power():
    device = Device(id="d", name="Lamp", status=False, energy_usage=40)

    assert device.energy_usage == 0


def test_device_on_without_reading_draws_nominal_power():
    device = Device(id="d", name="Lamp", status=True, nominal_power=7.5)

    assert device.energy_usage == 7.5


def test_device_rejects_out_of_range_values():
    with pytest.raises(ValidationError):
        Device(id="d", name="Lamp", battery=101)
    with pytest.raises(ValidationError):
        Device(id="d", name="Lamp", signal_strength=-1)
    with pytest.raises(ValidationError):
        Device(id="", name="Lamp")


def test_peer_mac_is_normalized():
    peer = NetworkPeer(id="p", name="Phone", mac_address="aa-bb-cc-dd-ee-0f")

    assert peer.mac_address == "AA:BB:CC:DD:EE:0F"


def test_gateway_is_online_with_zero_bandwidth():
    gateway = NetworkPeer(
        id="gw",
        name="Router",
        peer_type=PeerType.GATEWAY,
        status=PeerStatus.OFFLINE,
        bandwidth=300,
    )

    assert gateway.is_online
    assert gateway.bandwidth == 0


def test_offline_peer_keeps_nominal_bandwidth():
    peer = NetworkPeer(
        id="p", name="Laptop", status=PeerStatus.OFFLINE, nominal_bandwidth=80
    )

    assert peer.bandwidth == 0
    assert peer.nominal_bandwidth == 80


def test_security_schemes_are_ordered_by_strength():
    ordered = sorted(SecurityScheme, key=lambda scheme: scheme.strength)

    assert ordered == [
        SecurityScheme.OPEN,
        SecurityScheme.WEP,
        SecurityScheme.WPA2,
        SecurityScheme.WPA3,
    ]


def test_open_network_is_insecure():
    assert not WirelessNetwork(ssid="Cafe", security="Open").is_secure
    assert WirelessNetwork(ssid="Home", security="WPA3").is_secure


def test_survey_rejects_duplicate_ssids():
    with pytest.raises(ValidationError, match="Duplicate network"):
        WirelessSurvey(
            networks=[WirelessNetwork(ssid="Home"), WirelessNetwork(ssid="Home")]
        )


def test_survey_rejects_two_connected_networks():
    with pytest.raises(ValidationError, match="Only one network"):
        WirelessSurvey(
            networks=[
                WirelessNetwork(ssid="A", is_connected=True),
                WirelessNetwork(ssid="B", is_connected=True),
            ]
        )


def test_mark_connected_is_exclusive():
    survey = sample_survey()

    assert survey.connected().ssid == "SmartHome_5G"
    assert survey.mark_connected("SmartHome_2.4G").ssid == "SmartHome_2.4G"
    assert [n.ssid for n in survey.networks if n.is_connected] == ["SmartHome_2.4G"]


def test_mark_connected_unknown_ssid_changes_nothing():
    survey = sample_survey()

    assert survey.mark_connected("Nope") is None
    assert survey.connected().ssid == "SmartHome_5G"


def test_strongest_orders_by_signal():
    assert [n.ssid for n in sample_survey().strongest()] == [
        "SmartHome_5G",
        "SmartHome_2.4G",
        "Neighbor_WiFi",
        "Public_WiFi",
    ]
