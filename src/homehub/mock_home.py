"""Sample home used by the CLI and for development."""

from __future__ import annotations

from datetime import datetime, timedelta

from homehub.models import (
    Device,
    DeviceCategory,
    NetworkPeer,
    PeerStatus,
    PeerType,
    Protocol,
    SecurityScheme,
    WirelessNetwork,
    WirelessSurvey,
)
from homehub.models.base import utcnow


def _ago(now: datetime, minutes: float) -> datetime:
    return now - timedelta(minutes=minutes)


def sample_devices(now: datetime | None = None) -> list[Device]:
    now = now or utcnow()
    return [
        Device(
            id="1",
            name="Living Room Ceiling Lights",
            category=DeviceCategory.LIGHTING,
            brand="Philips Hue",
            room="Living Room",
            protocol=Protocol.ZIGBEE,
            status=True,
            ip_address="192.168.1.45",
            signal_strength=95,
            firmware_version="1.50.2",
            last_seen=_ago(now, 2),
            energy_usage=45,
            nominal_power=45,
        ),
        Device(
            id="2",
            name="Kitchen Under Cabinet LEDs",
            category=DeviceCategory.LIGHTING,
            brand="LIFX",
            room="Kitchen",
            protocol=Protocol.WIFI,
            status=False,
            ip_address="192.168.1.67",
            signal_strength=88,
            firmware_version="3.70",
            last_seen=_ago(now, 5),
            nominal_power=18,
        ),
        Device(
            id="3",
            name="Smart Thermostat Pro",
            category=DeviceCategory.CLIMATE,
            brand="Nest",
            room="Hallway",
            protocol=Protocol.MATTER,
            status=True,
            temperature=22,
            ip_address="192.168.1.89",
            signal_strength=92,
            firmware_version="6.2.1",
            last_seen=_ago(now, 1),
            energy_usage=12,
            nominal_power=12,
        ),
        Device(
            id="4",
            name="Front Door Security Camera",
            category=DeviceCategory.SECURITY,
            brand="Ring",
            room="Entrance",
            protocol=Protocol.ZWAVE,
            status=True,
            battery=85,
            signal_strength=78,
            firmware_version="2.1.4",
            last_seen=_ago(now, 0.5),
            energy_usage=8,
            nominal_power=8,
        ),
        Device(
            id="5",
            name='75" QLED Smart TV',
            category=DeviceCategory.APPLIANCES,
            brand="Samsung",
            room="Living Room",
            protocol=Protocol.WIFI,
            status=False,
            ip_address="192.168.1.123",
            signal_strength=96,
            firmware_version="1402.3",
            last_seen=_ago(now, 60),
            nominal_power=150,
        ),
        Device(
            id="6",
            name="Smart Convection Microwave",
            category=DeviceCategory.APPLIANCES,
            brand="LG",
            room="Kitchen",
            protocol=Protocol.WIFI,
            status=False,
            ip_address="192.168.1.156",
            signal_strength=84,
            firmware_version="4.1.2",
            last_seen=_ago(now, 180),
            nominal_power=1100,
        ),
        Device(
            id="7",
            name="Bedroom Climate Control",
            category=DeviceCategory.CLIMATE,
            brand="Daikin",
            room="Master Bedroom",
            protocol=Protocol.MATTER,
            status=True,
            temperature=20,
            signal_strength=89,
            firmware_version="2.3.1",
            last_seen=_ago(now, 2),
            energy_usage=1200,
            nominal_power=1200,
        ),
        Device(
            id="8",
            name="Smart Washing Machine",
            category=DeviceCategory.APPLIANCES,
            brand="Bosch",
            room="Laundry Room",
            protocol=Protocol.WIFI,
            status=False,
            ip_address="192.168.1.178",
            signal_strength=72,
            firmware_version="1.8.3",
            last_seen=_ago(now, 15),
            nominal_power=500,
        ),
    ]


def sample_device_candidates() -> list[Device]:
    return [
        Device(
            id="sonoff-basic-r4",
            name="Sonoff Basic R4",
            category=DeviceCategory.APPLIANCES,
            brand="Sonoff",
            protocol=Protocol.WIFI,
            signal_strength=70,
            nominal_power=5,
        ),
        Device(
            id="kasa-smart-plug",
            name="TP-Link Kasa Smart Plug",
            category=DeviceCategory.APPLIANCES,
            brand="TP-Link",
            protocol=Protocol.WIFI,
            signal_strength=81,
            nominal_power=3,
        ),
        Device(
            id="xiaomi-motion",
            name="Xiaomi Motion Sensor",
            category=DeviceCategory.SECURITY,
            brand="Xiaomi",
            protocol=Protocol.ZIGBEE,
            battery=100,
            signal_strength=64,
            nominal_power=0.5,
        ),
    ]


def sample_peers(now: datetime | None = None) -> list[NetworkPeer]:
    now = now or utcnow()
    return [
        NetworkPeer(
            id="1",
            name="ASUS AX6000 Router",
            peer_type=PeerType.GATEWAY,
            ip_address="192.168.1.1",
            mac_address="00:1A:2B:3C:4D:5E",
            signal_strength=100,
            last_seen=now,
            is_secure=True,
        ),
        NetworkPeer(
            id="2",
            name="iPhone 15 Pro",
            peer_type=PeerType.HANDSET,
            ip_address="192.168.1.45",
            mac_address="00:1A:2B:3C:4D:5F",
            signal_strength=95,
            bandwidth=25,
            last_seen=_ago(now, 2),
            is_secure=True,
        ),
        NetworkPeer(
            id="3",
            name="MacBook Pro M3",
            peer_type=PeerType.LAPTOP,
            ip_address="192.168.1.67",
            mac_address="00:1A:2B:3C:4D:60",
            signal_strength=88,
            bandwidth=120,
            last_seen=_ago(now, 1),
            is_secure=True,
        ),
        NetworkPeer(
            id="4",
            name="Samsung QLED TV",
            peer_type=PeerType.DISPLAY,
            ip_address="192.168.1.123",
            mac_address="00:1A:2B:3C:4D:61",
            signal_strength=92,
            bandwidth=85,
            last_seen=_ago(now, 5),
            is_secure=True,
        ),
        NetworkPeer(
            id="5",
            name="Sonos Arc",
            peer_type=PeerType.AUDIO,
            ip_address="192.168.1.156",
            mac_address="00:1A:2B:3C:4D:62",
            signal_strength=78,
            bandwidth=15,
            last_seen=_ago(now, 3),
            is_secure=True,
        ),
    ]


def sample_peer_candidates() -> list[NetworkPeer]:
    return [
        NetworkPeer(
            id="192.168.1.201",
            name="Unknown Device",
            ip_address="192.168.1.201",
            status=PeerStatus.ONLINE,
            signal_strength=40,
        ),
        NetworkPeer(
            id="192.168.1.202",
            name="Smart Doorbell",
            ip_address="192.168.1.202",
            status=PeerStatus.ONLINE,
            signal_strength=66,
            bandwidth=4,
            is_secure=True,
        ),
    ]


def sample_survey() -> WirelessSurvey:
    return WirelessSurvey(
        networks=[
            WirelessNetwork(
                ssid="SmartHome_5G",
                security=SecurityScheme.WPA3,
                signal_strength=95,
                frequency="5GHz",
                is_connected=True,
            ),
            WirelessNetwork(
                ssid="SmartHome_2.4G",
                security=SecurityScheme.WPA3,
                signal_strength=88,
                frequency="2.4GHz",
            ),
            WirelessNetwork(
                ssid="Neighbor_WiFi",
                security=SecurityScheme.WPA2,
                signal_strength=45,
                frequency="2.4GHz",
            ),
            WirelessNetwork(
                ssid="Public_WiFi",
                security=SecurityScheme.OPEN,
                signal_strength=32,
                frequency="2.4GHz",
            ),
        ]
    )
