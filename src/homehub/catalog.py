"""Static reference data about radio protocols and device categories.

Read-only; presentation code uses it for labels and hints. Registries never
consult it.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from homehub.models import DeviceCategory, Protocol

Level = Literal["low", "medium", "high"]


class ProtocolDescriptor(BaseModel):
    model_config = {"frozen": True}

    key: Protocol
    name: str
    description: str
    frequency: str
    range: str
    power_consumption: Level
    security: Literal["basic", "standard", "high"]


class CategoryDescriptor(BaseModel):
    model_config = {"frozen": True}

    key: DeviceCategory
    name: str
    common_protocols: tuple[Protocol, ...]


PROTOCOLS: dict[Protocol, ProtocolDescriptor] = {
    descriptor.key: descriptor
    for descriptor in (
        ProtocolDescriptor(
            key=Protocol.ZIGBEE,
            name="Zigbee 3.0",
            description="Low-power mesh networking for home devices",
            frequency="2.4GHz",
            range="10-100m",
            power_consumption="low",
            security="high",
        ),
        ProtocolDescriptor(
            key=Protocol.ZWAVE,
            name="Z-Wave Plus",
            description="Sub-GHz mesh with long range and reliability",
            frequency="908.42MHz (US), 868.42MHz (EU)",
            range="30-100m",
            power_consumption="low",
            security="high",
        ),
        ProtocolDescriptor(
            key=Protocol.MATTER,
            name="Matter/Thread",
            description="Interoperable IP mesh standard",
            frequency="2.4GHz",
            range="10-30m per hop",
            power_consumption="low",
            security="high",
        ),
        ProtocolDescriptor(
            key=Protocol.WIFI,
            name="WiFi 6 (802.11ax)",
            description="High-bandwidth local wireless",
            frequency="2.4GHz & 5GHz",
            range="50-100m",
            power_consumption="medium",
            security="high",
        ),
        ProtocolDescriptor(
            key=Protocol.BLE,
            name="Bluetooth Low Energy (BLE)",
            description="Short-range point-to-point link",
            frequency="2.4GHz",
            range="10-50m",
            power_consumption="low",
            security="standard",
        ),
    )
}

CATEGORIES: dict[DeviceCategory, CategoryDescriptor] = {
    descriptor.key: descriptor
    for descriptor in (
        CategoryDescriptor(
            key=DeviceCategory.LIGHTING,
            name="Lighting",
            common_protocols=(Protocol.ZIGBEE, Protocol.WIFI, Protocol.BLE),
        ),
        CategoryDescriptor(
            key=DeviceCategory.SECURITY,
            name="Security",
            common_protocols=(Protocol.ZWAVE, Protocol.WIFI, Protocol.MATTER),
        ),
        CategoryDescriptor(
            key=DeviceCategory.CLIMATE,
            name="Climate",
            common_protocols=(Protocol.WIFI, Protocol.MATTER, Protocol.ZWAVE),
        ),
        CategoryDescriptor(
            key=DeviceCategory.APPLIANCES,
            name="Appliances",
            common_protocols=(Protocol.WIFI, Protocol.MATTER),
        ),
        CategoryDescriptor(
            key=DeviceCategory.OTHER,
            name="Other",
            common_protocols=(),
        ),
    )
}


def get_protocol_info(key: str) -> ProtocolDescriptor | None:
    try:
        return PROTOCOLS[Protocol(key)]
    except ValueError:
        return None


def recommended_protocols(category: str) -> list[Protocol]:
    try:
        descriptor = CATEGORIES[DeviceCategory(category)]
    except ValueError:
        return []
    return list(descriptor.common_protocols)


def protocol_label(protocol: Protocol) -> str:
    return PROTOCOLS[protocol].name
