"""Network peer and wireless network models."""

from __future__ import annotations

import string
from datetime import datetime
from enum import Enum

from pydantic import (
    BaseModel,
    Field,
    field_validator,
    model_validator,
)

from .base import Entity


class PeerType(str, Enum):
    GATEWAY = "gateway"
    HANDSET = "handset"
    LAPTOP = "laptop"
    DISPLAY = "display"
    AUDIO = "audio"
    GENERIC = "generic"


class PeerStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"


class SecurityScheme(str, Enum):
    OPEN = "open"
    WEP = "wep"
    WPA2 = "wpa2"
    WPA3 = "wpa3"

    @property
    def strength(self) -> int:
        return _SECURITY_ORDER.index(self)


_SECURITY_ORDER = [
    SecurityScheme.OPEN,
    SecurityScheme.WEP,
    SecurityScheme.WPA2,
    SecurityScheme.WPA3,
]


def normalize_mac(value: str) -> str:
    if not value:
        return ""
    cleaned = value.replace(":", "").replace("-", "").replace(".", "")
    if len(cleaned) == 12 and all(ch in string.hexdigits for ch in cleaned):
        return ":".join(cleaned[i : i + 2].upper() for i in range(0, 12, 2))
    return value


class NetworkPeer(Entity):
    """Host seen on the home network.

    Offline peers and the gateway itself report zero bandwidth.
    ``nominal_bandwidth`` remembers the draw restored when a peer comes back.
    """

    peer_type: PeerType = PeerType.GENERIC
    ip_address: str = ""
    mac_address: str = ""
    status: PeerStatus = PeerStatus.ONLINE
    bandwidth: float = Field(default=0.0, ge=0)
    nominal_bandwidth: float | None = Field(default=None, ge=0)
    is_secure: bool = False

    @field_validator("mac_address")
    @classmethod
    def _normalize_mac(cls, value: str) -> str:
        return normalize_mac(value)

    @model_validator(mode="after")
    def _apply_status_rules(self) -> NetworkPeer:
        if self.nominal_bandwidth is None:
            self.nominal_bandwidth = self.bandwidth
        if self.peer_type is PeerType.GATEWAY:
            self.status = PeerStatus.ONLINE
            self.bandwidth = 0.0
        elif self.status is PeerStatus.OFFLINE:
            self.bandwidth = 0.0
        return self

    @property
    def is_online(self) -> bool:
        return self.status is PeerStatus.ONLINE

    @property
    def is_gateway(self) -> bool:
        return self.peer_type is PeerType.GATEWAY

    def bring_online(self, now: datetime) -> None:
        self.status = PeerStatus.ONLINE
        self.bandwidth = self.nominal_bandwidth or 0.0
        self.last_seen = now

    def take_offline(self, now: datetime) -> None:
        if self.bandwidth:
            self.nominal_bandwidth = self.bandwidth
        self.status = PeerStatus.OFFLINE
        self.bandwidth = 0.0
        self.last_seen = now


class WirelessNetwork(BaseModel):
    model_config = {"extra": "forbid"}

    ssid: str = Field(min_length=1)
    security: SecurityScheme = SecurityScheme.WPA2
    signal_strength: int = Field(default=0, ge=0, le=100)
    frequency: str = "2.4GHz"
    is_connected: bool = False

    @field_validator("security", mode="before")
    @classmethod
    def _lower_security(cls, value: object) -> object:
        if isinstance(value, str):
            return value.lower()
        return value

    @property
    def is_secure(self) -> bool:
        return self.security is not SecurityScheme.OPEN


class WirelessSurvey(BaseModel):
    """Radio networks in range, at most one of them connected."""

    model_config = {"extra": "forbid"}

    networks: list[WirelessNetwork] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_networks(self) -> WirelessSurvey:
        seen: set[str] = set()
        for network in self.networks:
            if network.ssid in seen:
                raise ValueError(f"Duplicate network '{network.ssid}' in survey")
            seen.add(network.ssid)
        connected = [n.ssid for n in self.networks if n.is_connected]
        if len(connected) > 1:
            raise ValueError(
                f"Only one network may be connected, got: {', '.join(connected)}"
            )
        return self

    def get(self, ssid: str) -> WirelessNetwork | None:
        for network in self.networks:
            if network.ssid == ssid:
                return network
        return None

    def connected(self) -> WirelessNetwork | None:
        for network in self.networks:
            if network.is_connected:
                return network
        return None

    def strongest(self) -> list[WirelessNetwork]:
        return sorted(self.networks, key=lambda n: n.signal_strength, reverse=True)

    def mark_connected(self, ssid: str) -> WirelessNetwork | None:
        """Flag ``ssid`` as the connected network, clearing any other.

        Returns ``None`` and leaves the survey untouched for an unknown ssid.
        """
        target = self.get(ssid)
        if target is None:
            return None
        for network in self.networks:
            network.is_connected = network is target
        return target
