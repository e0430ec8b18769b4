"""Data models for homehub."""

from homehub.models.device import Device, DeviceCategory, Protocol
from homehub.models.network import (
    NetworkPeer,
    PeerStatus,
    PeerType,
    SecurityScheme,
    WirelessNetwork,
    WirelessSurvey,
)
from homehub.models.scan import MergeResult, ScanOutcome, ScanState

__all__ = [
    "Device",
    "DeviceCategory",
    "MergeResult",
    "NetworkPeer",
    "PeerStatus",
    "PeerType",
    "Protocol",
    "ScanOutcome",
    "ScanState",
    "SecurityScheme",
    "WirelessNetwork",
    "WirelessSurvey",
]
