"""homehub - smart-home hub inventory with scan-and-merge discovery."""

from __future__ import annotations

from importlib.metadata import version

from .config import ScanningConfig, Settings, get_settings
from .core import DeviceRegistry, InventoryFilter, PeerRegistry, ScanHandle
from .inventory import Home, InventorySeed, build_home
from .models import Device, NetworkPeer, ScanOutcome, WirelessSurvey

__all__ = [
    "Device",
    "DeviceRegistry",
    "Home",
    "InventoryFilter",
    "InventorySeed",
    "NetworkPeer",
    "PeerRegistry",
    "ScanHandle",
    "ScanOutcome",
    "ScanningConfig",
    "Settings",
    "WirelessSurvey",
    "__version__",
    "build_home",
    "get_settings",
]

__version__ = version("homehub")
