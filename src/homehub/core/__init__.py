from __future__ import annotations

from .events import (
    EntityChanged,
    EventHub,
    MergeApplied,
    RegistryEvent,
    ScanCompleted,
    ScanStateChanged,
)
from .filters import ALL_CATEGORIES, InventoryFilter
from .registry import DeviceRegistry, InventoryRegistry, PeerRegistry, ScanHandle
from .scanner import Scanner, SimulatedScanner
from .stats import (
    NetworkStats,
    RoomSummary,
    SignalQuality,
    category_counts,
    energy_total,
    network_stats,
    recency_label,
    room_summaries,
    signal_quality,
)

__all__ = [
    "ALL_CATEGORIES",
    "DeviceRegistry",
    "EntityChanged",
    "EventHub",
    "InventoryFilter",
    "InventoryRegistry",
    "MergeApplied",
    "NetworkStats",
    "PeerRegistry",
    "RegistryEvent",
    "RoomSummary",
    "ScanCompleted",
    "ScanHandle",
    "ScanStateChanged",
    "Scanner",
    "SignalQuality",
    "SimulatedScanner",
    "category_counts",
    "energy_total",
    "network_stats",
    "recency_label",
    "room_summaries",
    "signal_quality",
]
