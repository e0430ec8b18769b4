"""Derived figures over inventory snapshots."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from homehub.models import Device, DeviceCategory, NetworkPeer

from .filters import ALL_CATEGORIES


class SignalQuality(str, Enum):
    EXCELLENT = "excellent"
    FAIR = "fair"
    POOR = "poor"


def signal_quality(strength: int) -> SignalQuality:
    if strength >= 80:
        return SignalQuality.EXCELLENT
    if strength >= 60:
        return SignalQuality.FAIR
    return SignalQuality.POOR


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def recency_label(last_seen: datetime, now: datetime) -> str:
    """Human label for how long ago ``last_seen`` was, e.g. ``"5 min ago"``."""
    seconds = max(int((now - last_seen).total_seconds()), 0)
    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return f"{seconds // 60} min ago"
    if seconds < 86400:
        return f"{_plural(seconds // 3600, 'hour')} ago"
    return f"{_plural(seconds // 86400, 'day')} ago"


def category_counts(devices: Iterable[Device]) -> dict[str, int]:
    counts = Counter(device.category.value for device in devices)
    result = {ALL_CATEGORIES: sum(counts.values())}
    for category in DeviceCategory:
        result[category.value] = counts.get(category.value, 0)
    return result


def energy_total(devices: Iterable[Device]) -> float:
    return sum(device.energy_usage for device in devices if device.status)


@dataclass(frozen=True)
class NetworkStats:
    total_peers: int
    online_peers: int
    used_bandwidth: float
    security_score: int


def network_stats(peers: Sequence[NetworkPeer]) -> NetworkStats:
    online = [peer for peer in peers if peer.is_online]
    secure = sum(1 for peer in peers if peer.is_secure)
    score = round(100 * secure / len(peers)) if peers else 100
    return NetworkStats(
        total_peers=len(peers),
        online_peers=len(online),
        used_bandwidth=sum(peer.bandwidth for peer in online),
        security_score=score,
    )


@dataclass(frozen=True)
class RoomSummary:
    room: str
    devices: int
    active: int
    energy_usage: float
    temperature: float | None


def room_summaries(devices: Iterable[Device]) -> list[RoomSummary]:
    """Per-room device counts, in the order rooms first appear.

    ``temperature`` averages the readings of the room's climate devices and is
    ``None`` when none of them reports one. Devices without a room are skipped.
    """
    rooms: dict[str, list[Device]] = {}
    for device in devices:
        if device.room:
            rooms.setdefault(device.room, []).append(device)

    summaries = []
    for room, members in rooms.items():
        readings = [
            device.temperature
            for device in members
            if device.category is DeviceCategory.CLIMATE
            and device.temperature is not None
        ]
        summaries.append(
            RoomSummary(
                room=room,
                devices=len(members),
                active=sum(1 for device in members if device.status),
                energy_usage=energy_total(members),
                temperature=sum(readings) / len(readings) if readings else None,
            )
        )
    return summaries
