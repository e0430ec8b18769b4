from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ScanState(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"


@dataclass(frozen=True)
class ScanOutcome(Generic[T]):
    """Result of one scan cycle.

    Cancelled and failed scans carry no candidates; ``cancelled`` and
    ``error`` tell them apart from a scan that simply found nothing.
    """

    scan_id: int
    started_at: datetime
    finished_at: datetime
    candidates: list[T] = field(default_factory=list)
    cancelled: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return not self.cancelled and self.error is None


@dataclass(frozen=True)
class MergeResult:
    added: list[str] = field(default_factory=list)
    refreshed: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.added or self.refreshed)
