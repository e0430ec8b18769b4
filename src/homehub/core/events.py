"""Notifications emitted by an inventory registry."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from homehub.models import MergeResult, ScanOutcome, ScanState

logger = logging.getLogger(__name__)

ChangeKind = Literal["toggled", "added", "refreshed"]


@dataclass(frozen=True)
class EntityChanged:
    entity_id: str
    kind: ChangeKind
    entity: Any


@dataclass(frozen=True)
class MergeApplied:
    result: MergeResult


@dataclass(frozen=True)
class ScanStateChanged:
    previous: ScanState
    current: ScanState


@dataclass(frozen=True)
class ScanCompleted:
    outcome: ScanOutcome[Any]


RegistryEvent = EntityChanged | MergeApplied | ScanStateChanged | ScanCompleted
Listener = Callable[[RegistryEvent], None]


class EventHub:
    """Fan out registry events to subscribed listeners, in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: RegistryEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Listener %r failed on %s", listener, type(event).__name__
                )
