"""In-memory inventory registries.

A registry is owned by one asyncio event loop. Lookups, toggles and merges
are plain synchronous methods, so they never interleave; discovery is the
only background work and runs as at most one task per registry.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Generator, Iterable, Iterator, Mapping
from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

from homehub.errors import InventoryError, ScanError
from homehub.models import (
    Device,
    MergeResult,
    NetworkPeer,
    ScanOutcome,
    ScanState,
)
from homehub.models.base import Entity, utcnow

from .events import (
    ChangeKind,
    EntityChanged,
    EventHub,
    Listener,
    MergeApplied,
    ScanCompleted,
    ScanStateChanged,
)
from .filters import InventoryFilter, matches
from .scanner import Scanner, SimulatedScanner

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)

DEFAULT_SCAN_TIMEOUT = 10.0


class ScanHandle(Generic[T]):
    """Caller-side view of one in-flight scan.

    Await the handle (or ``wait()``) to receive the ``ScanOutcome``.
    """

    def __init__(
        self, scan_id: int, started_at: datetime, future: asyncio.Future[Any]
    ) -> None:
        self.scan_id = scan_id
        self.started_at = started_at
        self._future = future
        self.task: asyncio.Task[None] | None = None

    def __repr__(self) -> str:
        state = "done" if self.done else "running"
        return f"<ScanHandle #{self.scan_id} {state}>"

    @property
    def done(self) -> bool:
        return self._future.done()

    def outcome(self) -> ScanOutcome[T] | None:
        if not self._future.done():
            return None
        return self._future.result()

    async def wait(self) -> ScanOutcome[T]:
        return await asyncio.shield(self._future)

    def __await__(self) -> Generator[Any, None, ScanOutcome[T]]:
        return self.wait().__await__()

    def attach(self, task: asyncio.Task[None]) -> None:
        self.task = task

    def _resolve(self, outcome: ScanOutcome[T]) -> None:
        self._future.set_result(outcome)


class InventoryRegistry(ABC, Generic[T]):
    """Authoritative collection of entities keyed by id, in insertion order."""

    entity_type: ClassVar[type[Entity]]
    refresh_fields: ClassVar[tuple[str, ...]] = ("signal_strength", "last_seen")

    def __init__(
        self,
        entities: Iterable[T | Mapping[str, Any]] = (),
        scanner: Scanner[T] | None = None,
        scan_timeout: float = DEFAULT_SCAN_TIMEOUT,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._entities: dict[str, T] = {}
        for entity in (self._coerce(item) for item in entities):
            if entity.id in self._entities:
                raise InventoryError(f"Duplicate id '{entity.id}' in inventory")
            self._entities[entity.id] = entity
        self._check_population(list(self._entities.values()))

        self._scanner: Scanner[T] = scanner or SimulatedScanner([], delay=0)
        self._scan_timeout = scan_timeout
        self._clock = clock
        self._events = EventHub()
        self._state = ScanState.IDLE
        self._scan: ScanHandle[T] | None = None
        self._scan_counter = 0

    # Hooks

    @abstractmethod
    def _search_fields(self, entity: T) -> tuple[str | None, ...]: ...

    @abstractmethod
    def _category_of(self, entity: T) -> str: ...

    @abstractmethod
    def _apply_toggle(self, entity: T, now: datetime) -> bool:
        """Flip ``entity`` in place; return False to refuse the toggle."""

    def _check_population(self, entities: list[T]) -> None:
        """Raise ``InventoryError`` if ``entities`` breaks a registry invariant."""

    def _admit(self, candidate: T, population: Iterable[T]) -> bool:
        """Decide whether a new candidate may join ``population``."""
        return True

    # Queries

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __iter__(self) -> Iterator[T]:
        return iter(self.list_entities())

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def scanning(self) -> bool:
        return self._state is ScanState.SCANNING

    def get(self, entity_id: str) -> T | None:
        entity = self._entities.get(entity_id)
        if entity is None:
            logger.debug("No entity with id '%s'", entity_id)
            return None
        return entity.model_copy(deep=True)

    def list_entities(
        self,
        query: InventoryFilter | None = None,
        *,
        text: str | None = None,
        category: str | None = None,
    ) -> list[T]:
        if query is None:
            query = InventoryFilter(text=text, category=category)
        return [
            entity.model_copy(deep=True)
            for entity in self._entities.values()
            if matches(self._search_fields(entity), self._category_of(entity), query)
        ]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._events.subscribe(listener)

    # Mutations

    def toggle(self, entity_id: str) -> T | None:
        """Flip the status of ``entity_id``.

        Unknown ids are ignored and return ``None``; callers needing to know
        whether the entity exists should ``get`` it first.
        """
        entity = self._entities.get(entity_id)
        if entity is None:
            logger.debug("Toggle ignored, unknown id '%s'", entity_id)
            return None

        if not self._apply_toggle(entity, self._clock()):
            return None

        logger.debug("Toggled '%s'", entity_id)
        snapshot = entity.model_copy(deep=True)
        self._events.emit(EntityChanged(entity_id, "toggled", snapshot))
        return snapshot

    def merge_discovered(
        self, candidates: Iterable[T | Mapping[str, Any]]
    ) -> MergeResult:
        """Fold scan candidates into the registry, deduplicated by id.

        A candidate with a new id is appended. A candidate whose id is already
        known only refreshes the volatile discovery fields it actually carries;
        ``last_seen`` falls back to the registry clock. ``status`` and
        everything a toggle touches is left alone. The batch is validated and
        checked against the registry invariants up front, so a bad batch
        changes nothing.
        """
        batch = [self._coerce(candidate) for candidate in candidates]

        staged = dict(self._entities)
        plan: list[tuple[ChangeKind, T]] = []
        for candidate in batch:
            if candidate.id in staged:
                plan.append(("refreshed", candidate))
            elif self._admit(candidate, staged.values()):
                staged[candidate.id] = candidate
                plan.append(("added", candidate))
        self._check_population(list(staged.values()))

        now = self._clock()
        added: list[str] = []
        refreshed: list[str] = []
        changes: list[EntityChanged] = []
        for kind, candidate in plan:
            entity_id = candidate.id
            if kind == "added":
                self._entities[entity_id] = candidate
                added.append(entity_id)
                snapshot = candidate.model_copy(deep=True)
            else:
                existing = self._entities[entity_id]
                self._refresh(existing, candidate, now)
                refreshed.append(entity_id)
                snapshot = existing.model_copy(deep=True)
            changes.append(EntityChanged(entity_id, kind, snapshot))

        result = MergeResult(added=added, refreshed=refreshed)
        logger.debug(
            "Merged %d candidates: %d added, %d refreshed",
            len(batch),
            len(added),
            len(refreshed),
        )
        for change in changes:
            self._events.emit(change)
        self._events.emit(MergeApplied(result))
        return result

    def _refresh(self, existing: T, candidate: T, now: datetime) -> None:
        reported = candidate.model_fields_set
        for name in self.refresh_fields:
            if name in reported:
                setattr(existing, name, getattr(candidate, name))
        if "last_seen" not in reported:
            existing.last_seen = now

    # Discovery

    def begin_scan(self) -> ScanHandle[T]:
        """Start discovery in the background and return its handle.

        Must be called from a running event loop. While a scan is in flight,
        further calls join it and get the same handle back.
        """
        if self._scan is not None and not self._scan.done:
            logger.debug("Scan #%d already running, joining it", self._scan.scan_id)
            return self._scan

        loop = asyncio.get_running_loop()
        self._scan_counter += 1
        handle: ScanHandle[T] = ScanHandle(
            self._scan_counter, self._clock(), loop.create_future()
        )
        self._scan = handle
        self._set_state(ScanState.SCANNING)
        logger.info("Scan #%d started", handle.scan_id)

        task = loop.create_task(self._run_scan(handle))
        task.add_done_callback(lambda done: self._on_scan_task_done(handle, done))
        handle.attach(task)
        return handle

    def cancel_scan(self) -> bool:
        """Abort the in-flight scan. Returns False when nothing was running."""
        handle = self._scan
        if handle is None or handle.done:
            return False

        if handle.task is not None:
            handle.task.cancel()
        logger.info("Scan #%d cancelled", handle.scan_id)
        self._finish(handle, cancelled=True)
        return True

    async def _run_scan(self, handle: ScanHandle[T]) -> None:
        try:
            found = await asyncio.wait_for(
                self._scanner.discover(), timeout=self._scan_timeout
            )
        except (asyncio.TimeoutError, TimeoutError):
            logger.warning(
                "Scan #%d timed out after %.1fs", handle.scan_id, self._scan_timeout
            )
            self._finish(handle, error="timeout")
        except (ScanError, ConnectionError, OSError) as exc:
            logger.warning("Scan #%d failed: %s", handle.scan_id, exc)
            self._finish(handle, error=str(exc) or type(exc).__name__)
        else:
            candidates = [self._coerce(item) for item in found]
            logger.info(
                "Scan #%d complete: %d candidate(s)", handle.scan_id, len(candidates)
            )
            self._finish(handle, candidates=candidates)

    def _on_scan_task_done(
        self, handle: ScanHandle[T], task: asyncio.Task[None]
    ) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Scan #%d crashed", handle.scan_id, exc_info=exc)
            self._finish(handle, error=repr(exc))

    def _finish(
        self,
        handle: ScanHandle[T],
        *,
        candidates: list[T] | None = None,
        cancelled: bool = False,
        error: str | None = None,
    ) -> None:
        if handle.done:
            return

        outcome: ScanOutcome[T] = ScanOutcome(
            scan_id=handle.scan_id,
            started_at=handle.started_at,
            finished_at=self._clock(),
            candidates=candidates or [],
            cancelled=cancelled,
            error=error,
        )
        handle._resolve(outcome)
        if self._scan is handle:
            self._scan = None
        self._set_state(ScanState.IDLE)
        self._events.emit(ScanCompleted(outcome))

    def _set_state(self, state: ScanState) -> None:
        previous, self._state = self._state, state
        if previous is not state:
            self._events.emit(ScanStateChanged(previous, state))

    def _coerce(self, item: T | Mapping[str, Any]) -> T:
        if isinstance(item, self.entity_type):
            return item.model_copy(deep=True)  # type: ignore[return-value]
        return self.entity_type.model_validate(item)  # type: ignore[return-value]


class DeviceRegistry(InventoryRegistry[Device]):
    entity_type = Device

    def _search_fields(self, entity: Device) -> tuple[str | None, ...]:
        return (entity.name, entity.brand, entity.room)

    def _category_of(self, entity: Device) -> str:
        return entity.category.value

    def _apply_toggle(self, entity: Device, now: datetime) -> bool:
        if entity.status:
            entity.power_off(now)
        else:
            entity.power_on(now)
        return True


class PeerRegistry(InventoryRegistry[NetworkPeer]):
    """Registry of network peers; holds exactly one gateway."""

    entity_type = NetworkPeer

    def _search_fields(self, entity: NetworkPeer) -> tuple[str | None, ...]:
        return (entity.name, entity.ip_address, entity.mac_address)

    def _category_of(self, entity: NetworkPeer) -> str:
        return entity.peer_type.value

    def _apply_toggle(self, entity: NetworkPeer, now: datetime) -> bool:
        if entity.is_gateway:
            logger.warning("Refusing to take gateway '%s' offline", entity.id)
            return False
        if entity.is_online:
            entity.take_offline(now)
        else:
            entity.bring_online(now)
        return True

    def _check_population(self, entities: list[NetworkPeer]) -> None:
        gateways = [peer.id for peer in entities if peer.is_gateway]
        if entities and len(gateways) != 1:
            raise InventoryError(
                f"Expected exactly one gateway peer, found {len(gateways)}"
            )

    def _admit(
        self, candidate: NetworkPeer, population: Iterable[NetworkPeer]
    ) -> bool:
        if candidate.is_gateway and any(peer.is_gateway for peer in population):
            logger.warning("Ignoring second gateway candidate '%s'", candidate.id)
            return False
        return True

    def gateway(self) -> NetworkPeer | None:
        for peer in self._entities.values():
            if peer.is_gateway:
                return peer.model_copy(deep=True)
        return None
