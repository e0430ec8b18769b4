from __future__ import annotations

import asyncio

from homehub.core import (
    DeviceRegistry,
    PeerRegistry,
    ScanCompleted,
    ScanStateChanged,
    SimulatedScanner,
)
from homehub.errors import ScanError
from homehub.mock_home import sample_device_candidates, sample_peer_candidates
from homehub.models import Device, ScanState


class GatedScanner:
    """Scanner that reports its candidates only once ``release`` is set."""

    def __init__(self, candidates):
        self.candidates = candidates
        self.release = asyncio.Event()
        self.calls = 0

    async def discover(self):
        self.calls += 1
        await self.release.wait()
        return self.candidates


class FailingScanner:
    def __init__(self, exc: BaseException):
        self.exc = exc

    async def discover(self):
        raise self.exc


class SlowScanner:
    async def discover(self):
        await asyncio.sleep(60)
        return []


def test_scan_reports_candidates_without_merging(devices):
    async def scenario():
        scanner = SimulatedScanner(sample_device_candidates(), delay=0)
        registry = DeviceRegistry(devices, scanner=scanner)

        handle = registry.begin_scan()
        assert registry.state is ScanState.SCANNING

        outcome = await handle
        return registry, outcome

    registry, outcome = asyncio.run(scenario())

    assert registry.state is ScanState.IDLE
    assert outcome.ok
    assert [c.name for c in outcome.candidates] == [
        "Sonoff Basic R4",
        "TP-Link Kasa Smart Plug",
        "Xiaomi Motion Sensor",
    ]
    assert len(registry) == len(devices)

    registry.merge_discovered(outcome.candidates)
    assert len(registry) == len(devices) + 3


def test_begin_scan_is_single_flight(devices):
    async def scenario():
        scanner = GatedScanner([Device(id="plug", name="Plug")])
        registry = DeviceRegistry(devices, scanner=scanner)
        completions = []
        registry.subscribe(
            lambda event: completions.append(event)
            if isinstance(event, ScanCompleted)
            else None
        )

        first = registry.begin_scan()
        second = registry.begin_scan()
        await asyncio.sleep(0)
        scanner.release.set()
        outcome = await first

        return first, second, outcome, scanner.calls, completions

    first, second, outcome, calls, completions = asyncio.run(scenario())

    assert first is second
    assert calls == 1
    assert len(completions) == 1
    assert completions[0].outcome is outcome
    assert [c.id for c in outcome.candidates] == ["plug"]


def test_new_scan_after_completion_gets_fresh_handle(devices):
    async def scenario():
        registry = DeviceRegistry(devices, scanner=SimulatedScanner([], delay=0))
        first = registry.begin_scan()
        await first
        second = registry.begin_scan()
        await second
        return first, second

    first, second = asyncio.run(scenario())

    assert first is not second
    assert (first.scan_id, second.scan_id) == (1, 2)


def test_cancel_discards_candidates_and_returns_to_idle(devices):
    async def scenario():
        scanner = GatedScanner(sample_device_candidates())
        registry = DeviceRegistry(devices, scanner=scanner)
        before = registry.list_entities()

        handle = registry.begin_scan()
        await asyncio.sleep(0)
        assert registry.cancel_scan() is True
        state_after_cancel = registry.state

        outcome = await handle
        await asyncio.wait([handle.task])
        assert handle.task.cancelled()
        return registry, before, state_after_cancel, outcome

    registry, before, state_after_cancel, outcome = asyncio.run(scenario())

    assert state_after_cancel is ScanState.IDLE
    assert outcome.cancelled is True
    assert outcome.candidates == []
    assert outcome.error is None
    assert registry.list_entities() == before


def test_cancel_without_scan_returns_false(devices):
    registry = DeviceRegistry(devices)

    assert registry.cancel_scan() is False
    assert registry.state is ScanState.IDLE


def test_timeout_resolves_to_idle_with_no_candidates(devices):
    async def scenario():
        registry = DeviceRegistry(devices, scanner=SlowScanner(), scan_timeout=0.01)
        outcome = await registry.begin_scan()
        return registry, outcome

    registry, outcome = asyncio.run(scenario())

    assert registry.state is ScanState.IDLE
    assert outcome.error == "timeout"
    assert outcome.candidates == []
    assert outcome.cancelled is False


def test_transport_failure_resolves_to_idle(devices):
    async def scenario():
        registry = DeviceRegistry(
            devices, scanner=FailingScanner(ScanError("radio offline"))
        )
        outcome = await registry.begin_scan()
        return registry, outcome

    registry, outcome = asyncio.run(scenario())

    assert registry.state is ScanState.IDLE
    assert outcome.error == "radio offline"
    assert not outcome.ok


def test_unexpected_scanner_crash_still_resolves(devices, caplog):
    async def scenario():
        registry = DeviceRegistry(
            devices, scanner=FailingScanner(RuntimeError("boom"))
        )
        outcome = await registry.begin_scan()
        return registry, outcome

    registry, outcome = asyncio.run(scenario())

    assert registry.state is ScanState.IDLE
    assert "boom" in outcome.error
    assert "crashed" in caplog.text


def test_toggles_during_scan_apply_immediately_and_survive_merge(devices):
    async def scenario():
        refreshed = Device(id="2", name="Kitchen LEDs", signal_strength=50)
        scanner = GatedScanner([refreshed])
        registry = DeviceRegistry(devices, scanner=scanner)

        handle = registry.begin_scan()
        toggled = registry.toggle("2")
        assert toggled.status is True
        assert registry.get("2").status is True

        scanner.release.set()
        outcome = await handle
        registry.merge_discovered(outcome.candidates)
        return registry

    registry = asyncio.run(scenario())

    device = registry.get("2")
    assert device.status is True
    assert device.energy_usage == 18
    assert device.signal_strength == 50


def test_scan_state_notifications(peers):
    async def scenario():
        registry = PeerRegistry(
            peers, scanner=SimulatedScanner(sample_peer_candidates(), delay=0)
        )
        events = []
        registry.subscribe(events.append)
        await registry.begin_scan()
        return events

    events = asyncio.run(scenario())

    transitions = [
        (e.previous, e.current) for e in events if isinstance(e, ScanStateChanged)
    ]
    assert transitions == [
        (ScanState.IDLE, ScanState.SCANNING),
        (ScanState.SCANNING, ScanState.IDLE),
    ]
    assert isinstance(events[-1], ScanCompleted)
    assert len(events[-1].outcome.candidates) == 2


def test_simulated_scanner_stamps_candidates_and_copies_them():
    template = Device(id="plug", name="Plug")
    scanner = SimulatedScanner([template], delay=0)

    found = asyncio.run(scanner.discover())

    assert found[0] is not template
    assert found[0].last_seen >= template.last_seen
