"""Inventory seed files and the shared ``Home`` service."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from homehub import mock_home
from homehub.config import ScanningConfig, Settings, seed_path_from_settings
from homehub.core import DeviceRegistry, PeerRegistry, SimulatedScanner
from homehub.models import Device, NetworkPeer, WirelessSurvey

logger = logging.getLogger(__name__)


class InventorySeed(BaseModel):
    """Initial contents of a home, plus what its simulated scans will find."""

    model_config = {"extra": "forbid"}

    devices: list[Device] = Field(default_factory=list)
    peers: list[NetworkPeer] = Field(default_factory=list)
    survey: WirelessSurvey = Field(default_factory=WirelessSurvey)
    device_candidates: list[Device] = Field(default_factory=list)
    peer_candidates: list[NetworkPeer] = Field(default_factory=list)


def sample_seed() -> InventorySeed:
    return InventorySeed(
        devices=mock_home.sample_devices(),
        peers=mock_home.sample_peers(),
        survey=mock_home.sample_survey(),
        device_candidates=mock_home.sample_device_candidates(),
        peer_candidates=mock_home.sample_peer_candidates(),
    )


def load_seed(path: Path) -> InventorySeed:
    if not path.exists():
        raise FileNotFoundError(f"Inventory seed file not found: {path}")

    with path.open() as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in seed file: {path}\n{exc}") from exc

    try:
        return InventorySeed.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid seed file: {path}\n{exc}") from exc


def write_seed(seed: InventorySeed, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as handle:
        handle.write("# homehub inventory seed\n")
        handle.write("# Devices, network peers and scan candidates for a home\n\n")
        yaml.safe_dump(
            seed.model_dump(mode="json", exclude_none=True),
            handle,
            default_flow_style=False,
            sort_keys=False,
        )


class Home:
    """One shared set of registries for everything that shows the home."""

    def __init__(
        self,
        devices: DeviceRegistry,
        peers: PeerRegistry,
        survey: WirelessSurvey,
    ) -> None:
        self.devices = devices
        self.peers = peers
        self.survey = survey

    @classmethod
    def from_seed(cls, seed: InventorySeed, scanning: ScanningConfig) -> Home:
        devices = DeviceRegistry(
            seed.devices,
            scanner=SimulatedScanner.from_config(seed.device_candidates, scanning),
            scan_timeout=scanning.timeout,
        )
        peers = PeerRegistry(
            seed.peers,
            scanner=SimulatedScanner.from_config(seed.peer_candidates, scanning),
            scan_timeout=scanning.timeout,
        )
        return cls(devices, peers, seed.survey.model_copy(deep=True))


def build_home(settings: Settings) -> Home:
    path = seed_path_from_settings(settings)
    if path is None:
        seed = sample_seed()
    else:
        logger.debug("Loading inventory seed from %s", path)
        seed = load_seed(path)
    return Home.from_seed(seed, settings.scanning)
