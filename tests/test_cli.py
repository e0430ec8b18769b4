from __future__ import annotations

import pytest
from typer.testing import CliRunner

from homehub import __version__
from homehub.cli.app import app
from homehub.config import ScanningConfig, Settings, write_settings
from homehub.core import DeviceRegistry

runner = CliRunner()
WIDE = {"COLUMNS": "200"}


@pytest.fixture
def fast_scans(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    write_settings(Settings(scanning=ScanningConfig(delay=0)), path)
    monkeypatch.setenv("HOMEHUB_CONFIG", str(path))
    return path


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"homehub version {__version__}" in result.stdout


def test_devices_search():
    result = runner.invoke(app, ["devices", "--search", "kitchen"], env=WIDE)

    assert result.exit_code == 0
    assert "Kitchen Under Cabinet LEDs" in result.stdout
    assert "Smart Convection Microwave" in result.stdout
    assert "Smart Thermostat Pro" not in result.stdout


def test_devices_no_match():
    result = runner.invoke(app, ["devices", "--category", "other"], env=WIDE)

    assert result.exit_code == 0
    assert "No devices match." in result.stdout


def test_toggle_device():
    result = runner.invoke(app, ["toggle", "6"], env=WIDE)

    assert result.exit_code == 0
    assert "Smart Convection Microwave is now on (1100 W)" in result.stdout


def test_toggle_unknown_device_fails():
    result = runner.invoke(app, ["toggle", "missing"], env=WIDE)

    assert result.exit_code == 1
    assert "not found" in result.stdout


def test_toggle_refused_exits_with_error(monkeypatch):
    monkeypatch.setattr(DeviceRegistry, "toggle", lambda self, device_id: None)

    result = runner.invoke(app, ["toggle", "2"], env=WIDE)

    assert result.exit_code == 1
    assert "did not change" in result.stdout


def test_rooms_lists_each_room():
    result = runner.invoke(app, ["rooms"], env=WIDE)

    assert result.exit_code == 0
    assert "Living Room" in result.stdout
    assert "Laundry Room" in result.stdout
    assert "22.0 °C" in result.stdout


def test_network_redacts_addresses():
    result = runner.invoke(app, ["network", "--redact"], env=WIDE)

    assert result.exit_code == 0
    assert "Connected: 5/5" in result.stdout
    assert "x.x.x.67" in result.stdout
    assert "192.168.1.67" not in result.stdout
    assert "00:1A:2B:xx:xx:01" in result.stdout


def test_wifi_lists_networks():
    result = runner.invoke(app, ["wifi"], env=WIDE)

    assert result.exit_code == 0
    assert "SmartHome_5G" in result.stdout
    assert "OPEN" in result.stdout


def test_scan_devices_with_merge(fast_scans):
    result = runner.invoke(app, ["scan", "devices", "--merge"], env=WIDE)

    assert result.exit_code == 0
    assert "Sonoff Basic R4" in result.stdout
    assert "Found 3 candidate(s)" in result.stdout
    assert "3 added, 0 refreshed (11 total)" in result.stdout


def test_scan_network_without_merge(fast_scans):
    result = runner.invoke(app, ["scan", "network"], env=WIDE)

    assert result.exit_code == 0
    assert "Smart Doorbell" in result.stdout
    assert "Merged" not in result.stdout


def test_config_show_defaults():
    result = runner.invoke(app, ["config", "show"])

    assert result.exit_code == 0
    assert "[scanning]" in result.stdout


def test_config_seed_writes_file(tmp_path):
    target = tmp_path / "home.yaml"

    result = runner.invoke(app, ["config", "seed", str(target)])

    assert result.exit_code == 0
    assert target.exists()
    assert "Living Room Ceiling Lights" in target.read_text()


def test_bad_config_exits_with_error(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text("[scanning]\ntimeout = -1\n")
    monkeypatch.setenv("HOMEHUB_CONFIG", str(path))

    result = runner.invoke(app, ["devices"])

    assert result.exit_code == 1
