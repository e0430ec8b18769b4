from __future__ import annotations

from datetime import datetime, timezone

import pytest

from homehub.config import get_settings
from homehub.mock_home import sample_devices, sample_peers

NOW = datetime(2024, 6, 1, 18, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("HOMEHUB_CONFIG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def devices():
    return sample_devices(now=NOW)


@pytest.fixture
def peers():
    return sample_peers(now=NOW)


@pytest.fixture
def now():
    return NOW
