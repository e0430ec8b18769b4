from __future__ import annotations

import json
import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .paths import default_config_path, expand_path

CONFIG_ENV_VAR = "HOMEHUB_CONFIG"


class ScanningConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    delay: float = Field(default=3.0, ge=0)
    jitter: float = Field(default=0.0, ge=0)
    timeout: float = Field(default=10.0, gt=0)


class InventoryConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    # empty means the built-in sample home
    seed_path: str = ""


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    scanning: ScanningConfig = Field(default_factory=ScanningConfig)
    inventory: InventoryConfig = Field(default_factory=InventoryConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def seed_path_from_settings(settings: Settings) -> Path | None:
    if not settings.inventory.seed_path:
        return None
    return expand_path(settings.inventory.seed_path)


def _toml_string(value: str) -> str:
    return json.dumps(value)


def render_settings_toml(settings: Settings) -> str:
    lines = [
        "# homehub configuration",
        "",
        "[scanning]",
        f"delay = {settings.scanning.delay}",
        f"jitter = {settings.scanning.jitter}",
        f"timeout = {settings.scanning.timeout}",
        "",
        "[inventory]",
        f"seed_path = {_toml_string(settings.inventory.seed_path)}",
        "",
    ]
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings))
