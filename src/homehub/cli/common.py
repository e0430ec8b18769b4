from __future__ import annotations

from pathlib import Path

import typer
from rich.text import Text

from homehub.config import Settings, get_settings, resolve_config_path
from homehub.core import SignalQuality, signal_quality
from homehub.inventory import Home, build_home

SIGNAL_STYLES = {
    SignalQuality.EXCELLENT: "green",
    SignalQuality.FAIR: "yellow",
    SignalQuality.POOR: "red",
}


def load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def resolve_config_path_or_exit(allow_missing: bool = False) -> tuple[Path, bool]:
    try:
        return resolve_config_path(allow_missing=allow_missing)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def build_home_or_exit() -> Home:
    settings = load_settings_or_exit()
    try:
        return build_home(settings)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def signal_cell(strength: int) -> Text:
    return Text(f"{strength}%", style=SIGNAL_STYLES[signal_quality(strength)])
