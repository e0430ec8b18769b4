from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from homehub.catalog import protocol_label
from homehub.core import (
    category_counts,
    energy_total,
    recency_label,
    room_summaries,
)
from homehub.models import Device
from homehub.models.base import utcnow

from .common import build_home_or_exit, signal_cell


def device_table(devices: list[Device]) -> Table:
    now = utcnow()
    table = Table()
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Room")
    table.add_column("Category")
    table.add_column("Protocol")
    table.add_column("Status")
    table.add_column("Power", justify="right")
    table.add_column("Signal", justify="right")
    table.add_column("Last seen")

    for device in devices:
        table.add_row(
            device.id,
            f"{device.name} ({device.brand})" if device.brand else device.name,
            device.room,
            device.category.value,
            protocol_label(device.protocol),
            "[green]on[/green]" if device.status else "[dim]off[/dim]",
            f"{device.energy_usage:g} W",
            signal_cell(device.signal_strength),
            recency_label(device.last_seen, now),
        )
    return table


def list_devices(
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Match name, brand or room"),
    ] = None,
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Category, or 'all'"),
    ] = None,
) -> None:
    """List devices in the home."""
    home = build_home_or_exit()
    devices = home.devices.list_entities(text=search, category=category)

    console = Console()
    if not devices:
        console.print("No devices match.")
        return

    console.print(device_table(devices))

    counts = category_counts(home.devices.list_entities())
    summary = ", ".join(f"{name} {count}" for name, count in counts.items() if count)
    console.print(f"\n{summary}")
    console.print(f"Drawing {energy_total(devices):g} W")


def toggle_device(
    device_id: Annotated[str, typer.Argument(help="Device id")],
) -> None:
    """Switch a device on or off."""
    home = build_home_or_exit()
    console = Console()

    if home.devices.get(device_id) is None:
        console.print(f"[yellow]![/yellow] Device '{device_id}' not found")
        raise typer.Exit(1)

    device = home.devices.toggle(device_id)
    if device is None:
        console.print(f"[red]✗[/red] Device '{device_id}' did not change")
        raise typer.Exit(1)
    state = "on" if device.status else "off"
    console.print(
        f"[green]✓[/green] {device.name} is now {state} ({device.energy_usage:g} W)"
    )


def list_rooms() -> None:
    """Summarize devices room by room."""
    home = build_home_or_exit()
    summaries = room_summaries(home.devices.list_entities())

    console = Console()
    if not summaries:
        console.print("No rooms yet.")
        return

    table = Table()
    table.add_column("Room", style="green")
    table.add_column("Devices", justify="right")
    table.add_column("Active", justify="right")
    table.add_column("Power", justify="right")
    table.add_column("Temperature", justify="right")
    for summary in summaries:
        temperature = summary.temperature
        table.add_row(
            summary.room,
            str(summary.devices),
            str(summary.active),
            f"{summary.energy_usage:g} W",
            "-" if temperature is None else f"{temperature:.1f} °C",
        )
    console.print(table)


def register(app: typer.Typer) -> None:
    app.command("devices")(list_devices)
    app.command("toggle")(toggle_device)
    app.command("rooms")(list_rooms)
