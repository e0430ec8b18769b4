from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from homehub.core import network_stats, recency_label
from homehub.models import NetworkPeer
from homehub.models.base import utcnow
from homehub.utils.redaction import Redactor

from .common import build_home_or_exit, signal_cell


def peer_table(peers: list[NetworkPeer], redactor: Redactor) -> Table:
    now = utcnow()
    table = Table()
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Type")
    table.add_column("IP")
    table.add_column("MAC Address")
    table.add_column("Status")
    table.add_column("Bandwidth", justify="right")
    table.add_column("Signal", justify="right")
    table.add_column("Secure")
    table.add_column("Last seen")

    for peer in peers:
        table.add_row(
            peer.id,
            peer.name,
            peer.peer_type.value,
            redactor.ip(peer.ip_address),
            redactor.mac(peer.mac_address),
            "[green]online[/green]" if peer.is_online else "[red]offline[/red]",
            f"{peer.bandwidth:g} Mbps",
            signal_cell(peer.signal_strength),
            "yes" if peer.is_secure else "[red]no[/red]",
            recency_label(peer.last_seen, now),
        )
    return table


def list_peers(
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Match name, IP or MAC"),
    ] = None,
    peer_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Peer type, or 'all'"),
    ] = None,
    redact: Annotated[
        bool,
        typer.Option("--redact", help="Redact addresses in output"),
    ] = False,
) -> None:
    """List hosts on the home network."""
    home = build_home_or_exit()
    peers = home.peers.list_entities(text=search, category=peer_type)

    console = Console()
    stats = network_stats(home.peers.list_entities())
    console.print(
        f"Connected: {stats.online_peers}/{stats.total_peers}  "
        f"Bandwidth: {stats.used_bandwidth:g} Mbps  "
        f"Security score: {stats.security_score}%"
    )

    if not peers:
        console.print("No peers match.")
        return

    console.print(peer_table(peers, Redactor(enabled=redact)))


def list_wifi() -> None:
    """List wireless networks in range, strongest first."""
    home = build_home_or_exit()
    console = Console()

    table = Table()
    table.add_column("SSID", style="cyan")
    table.add_column("Security")
    table.add_column("Band")
    table.add_column("Signal", justify="right")
    table.add_column("Connected")

    for network in home.survey.strongest():
        security = network.security.value.upper()
        table.add_row(
            network.ssid,
            security if network.is_secure else f"[red]{security}[/red]",
            network.frequency,
            signal_cell(network.signal_strength),
            "[green]✓[/green]" if network.is_connected else "",
        )

    console.print(table)


def register(app: typer.Typer) -> None:
    app.command("network")(list_peers)
    app.command("wifi")(list_wifi)
