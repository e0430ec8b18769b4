from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Annotated

import typer
from rich.console import Console

from homehub.core import InventoryRegistry
from homehub.models import MergeResult, ScanOutcome
from homehub.utils.redaction import Redactor

from .common import build_home_or_exit
from .devices import device_table
from .network import peer_table

logger = logging.getLogger(__name__)


class ScanTarget(str, Enum):
    DEVICES = "devices"
    NETWORK = "network"


async def run_scan(
    registry: InventoryRegistry, merge: bool
) -> tuple[ScanOutcome, MergeResult | None]:
    outcome = await registry.begin_scan()
    if not merge or not outcome.ok:
        return outcome, None
    return outcome, registry.merge_discovered(outcome.candidates)


def register(app: typer.Typer) -> None:
    @app.command()
    def scan(
        target: Annotated[
            ScanTarget, typer.Argument(help="What to scan for")
        ] = ScanTarget.DEVICES,
        merge: Annotated[
            bool,
            typer.Option("--merge", help="Add discovered entities to the inventory"),
        ] = False,
        redact: Annotated[
            bool,
            typer.Option("--redact", help="Redact addresses in output"),
        ] = False,
    ) -> None:
        """Scan for new devices or network peers."""
        console = Console()
        home = build_home_or_exit()
        registry: InventoryRegistry = (
            home.devices if target is ScanTarget.DEVICES else home.peers
        )

        console.print(f"Scanning for {target.value}...")
        outcome, merged = asyncio.run(run_scan(registry, merge))

        if outcome.error:
            console.print(f"[red]✗[/red] Scan failed: {outcome.error}")
            raise typer.Exit(1)

        if not outcome.candidates:
            console.print("Nothing new found.")
            return

        if target is ScanTarget.DEVICES:
            console.print(device_table(outcome.candidates))
        else:
            console.print(peer_table(outcome.candidates, Redactor(enabled=redact)))
        console.print(f"\n[green]Found {len(outcome.candidates)} candidate(s)[/green]")

        if merged is not None:
            logger.debug("Merge result: %s", merged)
            console.print(
                f"[green]✓[/green] Merged: {len(merged.added)} added, "
                f"{len(merged.refreshed)} refreshed ({len(registry)} total)"
            )
