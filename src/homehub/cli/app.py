from __future__ import annotations

from typing import Annotated

import typer

from homehub.utils.logging import setup_logging

from . import config as config_cmd
from .devices import register as register_devices
from .network import register as register_network
from .scan import register as register_scan

app = typer.Typer(
    help="homehub - smart-home hub inventory", no_args_is_help=True
)

app.add_typer(config_cmd.app, name="config", help="Show or create configuration")

register_devices(app)
register_network(app)
register_scan(app)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
) -> None:
    """homehub CLI."""
    setup_logging()

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"homehub version {get_version('homehub')}")
        raise typer.Exit()
