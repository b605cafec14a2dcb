"""CLI entry point for logtint."""

from __future__ import annotations

from typing import Annotated

import typer

from logtint import __version__
from logtint.commands.config import config_app
from logtint.commands.highlight import highlight
from logtint.commands.reference import colors, macros

app = typer.Typer(add_completion=False, help="Highlight and filter logs using custom color:regex patterns.")
app.command()(highlight)
app.command()(macros)
app.command()(colors)
app.add_typer(config_app, name="config")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"logtint {__version__}")
        raise typer.Exit


@app.callback()
def _root(
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = False,
) -> None:
    """Highlight and filter logs using custom color:regex patterns."""


def main() -> None:
    """Entry point for the CLI."""
    app()
