"""Config subcommands for logtint."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from logtint.commands.highlight import build_pattern_set
from logtint.compiler import DEFAULT_PATTERNS
from logtint.config import get_config_path, load_config, reset_config, save_config

config_app = typer.Typer(name="config", help="Show or change stored defaults")


@config_app.command("show")
def show() -> None:
    """Show the stored configuration."""
    config = load_config()
    patterns = config.patterns or list(DEFAULT_PATTERNS)
    table = Table(title=str(get_config_path()))
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    source = "" if config.patterns else " (built-in)"
    table.add_row(f"patterns{source}", Text("\n".join(patterns)))
    table.add_row("filter_only", str(config.filter_only))
    Console().print(table)


@config_app.command("set")
def set_config(
    pattern: Annotated[
        list[str] | None, typer.Option("--pattern", "-p", help="Default pattern 'color:regex', repeatable")
    ] = None,
    filter_only: Annotated[
        bool | None, typer.Option("--filter/--no-filter", help="Only print matching lines by default")
    ] = None,
) -> None:
    """Store default patterns and/or filter mode."""
    if pattern is None and filter_only is None:
        typer.echo("Error: nothing to set, use --pattern or --filter/--no-filter", err=True)
        raise typer.Exit(1)

    config = load_config()
    if pattern is not None:
        compiled = build_pattern_set(pattern)
        config.patterns = [spec.source for spec in compiled.specs]
    if filter_only is not None:
        config.filter_only = filter_only
    path = save_config(config)
    typer.echo(f"Saved {path}")


@config_app.command("reset")
def reset() -> None:
    """Delete the stored configuration."""
    if reset_config():
        typer.echo(f"Removed {get_config_path()}")
    else:
        typer.echo("No stored configuration")
