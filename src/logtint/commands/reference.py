"""Reference listings for macros and color codes."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from logtint.colors import COLOR_NAMES
from logtint.macros import MACROS


def macros() -> None:
    """List the {NAME} macros usable inside patterns."""
    table = Table(title="Macros")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Pattern", overflow="fold")
    table.add_column("Description")
    for macro in MACROS.values():
        table.add_row(f"{{{macro.name}}}", Text(macro.pattern), macro.description)
    Console().print(table)


def colors() -> None:
    """List the supported color codes."""
    table = Table(title="Colors")
    table.add_column("Code", justify="right")
    table.add_column("Name")
    table.add_column("Sample")
    for code, name in COLOR_NAMES.items():
        table.add_row(str(code), name, Text.from_ansi(f"\033[{code}msample\033[0m"))
    Console().print(table)
