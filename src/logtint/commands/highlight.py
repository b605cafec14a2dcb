"""Highlight command - colorize matching spans of log lines."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003 - typer needs this at runtime for argument parsing
from typing import TYPE_CHECKING, Annotated

import typer

from logtint.compiler import DEFAULT_PATTERNS, PatternCompileError, compile_patterns
from logtint.config import load_config
from logtint.highlighter import STDIN_SOURCE, highlight_sources
from logtint.models import Diagnostic, DiagnosticKind
from logtint.reader import is_pipe

if TYPE_CHECKING:
    from collections.abc import Iterable

    from logtint.compiler import CompiledPatternSet


def report_diagnostics(diagnostics: Iterable[Diagnostic]) -> None:
    """Print diagnostics to stderr."""
    for diagnostic in diagnostics:
        prefix = "Error" if diagnostic.kind == DiagnosticKind.IO_ERROR else "Warning"
        typer.echo(f"{prefix}: {diagnostic}", err=True)


def build_pattern_set(raw_specs: list[str]) -> CompiledPatternSet:
    """Compile pattern specs, reporting diagnostics and exiting if none are usable."""
    try:
        compiled, diagnostics = compile_patterns(raw_specs)
    except PatternCompileError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)  # noqa: B904

    report_diagnostics(diagnostics)
    if compiled is None:
        typer.echo("No valid patterns provided.", err=True)
        raise typer.Exit(1)
    return compiled


def _emit(line: str) -> None:
    print(line, flush=True)


def highlight(
    files: Annotated[
        list[Path] | None, typer.Argument(help="Log file(s) to highlight, '-' for stdin (default: stdin)")
    ] = None,
    pattern: Annotated[
        list[str] | None,
        typer.Option(
            "--pattern",
            "-p",
            help=r"Pattern in format 'color:regex', repeatable. Example: 31:(\d{4}-\d{2}-\d{2}) or 32:{TS_ISO}",
        ),
    ] = None,
    filter_only: Annotated[
        bool | None,
        typer.Option("--filter/--no-filter", help="Only print lines that match at least one pattern"),
    ] = None,
) -> None:
    """Highlight log lines using color:regex patterns.

    Color codes: 30-37 (standard), 90-97 (bright). See 'logtint colors' and 'logtint macros'.
    """
    config = load_config()
    raw_specs = pattern or config.patterns or list(DEFAULT_PATTERNS)
    only_matching = config.filter_only if filter_only is None else filter_only

    compiled = build_pattern_set(raw_specs)

    if files:
        sources: list[Path | str] = list(files)
    elif is_pipe():
        sources = [STDIN_SOURCE]
    else:
        typer.echo("Error: provide a file or pipe input", err=True)
        raise typer.Exit(1)

    failed = highlight_sources(
        sources,
        compiled,
        sink=_emit,
        on_diagnostic=lambda d: report_diagnostics([d]),
        filter_only=only_matching,
    )
    if failed:
        raise typer.Exit(1)
