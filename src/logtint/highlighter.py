"""Stream driver: highlight lines and apply filter-only suppression."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from logtint.models import Diagnostic, DiagnosticKind
from logtint.reader import iter_file, iter_stdin
from logtint.renderer import render_line
from logtint.resolver import resolve_matches

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from logtint.compiler import CompiledPatternSet

STDIN_SOURCE = "-"


def highlight_line(line: str, compiled: CompiledPatternSet, filter_only: bool = False) -> str | None:
    """Highlight one line. Returns None when filter-only suppresses it."""
    matches = resolve_matches(line, compiled)
    if not matches:
        return None if filter_only else line
    return render_line(line, matches)


def highlight_lines(lines: Iterable[str], compiled: CompiledPatternSet, filter_only: bool = False) -> Iterator[str]:
    """Highlight a stream of lines, preserving order and dropping suppressed ones."""
    for line in lines:
        out = highlight_line(line, compiled, filter_only)
        if out is not None:
            yield out


def _read_source(source: str | Path, errors: list[Diagnostic]) -> Iterator[str]:
    """Yield lines of one source, recording a read error instead of raising it."""
    lines = iter_stdin() if str(source) == STDIN_SOURCE else iter_file(Path(source))
    try:
        yield from lines
    except OSError as e:
        errors.append(
            Diagnostic(
                kind=DiagnosticKind.IO_ERROR,
                message=f"Error reading file {source}: {e}",
                source=str(source),
            )
        )


def highlight_sources(
    sources: Iterable[str | Path],
    compiled: CompiledPatternSet,
    sink: Callable[[str], object],
    on_diagnostic: Callable[[Diagnostic], object],
    filter_only: bool = False,
) -> int:
    """Drain each source in order into the sink, returning how many failed.

    A source is a file path or "-" for stdin. A read error stops that
    source only; lines already emitted from it are kept. Errors raised by
    the sink propagate.
    """
    failed = 0
    for source in sources:
        errors: list[Diagnostic] = []
        for out in highlight_lines(_read_source(source, errors), compiled, filter_only):
            sink(out)
        for diagnostic in errors:
            failed += 1
            on_diagnostic(diagnostic)
    return failed
