"""Locate colored spans of a line against a compiled pattern set."""

from __future__ import annotations

from typing import TYPE_CHECKING

from logtint.models import Match

if TYPE_CHECKING:
    from logtint.compiler import CompiledPatternSet


def resolve_matches(line: str, compiled: CompiledPatternSet) -> list[Match]:
    """Find all colored spans in a line, sorted by start offset.

    Each scan resumes after the previous match, so spans never overlap. Only
    one branch of the alternation fires per occurrence; where several
    patterns could match at the same position the earliest declared wins.
    Zero-width occurrences are skipped since they decorate nothing.
    """
    matches: list[Match] = []
    for m in compiled.pattern.finditer(line):
        if m.start() == m.end():
            continue
        span = compiled.color_of(m)
        if span is not None:
            matches.append(Match(*span))
    return matches
