"""Rebuild a line with ANSI color escapes around matched spans."""

from __future__ import annotations

from typing import TYPE_CHECKING

from logtint.colors import ANSI_COLORS, RESET

if TYPE_CHECKING:
    from collections.abc import Sequence

    from logtint.models import Match


def render_line(line: str, matches: Sequence[Match]) -> str:
    """Insert color and reset sequences around each match.

    Matches must be non-overlapping and sorted by start. Text outside the
    inserted escapes is left untouched; no matches returns the line as-is.
    """
    if not matches:
        return line

    parts: list[str] = []
    cursor = 0
    for match in matches:
        parts.append(line[cursor : match.start])
        parts.append(ANSI_COLORS[match.color])
        parts.append(line[match.start : match.end])
        parts.append(RESET)
        cursor = match.end
    parts.append(line[cursor:])
    return "".join(parts)
