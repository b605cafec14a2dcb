"""Line-by-line reading of log files and stdin."""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


def iter_file(path: Path) -> Iterator[str]:
    """Yield lines of a file without their trailing newline.

    Undecodable bytes are replaced with U+FFFD so one bad byte does not cost
    the surrounding lines.
    """
    with path.open(encoding="utf-8", errors="replace") as f:
        for raw_line in f:
            yield raw_line.rstrip("\r\n")


def is_pipe() -> bool:
    """Check if stdin is a pipe (not a terminal)."""
    return not sys.stdin.isatty()


def iter_stdin() -> Iterator[str]:
    """Yield lines from stdin without their trailing newline."""
    stream = sys.stdin
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="replace")
    for raw_line in stream:
        yield raw_line.rstrip("\r\n")
