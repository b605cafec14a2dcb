"""ANSI foreground color table."""

from __future__ import annotations

import re
from types import MappingProxyType

COLOR_NAMES: MappingProxyType[int, str] = MappingProxyType(
    {
        30: "black",
        31: "red",
        32: "green",
        33: "yellow",
        34: "blue",
        35: "magenta",
        36: "cyan",
        37: "white",
        90: "bright black",
        91: "bright red",
        92: "bright green",
        93: "bright yellow",
        94: "bright blue",
        95: "bright magenta",
        96: "bright cyan",
        97: "bright white",
    }
)

ANSI_COLORS: MappingProxyType[int, str] = MappingProxyType({code: f"\033[{code}m" for code in COLOR_NAMES})

RESET = "\033[0m"

_SGR_RE = re.compile(r"\033\[[0-9;]*m")


def is_supported_color(code: int) -> bool:
    """Whether a color code is in the supported 30-37 / 90-97 range."""
    return code in ANSI_COLORS


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from text."""
    return _SGR_RE.sub("", text)
