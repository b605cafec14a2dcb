"""Named regex fragments expanded from {NAME} placeholders."""

from __future__ import annotations

import re
from types import MappingProxyType

from logtint.models import Diagnostic, DiagnosticKind, MacroDefinition

_MONTHS = "Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec"
_WEEKDAYS = "Mon|Tue|Wed|Thu|Fri|Sat|Sun"

# Fragments only use non-capturing groups so they do not add numbered groups.
_DEFINITIONS: tuple[MacroDefinition, ...] = (
    MacroDefinition(
        name="TS_ISO",
        pattern=r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:[.,]\d+)?(?:Z|[+-]\d{2}:?\d{2})?",
        description="ISO 8601 timestamp (2024-01-15T10:30:00.123Z)",
    ),
    MacroDefinition(
        name="TS_SIMPLE",
        pattern=r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}(?:[.,]\d+)?",
        description="Date and time separated by a space (2024-01-15 10:30:00,123)",
    ),
    MacroDefinition(
        name="TS_UNIX",
        pattern=r"\b\d{10}(?:\.\d{1,9}|\d{3})?\b",
        description="Unix epoch seconds or milliseconds (1705314600)",
    ),
    MacroDefinition(
        name="TS_RFC1123",
        pattern=rf"(?:{_WEEKDAYS}), \d{{2}} (?:{_MONTHS}) \d{{4}} \d{{2}}:\d{{2}}:\d{{2}} (?:GMT|UTC|[+-]\d{{4}})",
        description="RFC 1123 timestamp (Mon, 15 Jan 2024 10:30:00 GMT)",
    ),
    MacroDefinition(
        name="TS_DATE",
        pattern=r"\d{4}-\d{2}-\d{2}",
        description="Calendar date (2024-01-15)",
    ),
    MacroDefinition(
        name="TS_TIME",
        pattern=r"\d{2}:\d{2}:\d{2}(?:[.,]\d+)?",
        description="Time of day (10:30:00.123)",
    ),
    MacroDefinition(
        name="LOGLEVEL",
        pattern=r"\b(?:TRACE|DEBUG|INFO|WARNING|WARN|ERROR|FATAL|CRITICAL)\b",
        description="Log level word (INFO, WARN, ERROR, ...)",
    ),
)

MACROS: MappingProxyType[str, MacroDefinition] = MappingProxyType({m.name: m for m in _DEFINITIONS})

_PLACEHOLDER_RE = re.compile(r"\{([A-Z_]+)\}")


def expand_macros(text: str) -> tuple[str, list[Diagnostic]]:
    """Replace {NAME} placeholders with their macro fragments.

    Expansion is a single pass: inserted fragments are not scanned again.
    Unknown names are left as-is and reported.
    """
    diagnostics: list[Diagnostic] = []

    def _substitute(m: re.Match[str]) -> str:
        macro = MACROS.get(m.group(1))
        if macro is None:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.UNKNOWN_MACRO,
                    message=f"Unknown macro {m.group(0)} in pattern: {text}. Left as literal text.",
                    source=text,
                )
            )
            return m.group(0)
        return macro.pattern

    return _PLACEHOLDER_RE.sub(_substitute, text), diagnostics
