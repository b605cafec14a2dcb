"""Pydantic models for logtint."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class PatternSpec(BaseModel):
    """A validated color:regex instruction, regex already macro-expanded."""

    model_config = ConfigDict(frozen=True)

    color: int
    regex: str
    source: str


class MacroDefinition(BaseModel):
    """A named regex fragment usable as {NAME} inside patterns."""

    model_config = ConfigDict(frozen=True)

    name: str
    pattern: str
    description: str


@dataclass(frozen=True, slots=True)
class Match:
    """One colored span of a single line (end is exclusive)."""

    start: int
    end: int
    color: int


class DiagnosticKind(StrEnum):
    """Kind of non-fatal problem reported while compiling or reading."""

    INVALID_FORMAT = "invalid_format"
    UNSUPPORTED_COLOR = "unsupported_color"
    UNKNOWN_MACRO = "unknown_macro"
    INVALID_REGEX = "invalid_regex"
    DUPLICATE_GROUP = "duplicate_group"
    IO_ERROR = "io_error"


class Diagnostic(BaseModel):
    """A recoverable problem, left to the caller to print or discard."""

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    message: str
    source: str

    def __str__(self) -> str:
        return self.message


class AppConfig(BaseModel):
    """Application configuration persisted to disk."""

    patterns: list[str] = []
    filter_only: bool = False
