"""Compile color:regex pattern specs into one combined regular expression."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from logtint.colors import is_supported_color
from logtint.macros import expand_macros
from logtint.models import Diagnostic, DiagnosticKind, PatternSpec

if TYPE_CHECKING:
    from collections.abc import Iterable

# Green ISO timestamp, yellow level word, red ERROR. Alternation order decides
# which branch fires first, so ERROR stays yellow wherever LOGLEVEL claims it.
DEFAULT_PATTERNS: tuple[str, ...] = (
    "32:{TS_ISO}",
    "33:{LOGLEVEL}",
    "31:ERROR",
)

_SPEC_RE = re.compile(r"([0-9]+):(.*)")

# Leading global flags such as "(?i)" are only legal at the start of the whole
# expression, so they are rewritten into a scoped "(?i:...)" group.
_GLOBAL_FLAGS_RE = re.compile(r"\(\?([aiLmsux]+)\)")


class PatternCompileError(ValueError):
    """The combined pattern could not be compiled."""


@dataclass(frozen=True, slots=True)
class CompiledPatternSet:
    """Combined alternation of all accepted specs plus group-to-color lookup.

    ``group_colors`` is indexed by group number of the combined pattern and
    holds a color only for the outer group wrapping each spec; groups that
    belong to the user's own regex map to None.
    """

    pattern: re.Pattern[str]
    specs: tuple[PatternSpec, ...]
    group_colors: tuple[int | None, ...]

    def color_of(self, m: re.Match[str]) -> tuple[int, int, int] | None:
        """Return (start, end, color) of the branch that produced a match.

        The group wrapping a spec closes after any group inside it, so
        ``lastindex`` always names the wrapping group of the branch that fired.
        """
        color = self.group_colors[m.lastindex] if m.lastindex is not None else None
        if color is None:
            return None
        return m.start(m.lastindex), m.end(m.lastindex), color


def parse_pattern_spec(raw: str) -> tuple[PatternSpec | None, list[Diagnostic]]:
    """Parse one "color:regex" string, expanding macros in the regex part."""
    m = _SPEC_RE.fullmatch(raw.strip())
    if m is None:
        return None, [
            Diagnostic(
                kind=DiagnosticKind.INVALID_FORMAT,
                message=f"Invalid pattern format: {raw}. Expected 'color:regex'. Ignored.",
                source=raw,
            )
        ]

    color = int(m.group(1))
    regex, diagnostics = expand_macros(m.group(2))
    if not is_supported_color(color):
        diagnostics.append(
            Diagnostic(
                kind=DiagnosticKind.UNSUPPORTED_COLOR,
                message=f"Unsupported color code {color} in pattern: {raw}. Ignored.",
                source=raw,
            )
        )
        return None, diagnostics
    return PatternSpec(color=color, regex=regex, source=raw), diagnostics


def _scope_inline_flags(regex: str) -> str:
    """Turn a leading "(?flags)" prefix into a scoped "(?flags:...)" group."""
    m = _GLOBAL_FLAGS_RE.match(regex)
    if m is None:
        return regex
    # In verbose mode a trailing "#" comment would swallow the closing paren.
    end = "\n)" if "x" in m.group(1) else ")"
    return f"(?{m.group(1)}:{regex[m.end() :]}{end}"


def compile_patterns(raw_specs: Iterable[str]) -> tuple[CompiledPatternSet | None, list[Diagnostic]]:
    """Compile raw pattern specs into a single pattern set.

    Bad entries are dropped with a diagnostic instead of failing the whole
    call. Returns None for the set when no entry survives.

    Raises:
        PatternCompileError: the accepted fragments do not combine into a
            valid expression.
    """
    diagnostics: list[Diagnostic] = []
    specs: list[PatternSpec] = []
    fragments: list[str] = []
    group_colors: list[int | None] = [None]  # group 0 is the whole match
    seen_names: set[str] = set()

    for raw in raw_specs:
        spec, spec_diagnostics = parse_pattern_spec(raw)
        diagnostics.extend(spec_diagnostics)
        if spec is None:
            continue

        fragment = _scope_inline_flags(spec.regex)
        try:
            compiled = re.compile(fragment)
        except re.error as e:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.INVALID_REGEX,
                    message=f"Invalid regex {spec.regex!r} in pattern: {raw}: {e}. Ignored.",
                    source=raw,
                )
            )
            continue

        clashing = seen_names.intersection(compiled.groupindex)
        if clashing:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.DUPLICATE_GROUP,
                    message=(
                        f"Group name(s) {', '.join(sorted(clashing))} in pattern: {raw} "
                        "already used by an earlier pattern. Ignored."
                    ),
                    source=raw,
                )
            )
            continue
        seen_names.update(compiled.groupindex)

        group_colors.append(spec.color)
        group_colors.extend([None] * compiled.groups)
        specs.append(spec)
        fragments.append(fragment)

    if not specs:
        return None, diagnostics

    combined = "|".join(f"({fragment})" for fragment in fragments)
    try:
        pattern = re.compile(combined)
    except re.error as e:
        msg = f"Cannot combine patterns into one expression: {e}"
        raise PatternCompileError(msg) from e

    return (
        CompiledPatternSet(
            pattern=pattern,
            specs=tuple(specs),
            group_colors=tuple(group_colors),
        ),
        diagnostics,
    )
