"""Tests for line rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from logtint.colors import ANSI_COLORS, RESET, is_supported_color, strip_ansi
from logtint.models import Match
from logtint.renderer import render_line
from logtint.resolver import resolve_matches

if TYPE_CHECKING:
    from logtint.compiler import CompiledPatternSet

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"


class TestRenderLine:
    def test_no_matches_identity(self) -> None:
        assert render_line("plain text", []) == "plain text"

    def test_default_scenario(self, default_set: CompiledPatternSet) -> None:
        line = "2026-02-19T04:14:23.848Z INFO started"
        rendered = render_line(line, resolve_matches(line, default_set))
        assert rendered == f"{GREEN}2026-02-19T04:14:23.848Z{RESET} {YELLOW}INFO{RESET} started"

    def test_match_at_start_and_end(self) -> None:
        rendered = render_line("abc", [Match(0, 1, 31), Match(2, 3, 32)])
        assert rendered == f"{RED}a{RESET}b{GREEN}c{RESET}"

    def test_adjacent_matches(self) -> None:
        rendered = render_line("ab", [Match(0, 1, 31), Match(1, 2, 31)])
        assert rendered == f"{RED}a{RESET}{RED}b{RESET}"

    def test_whole_line(self) -> None:
        assert render_line("ERROR", [Match(0, 5, 31)]) == f"{RED}ERROR{RESET}"

    def test_every_span_followed_by_reset(self) -> None:
        rendered = render_line("a b c", [Match(0, 1, 91), Match(2, 3, 92), Match(4, 5, 93)])
        assert rendered.count(RESET) == 3
        assert rendered.endswith(RESET)

    @pytest.mark.parametrize(
        "line",
        [
            "2026-02-19T04:14:23.848Z INFO started",
            "ERROR ERROR WARN",
            "ünïcödé 2024-01-15T10:30:00Z ERROR → done",
            "no match at all",
            "",
        ],
    )
    def test_content_preserved(self, default_set: CompiledPatternSet, line: str) -> None:
        assert strip_ansi(render_line(line, resolve_matches(line, default_set))) == line


class TestColorTable:
    def test_supported_codes(self) -> None:
        assert sorted(ANSI_COLORS) == [*range(30, 38), *range(90, 98)]

    def test_escape_format(self) -> None:
        assert ANSI_COLORS[31] == RED
        assert ANSI_COLORS[97] == "\033[97m"

    @pytest.mark.parametrize("code", [0, 29, 38, 89, 98, 99])
    def test_unsupported_codes(self, code: int) -> None:
        assert not is_supported_color(code)
