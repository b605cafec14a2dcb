"""Shared test fixtures."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from logtint.compiler import DEFAULT_PATTERNS, compile_patterns

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from logtint.compiler import CompiledPatternSet

SAMPLE_LINES = [
    "2026-02-19T04:14:23.848Z INFO started",
    "2026-02-19T04:14:24.001Z DEBUG cache warmed",
    "plain text, no match",
    "2026-02-19T04:14:25.120Z ERROR connection refused",
    "",
    "trailing line without level",
]


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path) -> Iterator[Path]:
    """Point the config directory at a temporary location for every test."""
    d = tmp_path / "config"
    with patch.dict(os.environ, {"LOGTINT_CONFIG_DIR": str(d)}):
        yield d


@pytest.fixture
def default_set() -> CompiledPatternSet:
    compiled, diagnostics = compile_patterns(DEFAULT_PATTERNS)
    assert compiled is not None
    assert diagnostics == []
    return compiled


@pytest.fixture
def sample_log_file(tmp_path: Path) -> Path:
    """Create a temporary log file with sample content."""
    log_file = tmp_path / "test.log"
    log_file.write_text("\n".join(SAMPLE_LINES) + "\n")
    return log_file


@pytest.fixture
def sample_lines() -> list[str]:
    return list(SAMPLE_LINES)
