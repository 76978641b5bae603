"""
Shared test fixtures and configuration.
"""

import os
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from has.adapters.mock import MockProbeAdapter
from has.core.services.strategy_table import StrategyTable


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def mock_adapter() -> MockProbeAdapter:
    return MockProbeAdapter()


@pytest.fixture
def strategy_table() -> StrategyTable:
    """The bundled strategy table, unsafe mode off."""
    return StrategyTable.from_file()


@pytest.fixture
def fake_bin(tmp_path: Path, monkeypatch) -> Callable[..., Path]:
    """Factory for fake executables on an isolated PATH.

    ``fake_bin("git", "git version 2.39.1")`` creates a script named
    ``git`` that prints the text and exits with the given status.
    PATH is replaced so real tools never leak into a test.
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", str(bin_dir))

    def _make(name: str, output: str = "", status: int = 0, to_stderr: bool = False) -> Path:
        redirect = " >&2" if to_stderr else ""
        lines = ["#!/bin/sh"]
        for text in output.splitlines():
            lines.append(f"printf '%s\\n' '{text}'{redirect}")
        lines.append(f"exit {status}")
        script = bin_dir / name
        script.write_text("\n".join(lines) + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture(autouse=True)
def _clean_has_env(monkeypatch):
    """Keep the caller's HAS_* settings out of tests."""
    for key in list(os.environ):
        if key.startswith("HAS_") or key in ("NO_COLOR", "rvm_verbose_flag"):
            monkeypatch.delenv(key, raising=False)
