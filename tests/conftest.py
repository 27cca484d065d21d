"""Shared pytest fixtures for datestr tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from datestr.config.models import FormatConfig
from datestr.services.dates import DateService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no DATESTR_* overrides.

    Keeps config walk-up discovery from finding a stray datestr.toml.
    """
    for key in ("DATESTR_CONFIG", "DATESTR_FORMAT__TEMPLATE", "DATESTR_FORMAT__SEPARATOR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("datestr")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def service() -> DateService:
    """DateService with the default [format] section."""
    return DateService(FormatConfig())
