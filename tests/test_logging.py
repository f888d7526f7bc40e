"""Tests for --verbose and --debug logging flags."""
from __future__ import annotations

import contextlib
import logging
from collections.abc import Generator
from pathlib import Path

from click.testing import CliRunner

from textguard.cli import cli


def _project(tmp_path: Path) -> Path:
    config_path: Path = tmp_path / "pyproject.toml"
    config_path.write_text("[tool.textguard.rules]\nno_todo = true\n")
    (tmp_path / "a.md").write_text("all good\n")
    return config_path


class TestVerboseFlag:
    """--verbose shows INFO-level messages."""

    def test_verbose_lint_shows_file_count(self, tmp_path: Path) -> None:
        config_path: Path = _project(tmp_path)
        runner: CliRunner = CliRunner()
        with _capture_logs("textguard") as records:
            runner.invoke(cli, ["--config", str(config_path), "--verbose", "lint", str(tmp_path)])

        messages: str = "\n".join(r.getMessage() for r in records)
        assert "Found 1 files" in messages
        assert "Loaded 1 rules" in messages
        assert "Completed in" in messages


class TestDebugFlag:
    """--debug shows DEBUG-level messages."""

    def test_debug_shows_per_file_detail(self, tmp_path: Path) -> None:
        config_path: Path = _project(tmp_path)
        runner: CliRunner = CliRunner()
        with _capture_logs("textguard", level=logging.DEBUG) as records:
            runner.invoke(cli, ["--config", str(config_path), "--debug", "lint", str(tmp_path)])

        messages: str = "\n".join(r.getMessage() for r in records)
        assert "Checking" in messages
        assert "diagnostics" in messages

    def test_debug_shows_resolution_and_loading(self, tmp_path: Path) -> None:
        config_path: Path = _project(tmp_path)
        runner: CliRunner = CliRunner()
        with _capture_logs("textguard", level=logging.DEBUG) as records:
            runner.invoke(cli, ["--config", str(config_path), "--debug", "lint", str(tmp_path)])

        messages: str = "\n".join(r.getMessage() for r in records)
        assert "Resolved no_todo to bundled" in messages
        assert "Loading no_todo from" in messages
        assert "use formatter:" in messages

    def test_debug_shows_scanner_exclusions(self, tmp_path: Path) -> None:
        config_path: Path = _project(tmp_path)
        vendored: Path = tmp_path / "node_modules"
        vendored.mkdir()
        (vendored / "x.md").write_text("TODO\n")

        runner: CliRunner = CliRunner()
        with _capture_logs("textguard", level=logging.DEBUG) as records:
            runner.invoke(cli, ["--config", str(config_path), "--debug", "lint", str(tmp_path)])

        messages: str = "\n".join(r.getMessage() for r in records)
        assert "Excluded" in messages


class _LogCapture(logging.Handler):
    """Simple log handler that collects records."""

    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@contextlib.contextmanager
def _capture_logs(
    name: str, *, level: int = logging.INFO,
) -> Generator[list[logging.LogRecord], None, None]:
    """Capture log records from a named logger."""
    handler = _LogCapture()
    handler.setLevel(level)
    log: logging.Logger = logging.getLogger(name)
    old_level: int = log.level
    log.setLevel(level)
    log.addHandler(handler)
    try:
        yield handler.records
    finally:
        log.removeHandler(handler)
        log.setLevel(old_level)
