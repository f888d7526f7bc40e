"""Pytest fixtures for textguard tests."""
from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from textguard.rule_context import ReportedMessage


@pytest.fixture
def temp_pyproject(tmp_path: Path) -> Path:
    """Create a temporary pyproject.toml file."""
    config_path: Path = tmp_path / "pyproject.toml"
    config_path.write_text(
        """
[tool.textguard]
include = ["docs/**/*.md"]
exclude = ["**/drafts/**"]
formatter = "compact"
color = false

[tool.textguard.rules]
no_todo = true
trailing_spaces = { severity = "warning", skip_blank_lines = true }
"./rules/custom.py" = "off"
"""
    )
    return config_path


@pytest.fixture
def empty_pyproject(tmp_path: Path) -> Path:
    """Create a pyproject.toml without [tool.textguard] section."""
    config_path: Path = tmp_path / "pyproject.toml"
    config_path.write_text(
        """
[project]
name = "test-project"
version = "0.1.0"
"""
    )
    return config_path


@pytest.fixture
def invalid_toml(tmp_path: Path) -> Path:
    """Create an invalid TOML file."""
    config_path: Path = tmp_path / "pyproject.toml"
    config_path.write_text("invalid [ toml content")
    return config_path


@pytest.fixture
def invalid_config(tmp_path: Path) -> Path:
    """Create a pyproject.toml with invalid textguard config."""
    config_path: Path = tmp_path / "pyproject.toml"
    config_path.write_text(
        """
[tool.textguard]
formatter = 3
color = "maybe"
include = "docs"

[tool.textguard.rules]
no_todo = "super_error"
trailing_spaces = 5
"""
    )
    return config_path


@pytest.fixture
def write_module(tmp_path: Path) -> Callable[..., Path]:
    """Write a Python module under tmp_path and return its path."""

    def _write(name: str, body: str, *, directory: Path | None = None) -> Path:
        target_dir: Path = directory if directory is not None else tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path: Path = target_dir / name
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reports() -> list[ReportedMessage]:
    """A report sink that records every message."""
    return []
