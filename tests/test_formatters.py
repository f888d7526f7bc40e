"""Tests for the bundled lint and fix formatters."""
from __future__ import annotations

import asyncio
import json
from pathlib import Path

import click

from textguard.constants import Severity
from textguard.fixer import FixCommand
from textguard.formatting import Formatter, fix_formatters, lint_formatters
from textguard.results import FixResult, LintMessage, LintResult
from textguard.types import FormatterConfig


def _make_message(
    *,
    rule_id: str = "no_todo",
    message: str = "Found TODO: 'TODO: write docs'",
    line: int = 1,
    column: int = 1,
    severity: Severity = Severity.ERROR,
    fix: FixCommand | None = None,
) -> LintMessage:
    return LintMessage(
        rule_id=rule_id,
        message=message,
        index=0,
        line=line,
        column=column,
        severity=severity,
        fix=fix,
    )


def _results() -> list[LintResult]:
    return [
        LintResult(
            file_path=Path("docs/intro.md"),
            messages=(
                _make_message(line=2, column=5),
                _make_message(
                    rule_id="trailing_spaces",
                    message="Trailing whitespace",
                    line=3,
                    column=10,
                    severity=Severity.WARNING,
                    fix=FixCommand((40, 42), ""),
                ),
            ),
        ),
        LintResult(file_path=Path("docs/clean.md")),
    ]


def _lint(name: str, results: list[LintResult], *, color: bool = False) -> str:
    formatter: Formatter = asyncio.run(
        lint_formatters.load_formatter(FormatterConfig(formatter_name=name, color=color))
    )
    return formatter.format(results)


def _fix(name: str, results: list[FixResult], *, color: bool = False) -> str:
    formatter: Formatter = asyncio.run(
        fix_formatters.load_formatter(FormatterConfig(formatter_name=name, color=color))
    )
    return formatter.format(results)


class TestStylishFormatter:
    def test_groups_by_file(self) -> None:
        output: str = _lint("stylish", _results())

        assert "docs/intro.md" in output
        assert "docs/clean.md" not in output
        assert "2:5  error  Found TODO" in output
        assert "3:10  warning  Trailing whitespace" in output

    def test_summary_line(self) -> None:
        output: str = _lint("stylish", _results())

        assert "✖ 2 problems (1 error, 1 warning)" in output
        assert "✓ 1 fixable problem." in output

    def test_empty_results(self) -> None:
        assert _lint("stylish", []) == ""

    def test_color_toggle(self) -> None:
        plain: str = _lint("stylish", _results(), color=False)
        colored: str = _lint("stylish", _results(), color=True)

        assert "\x1b[" not in plain
        assert "\x1b[" in colored
        assert click.unstyle(colored) == plain


class TestCompactFormatter:
    def test_one_line_per_message(self) -> None:
        output: str = _lint("compact", _results())

        assert (
            "docs/intro.md: line 2, col 5, Error - Found TODO: 'TODO: write docs' (no_todo)"
            in output
        )
        assert output.endswith("2 problems")

    def test_empty_results(self) -> None:
        assert _lint("compact", []) == ""


class TestUnixFormatter:
    def test_compiler_style_lines(self) -> None:
        output: str = _lint("unix", _results())

        assert "docs/intro.md:3:10: Trailing whitespace [Warning/trailing_spaces]" in output


class TestJsonFormatter:
    def test_valid_json(self) -> None:
        data: list[dict[str, object]] = json.loads(_lint("json", _results()))

        assert [item["filePath"] for item in data] == ["docs/intro.md", "docs/clean.md"]
        messages = data[0]["messages"]
        assert isinstance(messages, list)
        assert messages[1]["fix"] == {"range": [40, 42], "text": ""}
        assert messages[0]["severity"] == "error"

    def test_empty_results(self) -> None:
        assert json.loads(_lint("json", [])) == []


class TestFixFormatters:
    def _fix_results(self) -> list[FixResult]:
        applied: LintMessage = _make_message(
            rule_id="trailing_spaces", message="Trailing whitespace", line=3, column=10
        )
        remaining: LintMessage = _make_message(line=2, column=5)
        return [
            FixResult(
                file_path=Path("docs/intro.md"),
                output="fixed text\n",
                messages=(applied, remaining),
                applied_messages=(applied,),
                remaining_messages=(remaining,),
            )
        ]

    def test_stylish(self) -> None:
        output: str = _fix("stylish", self._fix_results())

        assert "✔ Fixed 1 problem" in output
        assert "✖ Remaining 1 problem" in output

    def test_compact(self) -> None:
        output: str = _fix("compact", self._fix_results())

        assert "docs/intro.md: line 3, col 10, Fixed - Trailing whitespace" in output

    def test_json(self) -> None:
        data: list[dict[str, object]] = json.loads(_fix("json", self._fix_results()))

        assert data[0]["output"] == "fixed text\n"
        assert len(data[0]["applyingMessages"]) == 1  # type: ignore[arg-type]

    def test_empty_results(self) -> None:
        assert _fix("stylish", []) == ""
        assert _fix("compact", []) == ""
