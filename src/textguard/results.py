"""Lint and fix result model consumed by formatters."""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from textguard.constants import Severity
from textguard.fixer import FixCommand


@dataclass(frozen=True, slots=True)
class LintMessage:
    """A single reported problem. ``line``/``column`` are 1-based."""

    rule_id: str
    message: str
    index: int
    line: int
    column: int
    severity: Severity
    fix: FixCommand | None = None

    def to_dict(self) -> dict[str, object]:
        item: dict[str, object] = {
            "ruleId": self.rule_id,
            "message": self.message,
            "index": self.index,
            "line": self.line,
            "column": self.column,
            "severity": self.severity.value,
        }
        if self.fix is not None:
            item["fix"] = self.fix.to_dict()
        return item


@dataclass(frozen=True, slots=True)
class LintResult:
    """All messages for one file."""

    file_path: Path
    messages: tuple[LintMessage, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "filePath": str(self.file_path),
            "messages": [m.to_dict() for m in self.messages],
        }


@dataclass(frozen=True, slots=True)
class FixResult:
    """Outcome of a fix run for one file, as produced by a fix engine."""

    file_path: Path
    output: str
    messages: tuple[LintMessage, ...] = ()
    applied_messages: tuple[LintMessage, ...] = ()
    remaining_messages: tuple[LintMessage, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "filePath": str(self.file_path),
            "output": self.output,
            "messages": [m.to_dict() for m in self.messages],
            "applyingMessages": [m.to_dict() for m in self.applied_messages],
            "remainingMessages": [m.to_dict() for m in self.remaining_messages],
        }


@dataclass(frozen=True, slots=True)
class ResultSummary:
    errors: int = 0
    warnings: int = 0
    fixable: int = 0

    @property
    def total(self) -> int:
        return self.errors + self.warnings


def summarize(messages: Iterable[LintMessage]) -> ResultSummary:
    errors: int = 0
    warnings: int = 0
    fixable: int = 0
    for message in messages:
        if message.severity == Severity.ERROR:
            errors += 1
        elif message.severity == Severity.WARNING:
            warnings += 1
        if message.fix is not None:
            fixable += 1
    return ResultSummary(errors=errors, warnings=warnings, fixable=fixable)


def all_messages(results: Sequence[LintResult]) -> list[LintMessage]:
    return [message for result in results for message in result.messages]


def has_errors(results: Sequence[LintResult]) -> bool:
    return any(m.severity == Severity.ERROR for m in all_messages(results))


def pluralize(word: str, count: int) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"
