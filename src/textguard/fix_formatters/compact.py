"""One line per applied fix."""
from __future__ import annotations

from collections.abc import Sequence

from textguard.results import FixResult, pluralize
from textguard.types import FormatterConfig


def format(results: Sequence[FixResult], config: FormatterConfig) -> str:
    lines: list[str] = [
        f"{result.file_path}: line {message.line}, col {message.column}, "
        f"Fixed - {message.message} ({message.rule_id})"
        for result in results
        for message in result.applied_messages
    ]
    if lines:
        lines.extend(["", f"Fixed {pluralize('problem', len(lines))}"])
    return "\n".join(lines)
