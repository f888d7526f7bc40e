"""One line per message: ``path: line L, col C, Severity - message (rule)``."""
from __future__ import annotations

from collections.abc import Sequence

import click

from textguard.constants import Severity
from textguard.results import LintResult, all_messages, pluralize, summarize
from textguard.types import FormatterConfig


def format(results: Sequence[LintResult], config: FormatterConfig) -> str:
    lines: list[str] = []
    for result in results:
        for message in result.messages:
            lines.append(
                f"{result.file_path}: line {message.line}, col {message.column}, "
                f"{message.severity.value.capitalize()} - {message.message} "
                f"({message.rule_id})"
            )

    total: int = summarize(all_messages(results)).total
    if total > 0:
        footer: str = pluralize("problem", total)
        if config.color:
            has_error: bool = any(
                m.severity == Severity.ERROR for m in all_messages(results)
            )
            footer = click.style(footer, fg="red" if has_error else "yellow", bold=True)
        lines.extend(["", footer])
    return "\n".join(lines)
