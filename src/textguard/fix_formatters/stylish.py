"""Human-readable summary of what a fix run changed."""
from __future__ import annotations

from collections.abc import Sequence

import click

from textguard.results import FixResult, pluralize
from textguard.types import FormatterConfig


def format(results: Sequence[FixResult], config: FormatterConfig) -> str:
    def style(text: str, **styles: object) -> str:
        return click.style(text, **styles) if config.color else text

    lines: list[str] = []
    fixed: int = 0
    remaining: int = 0
    for result in results:
        if not result.applied_messages and not result.remaining_messages:
            continue
        lines.append(style(str(result.file_path), underline=True))
        for message in result.applied_messages:
            lines.append(
                f"  {message.line}:{message.column}  {style('✔', fg='green')}  "
                f"{message.message}  {style(message.rule_id, dim=True)}"
            )
        for message in result.remaining_messages:
            lines.append(
                f"  {message.line}:{message.column}  {style('✖', fg='red')}  "
                f"{message.message}  {style(message.rule_id, dim=True)}"
            )
        lines.append("")
        fixed += len(result.applied_messages)
        remaining += len(result.remaining_messages)

    if fixed == 0 and remaining == 0:
        return ""
    lines.append(style(f"✔ Fixed {pluralize('problem', fixed)}", fg="green", bold=True))
    if remaining:
        lines.append(
            style(f"✖ Remaining {pluralize('problem', remaining)}", fg="red", bold=True)
        )
    return "\n".join(lines)
