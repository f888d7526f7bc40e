"""Human-readable report grouped by file."""
from __future__ import annotations

from collections.abc import Sequence

import click

from textguard.constants import Severity
from textguard.results import LintResult, all_messages, pluralize, summarize
from textguard.types import FormatterConfig

_SEVERITY_COLORS: dict[Severity, str] = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
}


def format(results: Sequence[LintResult], config: FormatterConfig) -> str:
    def style(text: str, **styles: object) -> str:
        return click.style(text, **styles) if config.color else text

    lines: list[str] = []
    for result in results:
        if not result.messages:
            continue
        lines.append(style(str(result.file_path), underline=True))
        for message in result.messages:
            label: str = style(
                message.severity.value,
                fg=_SEVERITY_COLORS.get(message.severity),
            )
            fixable: str = style(" ✓", fg="green") if message.fix else ""
            lines.append(
                f"  {message.line}:{message.column}  {label}  "
                f"{message.message}  {style(message.rule_id, dim=True)}{fixable}"
            )
        lines.append("")

    summary = summarize(all_messages(results))
    if summary.total == 0:
        return ""

    problems: str = (
        f"✖ {pluralize('problem', summary.total)} "
        f"({pluralize('error', summary.errors)}, "
        f"{pluralize('warning', summary.warnings)})"
    )
    lines.append(style(problems, fg="red" if summary.errors else "yellow", bold=True))
    if summary.fixable:
        lines.append(
            style(f"✓ {summary.fixable} fixable problem"
                  f"{'s' if summary.fixable != 1 else ''}.", fg="green", bold=True)
        )
    return "\n".join(lines)
