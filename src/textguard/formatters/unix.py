"""``path:line:column: message [Severity/rule]``, the classic compiler layout."""
from __future__ import annotations

from collections.abc import Sequence

from textguard.results import LintResult, all_messages, pluralize
from textguard.types import FormatterConfig


def format(results: Sequence[LintResult], config: FormatterConfig) -> str:
    lines: list[str] = [
        f"{result.file_path}:{message.line}:{message.column}: {message.message} "
        f"[{message.severity.value.capitalize()}/{message.rule_id}]"
        for result in results
        for message in result.messages
    ]
    total: int = len(all_messages(results))
    if total > 0:
        lines.extend(["", pluralize("problem", total)])
    return "\n".join(lines)
