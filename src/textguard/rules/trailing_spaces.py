"""Flag whitespace at the end of a line; fixable by removing it."""
from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any, Final

from textguard.rule_context import RuleContext
from textguard.source import TextNode

_TRAILING: Final[re.Pattern[str]] = re.compile(r"[ \t]+$")


def create(context: RuleContext, options: Mapping[str, Any]) -> dict[str, Callable[[TextNode], None]]:
    skip_blank_lines: bool = bool(options.get("skip_blank_lines", False))

    def on_str(node: TextNode) -> None:
        match: re.Match[str] | None = _TRAILING.search(node.raw)
        if match is None:
            return
        if skip_blank_lines and match.start() == 0:
            return
        start: int = node.range[0]
        context.report(
            node,
            context.RuleError(
                "Trailing whitespace",
                index=match.start(),
                fix=context.fixer.remove_range((start + match.start(), start + match.end())),
            ),
        )

    return {context.syntax["Str"]: on_str}
