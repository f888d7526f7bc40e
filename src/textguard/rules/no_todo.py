"""Flag TODO-style markers left in prose."""
from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from textguard.rule_context import RuleContext
from textguard.source import TextNode

DEFAULT_WORDS: tuple[str, ...] = ("TODO", "FIXME")


def create(context: RuleContext, options: Mapping[str, Any]) -> dict[str, Callable[[TextNode], None]]:
    words: list[str] = list(options.get("words", DEFAULT_WORDS))
    if not words:
        return {}
    pattern: re.Pattern[str] = re.compile(
        r"\b(" + "|".join(re.escape(w) for w in words) + r")\b:?"
    )

    def on_str(node: TextNode) -> None:
        for match in pattern.finditer(node.raw):
            context.report(
                node,
                context.RuleError(
                    f"Found {match.group(1)}: '{node.raw.strip()}'",
                    index=match.start(),
                ),
            )

    return {context.syntax["Str"]: on_str}
