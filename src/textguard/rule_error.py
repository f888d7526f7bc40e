"""Structured error value a rule reports through its context."""
from __future__ import annotations

from dataclasses import dataclass

from textguard.fixer import FixCommand


@dataclass(frozen=True, slots=True)
class RuleError:
    """A problem found by a rule.

    ``index`` is an offset relative to the start of the reported node;
    ``line``/``column`` are 0-based and relative to the node as well. At most
    one of the two addressing styles is expected.
    """

    message: str
    index: int | None = None
    line: int | None = None
    column: int | None = None
    fix: FixCommand | None = None

    def __str__(self) -> str:
        return self.message
