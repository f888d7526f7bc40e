"""Fix commands and the factory rules use to build them.

A fix command describes one text edit against the *original* source: the
``range`` is a pair of absolute offsets that never shift while other commands
are produced in the same pass. Nothing here touches or applies source text;
that is left to whatever consumes the commands.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from textguard.errors import InvalidFixError

Range = tuple[int, int]


@dataclass(frozen=True, slots=True)
class FixCommand:
    """Replace ``range`` of the original source with ``text``."""

    range: Range
    text: str

    def __post_init__(self) -> None:
        start, end = self.range
        if start > end:
            raise InvalidFixError(f"Fix range start {start} is after end {end}")

    def to_dict(self) -> dict[str, object]:
        return {"range": list(self.range), "text": self.text}


def _as_range(value: Sequence[int]) -> Range:
    if len(value) != 2:
        raise InvalidFixError(f"Fix range must be [start, end], got {list(value)!r}")
    start, end = int(value[0]), int(value[1])
    if start > end:
        raise InvalidFixError(f"Fix range start {start} is after end {end}")
    return start, end


def _node_range(node: Any) -> Range:
    if isinstance(node, Mapping):
        return _as_range(node["range"])
    return _as_range(node.range)


def _insert_text_at(index: int, text: str) -> FixCommand:
    if not text:
        raise InvalidFixError("Inserted text must be a non-empty string")
    return FixCommand(range=(index, index), text=text)


class RuleFixer:
    """Creates fix commands for rules.

    Stateless; one instance is handed to each rule context. Nodes are anything
    with a ``range`` attribute (or ``"range"`` key).
    """

    def insert_text_after(self, node: Any, text: str) -> FixCommand:
        """Insert ``text`` after the given node."""
        return self.insert_text_after_range(_node_range(node), text)

    def insert_text_after_range(self, range: Sequence[int], text: str) -> FixCommand:
        """Insert ``text`` at the end offset of ``range``."""
        return _insert_text_at(_as_range(range)[1], text)

    def insert_text_before(self, node: Any, text: str) -> FixCommand:
        """Insert ``text`` before the given node."""
        return self.insert_text_before_range(_node_range(node), text)

    def insert_text_before_range(self, range: Sequence[int], text: str) -> FixCommand:
        """Insert ``text`` at the start offset of ``range``."""
        return _insert_text_at(_as_range(range)[0], text)

    def replace_text(self, node: Any, text: str) -> FixCommand:
        """Replace the text of the given node."""
        return self.replace_text_range(_node_range(node), text)

    def replace_text_range(self, range: Sequence[int], text: str) -> FixCommand:
        return FixCommand(range=_as_range(range), text=text)

    def remove(self, node: Any) -> FixCommand:
        """Remove the given node from the source."""
        return self.remove_range(_node_range(node))

    def remove_range(self, range: Sequence[int]) -> FixCommand:
        return FixCommand(range=_as_range(range), text="")
