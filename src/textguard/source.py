"""Line-level text source handed to rule contexts.

This is not a parser: a document is exposed as one ``Document`` node
followed by one ``Str`` node per line.
"""
from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class TextNode:
    """A node of the text source. ``range`` is [start, end) in the full text."""

    type: str
    range: tuple[int, int]
    raw: str
    line: int


@runtime_checkable
class SourceCode(Protocol):
    """What a rule context needs from the file being linted."""

    def get_syntax(self) -> MappingProxyType[str, str]: ...

    def get_file_path(self) -> Path | None: ...

    def get_source(self) -> str: ...


class Syntax:
    DOCUMENT: str = "Document"
    STR: str = "Str"


class TextSourceCode:
    """Source text of one file split into line nodes."""

    def __init__(self, text: str, *, file_path: Path | None = None) -> None:
        self._text: str = text
        self._file_path: Path | None = file_path
        self._line_starts: list[int] = [0]
        for idx, char in enumerate(text):
            if char == "\n":
                self._line_starts.append(idx + 1)

    def get_syntax(self) -> MappingProxyType[str, str]:
        return MappingProxyType({
            Syntax.DOCUMENT: Syntax.DOCUMENT,
            Syntax.STR: Syntax.STR,
        })

    def get_file_path(self) -> Path | None:
        return self._file_path

    def get_source(self) -> str:
        return self._text

    def nodes(self) -> Iterator[TextNode]:
        """Yield the document node, then one node per line (newline excluded)."""
        yield TextNode(
            type=Syntax.DOCUMENT,
            range=(0, len(self._text)),
            raw=self._text,
            line=1,
        )
        lines: list[str] = self._text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for idx, raw in enumerate(lines):
            raw = raw.removesuffix("\r")
            start: int = self._line_starts[idx]
            yield TextNode(
                type=Syntax.STR,
                range=(start, start + len(raw)),
                raw=raw,
                line=idx + 1,
            )

    def index_to_position(self, index: int) -> tuple[int, int]:
        """Convert an absolute offset to a 1-based (line, column) pair."""
        index = max(0, min(index, len(self._text)))
        line_idx: int = bisect_right(self._line_starts, index) - 1
        return line_idx + 1, index - self._line_starts[line_idx] + 1

    def position_to_index(self, line: int, column: int) -> int:
        """Convert a 1-based (line, column) pair to an absolute offset."""
        line_idx: int = max(0, min(line - 1, len(self._line_starts) - 1))
        return self._line_starts[line_idx] + max(0, column - 1)

    @classmethod
    def from_file(cls, path: Path) -> TextSourceCode:
        return cls(path.read_text(encoding="utf-8"), file_path=path)
