"""Tests for fix commands and RuleFixer."""
from __future__ import annotations

from collections.abc import Callable

import pytest

from textguard.errors import InvalidFixError
from textguard.fixer import FixCommand, RuleFixer
from textguard.source import TextNode


def _node(start: int, end: int) -> TextNode:
    return TextNode(type="Str", range=(start, end), raw="x" * (end - start), line=1)


class TestRangeOperations:
    def test_insert_text_after_range(self) -> None:
        assert RuleFixer().insert_text_after_range([3, 7], "X") == FixCommand((7, 7), "X")

    def test_insert_text_before_range(self) -> None:
        assert RuleFixer().insert_text_before_range([3, 7], "X") == FixCommand((3, 3), "X")

    def test_remove_range(self) -> None:
        assert RuleFixer().remove_range([3, 7]) == FixCommand((3, 7), "")

    def test_replace_text_range(self) -> None:
        assert RuleFixer().replace_text_range([3, 7], "Y") == FixCommand((3, 7), "Y")

    def test_replace_with_empty_text_is_allowed(self) -> None:
        assert RuleFixer().replace_text_range((3, 7), "") == FixCommand((3, 7), "")


class TestNodeOperations:
    def test_node_variants_use_node_range(self) -> None:
        fixer: RuleFixer = RuleFixer()
        node: TextNode = _node(10, 15)

        assert fixer.insert_text_after(node, "!") == FixCommand((15, 15), "!")
        assert fixer.insert_text_before(node, "> ") == FixCommand((10, 10), "> ")
        assert fixer.replace_text(node, "hello") == FixCommand((10, 15), "hello")
        assert fixer.remove(node) == FixCommand((10, 15), "")

    def test_mapping_nodes_are_accepted(self) -> None:
        assert RuleFixer().remove({"range": [1, 4]}) == FixCommand((1, 4), "")

    def test_offsets_are_not_reindexed_between_commands(self) -> None:
        fixer: RuleFixer = RuleFixer()
        first: FixCommand = fixer.insert_text_before_range((0, 5), "long prefix ")
        second: FixCommand = fixer.replace_text_range((6, 9), "abc")

        assert first.range == (0, 0)
        assert second.range == (6, 9)


class TestInvalidFixes:
    def test_empty_insertion_after_fails(self) -> None:
        with pytest.raises(InvalidFixError):
            RuleFixer().insert_text_after_range([0, 0], "")

    def test_empty_insertion_before_node_fails(self) -> None:
        with pytest.raises(InvalidFixError):
            RuleFixer().insert_text_before(_node(2, 4), "")

    def test_reversed_range_fails(self) -> None:
        with pytest.raises(InvalidFixError):
            RuleFixer().remove_range((7, 3))

    @pytest.mark.parametrize(
        "build",
        [
            lambda fixer: fixer.insert_text_after_range((5, 3), "X"),
            lambda fixer: fixer.insert_text_before_range((5, 3), "X"),
            lambda fixer: fixer.insert_text_after({"range": [9, 2]}, "X"),
            lambda fixer: fixer.replace_text_range((5, 3), "X"),
        ],
    )
    def test_reversed_input_range_fails_for_every_builder(
        self, build: Callable[[RuleFixer], FixCommand]
    ) -> None:
        with pytest.raises(InvalidFixError, match="is after end"):
            build(RuleFixer())

    def test_malformed_range_fails(self) -> None:
        with pytest.raises(InvalidFixError):
            RuleFixer().replace_text_range((1, 2, 3), "x")

    def test_invalid_fix_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            FixCommand((5, 1), "x")


class TestFixCommand:
    def test_wire_shape(self) -> None:
        assert FixCommand((3, 7), "Y").to_dict() == {"range": [3, 7], "text": "Y"}

    def test_is_immutable(self) -> None:
        command: FixCommand = FixCommand((0, 1), "a")
        with pytest.raises(AttributeError):
            command.text = "b"  # type: ignore[misc]
