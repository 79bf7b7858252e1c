"""Tests for copy_text."""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_explorer.clipboard import copy_text


class TestPrimitives:
    @pytest.mark.parametrize(
        ("value", "text"),
        [("hello", "hello"), (3, "3"), (3.0, "3"), (True, "true"), (None, "null")],
    )
    def test_plain_string_form(self, value: Any, text: str) -> None:
        assert copy_text(value) == text

    def test_string_not_quoted(self) -> None:
        assert copy_text('say "hi"') == 'say "hi"'


class TestContainers:
    def test_pretty_printed_two_space_indent(self) -> None:
        assert copy_text({"a": [1, 2]}) == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_key_order_preserved(self) -> None:
        assert copy_text({"z": 1, "a": 2}) == '{\n  "z": 1,\n  "a": 2\n}'

    def test_non_ascii_kept(self) -> None:
        assert copy_text(["é"]) == '[\n  "é"\n]'

    def test_empty_containers(self) -> None:
        assert copy_text([]) == "[]"
        assert copy_text({}) == "{}"


class TestFaults:
    def test_unserializable_copies_empty(self) -> None:
        assert copy_text({"a": object()}) == ""

    def test_circular_copies_empty(self) -> None:
        loop: list[Any] = []
        loop.append(loop)
        assert copy_text(loop) == ""

    def test_exotic_primitive_copies_empty(self) -> None:
        assert copy_text(object()) == ""
