"""End-to-end behaviour of the tree model and search engine together.

Each class exercises one observable guarantee against real documents:
bounded windows, bounded and correct search, forced expansion on the
route to a match, and state reset on document reload.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_explorer import ExplorerConfig, JsonPath, MatchKind, TreeModel, load_text, search
from json_tree_explorer.tree.classifier import format_primitive

DOCUMENTS: list[Any] = [
    {"a": {"b": 1, "c": [1, 2, 3]}},
    {"x": 42, "y": "value42", "nested": {"x42": [42, "no", {"deep42": None}]}},
    [{"id": i, "name": f"item {i}", "tags": ["t1", "t2"]} for i in range(30)],
    {"null": None, "flags": [True, False], "pi": 3.14, "neg": -1e-7},
    "plain root string",
]

QUERIES = ["42", "a", "T", "item 2", "null", "true", "e-7", "root"]


def _target_text(document: Any, match: Any) -> str:
    if match.kind is MatchKind.KEY:
        return str(match.path[-1])
    return format_primitive(match.path.resolve(document))


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_small_document_default_expansion(self) -> None:
        model = TreeModel({"a": {"b": 1, "c": [1, 2, 3]}})
        assert model.is_expanded(JsonPath())
        assert model.is_expanded(JsonPath(("a",)))
        assert not model.is_expanded(JsonPath(("a", "c")))
        assert [view.name for view in model.walk()] == ["root", "a", "b", "c"]

    def test_large_array_window(self) -> None:
        model = TreeModel(list(range(2000)), is_large_document=True)
        root = model.node()
        assert root.visible_count == 100
        assert len(root.visible_children) == 100
        assert root.remaining == 1900
        assert root.can_load_more
        assert model.load_more(JsonPath()) == 200

    def test_numeric_query_matches_number_and_string(self) -> None:
        result = search({"x": 42, "y": "value42"}, "42")
        assert [(m.kind, str(m.path)) for m in result] == [
            (MatchKind.VALUE, "x"),
            (MatchKind.VALUE, "y"),
        ]

    def test_jsonl_with_one_bad_line(self) -> None:
        loaded = load_text('{"n": 1}\n{oops\n{"n": 3}', is_jsonl=True)
        assert loaded.value == [{"n": 1}, {"n": 3}]
        assert loaded.skipped_count == 1
        assert loaded.skipped_lines[0].line_number == 2


# ---------------------------------------------------------------------------
# Window guarantees
# ---------------------------------------------------------------------------


class TestWindowGuarantees:
    @pytest.mark.parametrize("length", [0, 1, 99, 100, 101, 250])
    def test_visible_count_bounded_and_monotonic(self, length: int) -> None:
        model = TreeModel(list(range(length)), is_large_document=True)
        root = JsonPath()
        seen = [model.node(root).visible_count]
        while model.can_load_more(root):
            model.load_more(root)
            seen.append(model.node(root).visible_count)
        assert seen == sorted(seen)
        assert all(count <= length for count in seen)
        assert seen[-1] == length
        assert not model.node(root).can_load_more


# ---------------------------------------------------------------------------
# Search guarantees
# ---------------------------------------------------------------------------


class TestSearchGuarantees:
    @pytest.mark.parametrize("document", DOCUMENTS)
    @pytest.mark.parametrize("query", QUERIES)
    def test_every_match_contains_query(self, document: Any, query: str) -> None:
        result = search(document, query)
        for match in result:
            assert query.lower() in _target_text(document, match).lower()

    @pytest.mark.parametrize("cap", [1, 3, 10])
    def test_capped_result_is_prefix(self, cap: int) -> None:
        document = DOCUMENTS[2]
        full = search(document, "t")
        capped = search(document, "t", ExplorerConfig(max_results=cap))
        assert len(capped) <= cap
        assert capped.matches == full.matches[:cap]

    @pytest.mark.parametrize("document", DOCUMENTS)
    def test_search_is_idempotent(self, document: Any) -> None:
        assert search(document, "4").matches == search(document, "4").matches


# ---------------------------------------------------------------------------
# Forced expansion
# ---------------------------------------------------------------------------


class TestForcedExpansion:
    def test_route_to_every_match_is_open(self) -> None:
        document = {"l1": {"l2": {"l3": {"l4": "needle"}}}, "other": {"x": 1}}
        model = TreeModel(document)
        result = model.apply_search("needle")
        for match in result:
            for prefix in match.path.prefixes():
                assert model.matches_search(prefix)
                if isinstance(prefix.resolve(document), dict):
                    assert model.is_expanded(prefix)
        assert not model.matches_search(JsonPath(("other",)))
        visible = {str(view.path) for view in model.walk()}
        assert "l1.l2.l3.l4" in visible

    def test_clearing_restores_defaults(self) -> None:
        document = {"a": {"b": {"c": {"d": "needle"}}}}
        model = TreeModel(document)
        before = [str(view.path) for view in model.walk()]
        model.apply_search("needle")
        assert len(list(model.walk())) > len(before)
        model.clear_search()
        assert [str(view.path) for view in model.walk()] == before


# ---------------------------------------------------------------------------
# Reload
# ---------------------------------------------------------------------------


class TestReload:
    def test_new_document_drops_previous_state(self) -> None:
        model = TreeModel({"a": {"b": {"c": 1}}, "arr": list(range(300))}, is_large_document=True)
        model.toggle_expanded(JsonPath(("a",)))
        model.load_more(JsonPath(("arr",)))
        model.apply_search("c")

        model.load({"a": {"b": {"c": 1}}, "arr": list(range(300))}, is_large_document=True)
        assert not model.is_expanded(JsonPath(("a",)))
        assert model.node(JsonPath(("arr",))).visible_count == 100
        assert model.search_result.is_empty
