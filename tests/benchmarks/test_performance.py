"""Performance benchmark suite for json-tree-explorer.

Checks that search and tree walks stay bounded by the configured caps
rather than by document size.

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

from json_tree_explorer import TreeModel, search


class TestSearchPerformance:
    """Search over large documents stops at the result and breadth caps."""

    def test_records_no_match(self, benchmark, records_5000):  # type: ignore[no-untyped-def]
        result = benchmark(search, records_5000, "zzz")
        assert result.is_empty

    def test_records_capped(self, benchmark, records_5000):  # type: ignore[no-untyped-def]
        result = benchmark(search, records_5000, "user")
        assert len(result) == 1000
        assert result.truncated

    def test_wide_breadth_capped(self, benchmark, wide_10000):  # type: ignore[no-untyped-def]
        result = benchmark(search, wide_10000, "value_9999")
        assert result.is_empty

    def test_deep_depth_capped(self, benchmark, deep_500):  # type: ignore[no-untyped-def]
        result = benchmark(search, deep_500, "bottom")
        assert result.is_empty


class TestWalkPerformance:
    """Walking a large windowed array renders one page, not the whole array."""

    def test_large_array_walk(self, benchmark, array_2000):  # type: ignore[no-untyped-def]
        model = TreeModel(array_2000, is_large_document=True)
        views = benchmark(lambda: list(model.walk()))
        assert len(views) == 101

    def test_small_array_walk(self, benchmark, array_2000):  # type: ignore[no-untyped-def]
        model = TreeModel(array_2000)
        views = benchmark(lambda: list(model.walk()))
        assert len(views) == 2001
