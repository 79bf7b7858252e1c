"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three shapes stress different bounds: a wide flat record dump (breadth cap),
a deep chain (depth cap) and a large top-level array (windowed walk).
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_records(count: int) -> list[dict[str, Any]]:
    """Generate ``count`` flat records with deterministic string values."""
    return [
        {"id": i, "name": f"user_{i}", "email": f"user_{i}@example.com", "active": i % 2 == 0}
        for i in range(count)
    ]


def generate_wide_object(num_keys: int) -> dict[str, Any]:
    """Generate one object with ``num_keys`` sibling keys."""
    return {f"key_{i}": f"value_{i}" for i in range(num_keys)}


def generate_deep_chain(depth: int) -> dict[str, Any]:
    """Generate ``depth`` nested single-key objects ending in a string leaf."""
    document: dict[str, Any] = {"leaf": "bottom"}
    for level in range(depth):
        document = {f"level_{level}": document}
    return document


# --- Fixtures for each shape ---


@pytest.fixture
def records_5000() -> list[dict[str, Any]]:
    """5000 flat records (20000 primitive leaves)."""
    return generate_records(5000)


@pytest.fixture
def wide_10000() -> dict[str, Any]:
    """One object with 10000 keys; only the first 1000 are searched."""
    return generate_wide_object(10000)


@pytest.fixture
def deep_500() -> dict[str, Any]:
    """A 500-level chain; only the first 50 levels are searched."""
    return generate_deep_chain(500)


@pytest.fixture
def array_2000() -> list[int]:
    """A 2000-element top-level array."""
    return list(range(2000))
