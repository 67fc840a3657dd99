"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_buffer() -> list[str]:
    """Generate a large C buffer (~5000 lines)."""
    rows: list[str] = []
    for i in range(250):
        rows.extend(
            [
                f"/* Section {i}",
                " * spans a few lines */",
                f"static int counter_{i} = {i * 7};",
                f"int function_{i}(const char *name, double ratio) {{",
                f"    char sep = '\\t'; // separator {i}",
                f'    if (ratio > 0.{i}) return printf("%s\\n", name);',
                "    for (int j = 0; j < 10; j++) { counter += j; }",
                "    return 0;",
                "}",
            ]
        )
        rows.extend([""] * 11)
    return rows
