"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_table_lines() -> list[str]:
    """Generate a ragged 500-row table as typed into an editor."""
    lines = ["| Name | Description | Qty | Price |", "|:--|--|--:|:-:|"]
    for i in range(500):
        lines.append(f"| item {i} | 品目 {i} with notes | {i} | {i * 1.5} |")
        if i % 50 == 0:
            lines.append(f"| short {i} |")
    return lines


@pytest.fixture
def wide_cell_texts() -> list[str]:
    """Cell contents mixing ASCII, CJK, fullwidth and ambiguous characters."""
    return [f"セル{i} ＡＢ ∀ x{i}" for i in range(1000)]
