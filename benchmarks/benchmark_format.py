"""Benchmark table reformatting.

Measures the cost of the reformat an editor runs on every keystroke in a
large table, plus the width engine on its own.

Run with:
    pytest benchmarks/benchmark_format.py -v --benchmark-only
"""

import pytest

from mesita import (
    FormatOptions,
    FormatType,
    Point,
    TextWidthOptions,
    complete_table,
    compute_text_width,
    format_table,
    read_table,
    reformat_lines,
)


@pytest.mark.benchmark(group="reformat")
def test_benchmark_reformat_lines(benchmark, large_table_lines):
    """Benchmark the full read, complete, format and remap cycle."""
    cursor = Point(250, 10)
    benchmark(reformat_lines, large_table_lines, cursor)


@pytest.mark.benchmark(group="reformat")
def test_benchmark_weak_format(benchmark, large_table_lines):
    """Benchmark WEAK formatting of an already completed table."""
    options = FormatOptions(format_type=FormatType.WEAK)
    table = complete_table(read_table(large_table_lines), options).table
    benchmark(format_table, table, options)


@pytest.mark.benchmark(group="reformat")
def test_benchmark_read_table(benchmark, large_table_lines):
    """Benchmark parsing alone (baseline for the reformat cycle)."""
    benchmark(read_table, large_table_lines)


@pytest.mark.benchmark(group="width")
def test_benchmark_text_width_uncached(benchmark, wide_cell_texts):
    """Benchmark width measurement with a fresh cache for every round."""
    from mesita.width import _cached_text_width

    options = TextWidthOptions(ambiguous_as_wide=True)

    def measure():
        _cached_text_width.cache_clear()
        for text in wide_cell_texts:
            compute_text_width(text, options)

    benchmark(measure)
