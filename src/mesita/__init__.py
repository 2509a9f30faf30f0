"""
Mesita: Markdown Table Formatting Kernel for Python

Parses pipe-delimited tables from editor lines into an immutable model,
reformats them into aligned text, and keeps the editor cursor in the same
cell across the reformat. Unicode-aware: CJK and fullwidth text is padded
by display width. Zero runtime dependencies.

Quick Start:
    >>> from mesita import read_table, complete_table, format_table
    >>> table = read_table(["| Name | Qty |", "| apple | 3 |"])
    >>> completed = complete_table(table)
    >>> format_table(completed.table).table.to_lines()
    ['| Name  | Qty |', '| ----- | --- |', '| apple | 3   |']

Cursor Remapping:
    >>> from mesita import Point, reformat_lines
    >>> result = reformat_lines(["|a|b|", "|-|-|"], Point(0, 2), row_offset=0)
    >>> result.cursor
    Point(row=0, column=6)

Structural Editing:
    >>> from mesita import insert_row, read_row
    >>> table = insert_row(completed.table, 2, read_row("| pear | 1 |"))

Installation:
    pip install mesita
"""

from mesita.alignment import Alignment, DefaultAlignment, HeaderAlignment
from mesita.config import (
    FormatOptions,
    FormatType,
    ParserOptions,
    TextWidthOptions,
    format_options_context,
    get_format_options,
    reset_format_options,
    set_format_options,
)
from mesita.editing import Reformatted, reformat_lines
from mesita.errors import (
    EmptyTableError,
    MesitaError,
    UnexpectedAlignmentError,
    UnknownAlignmentError,
    UnknownFormatTypeError,
)
from mesita.focus import Focus, FocusOffset
from mesita.formatter import (
    CompletedTable,
    FormattedTable,
    alter_alignment,
    complete_table,
    delete_column,
    delete_row,
    format_table,
    insert_column,
    insert_row,
    move_column,
    move_row,
)
from mesita.location import Point, Range
from mesita.nodes import Table, TableCell, TableRow
from mesita.parser import read_row, read_table, split_cells
from mesita.width import (
    align_text,
    compute_text_width,
    delimiter_text,
    extend_array,
    pad_text,
)

__version__ = "0.1.0"

__all__ = [
    # Model
    "Focus",
    "FocusOffset",
    "Point",
    "Range",
    "Table",
    "TableCell",
    "TableRow",
    # Alignment
    "Alignment",
    "DefaultAlignment",
    "HeaderAlignment",
    # Options
    "FormatOptions",
    "FormatType",
    "ParserOptions",
    "TextWidthOptions",
    "format_options_context",
    "get_format_options",
    "reset_format_options",
    "set_format_options",
    # Parsing
    "read_row",
    "read_table",
    "split_cells",
    # Width
    "align_text",
    "compute_text_width",
    "delimiter_text",
    "extend_array",
    "pad_text",
    # Formatting and editing
    "CompletedTable",
    "FormattedTable",
    "Reformatted",
    "alter_alignment",
    "complete_table",
    "delete_column",
    "delete_row",
    "format_table",
    "insert_column",
    "insert_row",
    "move_column",
    "move_row",
    "reformat_lines",
    # Errors
    "EmptyTableError",
    "MesitaError",
    "UnexpectedAlignmentError",
    "UnknownAlignmentError",
    "UnknownFormatTypeError",
    "__version__",
]
