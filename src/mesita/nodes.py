"""Immutable table model for Mesita.

All model types are frozen dataclasses with slots. A table is never
changed in place: editing operations build a new Table that shares every
unchanged TableRow (and TableCell) with its predecessor.

Model Hierarchy:
Table
└── TableRow (margin_left, margin_right)
    └── TableCell (raw_content)

A row serializes as::

    margin_left + "|" + cell_0 + "|" + ... + "|" + cell_n + "|" + margin_right

Row 1 is the delimiter row when its cells all look like ``:?-+:?``; it
is a positional convention, not a separate type.

Cursor Spans:
Editor positions sit between characters. Each row is divided into spans:
the left margin, one span per cell (between its two pipes), and the right
margin. A Focus names a span and which end of it the cursor is on; see
Table.focus_of_position and Table.position_of_focus.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mesita.alignment import Alignment
from mesita.config import TextWidthOptions
from mesita.focus import Focus, FocusOffset
from mesita.location import Point, Range
from mesita.width import compute_text_width

_DELIMITER_PATTERN = re.compile(r"^\s*:?-+:?\s*$")


# =============================================================================
# Cell
# =============================================================================


@dataclass(frozen=True, slots=True)
class TableCell:
    """The raw text between two pipes.

    Example:
        >>> cell = TableCell("  foo ")
        >>> cell.content, cell.padding_left, cell.padding_right
        ('foo', 2, 1)

    """

    raw_content: str

    @property
    def content(self) -> str:
        """Trimmed content."""
        return self.raw_content.strip()

    @property
    def padding_left(self) -> int:
        """Number of characters before the content.

        A blank cell counts one space of left padding (the conventional
        cursor position inside ``|  |``), none if the cell is empty.
        """
        content = self.content
        if content == "":
            return 0 if self.raw_content == "" else 1
        return len(self.raw_content) - len(self.raw_content.lstrip())

    @property
    def padding_right(self) -> int:
        """Number of characters after the content."""
        return len(self.raw_content) - len(self.content) - self.padding_left

    def to_text(self) -> str:
        return self.raw_content

    def is_delimiter(self) -> bool:
        """Check whether the cell is a delimiter cell (``:?-+:?``)."""
        return _DELIMITER_PATTERN.match(self.raw_content) is not None

    def get_alignment(self) -> Alignment | None:
        """Alignment encoded by a delimiter cell, None for other cells."""
        if not self.is_delimiter():
            return None
        content = self.content
        if content.startswith(":"):
            if content.endswith(":"):
                return Alignment.CENTER
            return Alignment.LEFT
        if content.endswith(":"):
            return Alignment.RIGHT
        return Alignment.DEFAULT

    def compute_width(self, options: TextWidthOptions | None = None) -> int:
        """Display width of the content."""
        return compute_text_width(self.content, options)

    def compute_raw_offset(self, content_offset: int) -> int:
        """Convert an offset in the content to an offset in the raw text."""
        return content_offset + self.padding_left

    def compute_content_offset(self, raw_offset: int) -> int:
        """Convert an offset in the raw text to an offset in the content.

        Offsets in the padding clamp to the nearest end of the content.
        """
        content = self.content
        if content == "":
            return 0
        padding_left = self.padding_left
        if raw_offset < padding_left:
            return 0
        if raw_offset < padding_left + len(content):
            return raw_offset - padding_left
        return len(content)


# =============================================================================
# Row
# =============================================================================


@dataclass(frozen=True, slots=True)
class TableRow:
    """One line of a table: cells plus the text outside the outer pipes.

    Rows of one table may have different numbers of cells until the table
    is completed.

    """

    cells: tuple[TableCell, ...]
    margin_left: str = ""
    margin_right: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))

    def get_width(self) -> int:
        """Number of cells."""
        return len(self.cells)

    def get_cells(self) -> list[TableCell]:
        """A new list of the row's cells."""
        return list(self.cells)

    def get_cell_at(self, index: int) -> TableCell | None:
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return None

    def is_delimiter(self) -> bool:
        """Check whether the row could be a delimiter row."""
        return len(self.cells) > 0 and all(cell.is_delimiter() for cell in self.cells)

    def to_text(self) -> str:
        """Serialize the row.

        A row without cells is a blank or margin-only line and renders as
        its left margin.
        """
        if not self.cells:
            return self.margin_left
        cells = "|".join(cell.to_text() for cell in self.cells)
        return f"{self.margin_left}|{cells}|{self.margin_right}"

    def _span_of_column(self, column: int) -> tuple[int, int]:
        # (start, end) character offsets of the span addressed by column
        margin_left = len(self.margin_left)
        if column < 0:
            return 0, margin_left
        if not self.cells:
            return margin_left, margin_left
        start = margin_left + 1
        for cell in self.cells[:column]:
            start += len(cell.raw_content) + 1
        if column < len(self.cells):
            return start, start + len(self.cells[column].raw_content)
        return start, start + len(self.margin_right)


# =============================================================================
# Table
# =============================================================================


@dataclass(frozen=True, slots=True)
class Table:
    """An ordered sequence of rows.

    Row 0 is the header; row 1 is the delimiter row if it qualifies.

    Example:
        >>> from mesita import read_table
        >>> table = read_table(["| A | B |", "|---|---|"])
        >>> table.get_height(), table.get_header_width()
        (2, 2)

    """

    rows: tuple[TableRow, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.rows, tuple):
            object.__setattr__(self, "rows", tuple(self.rows))

    def get_height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def get_width(self) -> int:
        """Maximum number of cells in any row."""
        return max((row.get_width() for row in self.rows), default=0)

    def get_header_width(self) -> int | None:
        """Number of cells in the header row, None if there are no rows."""
        if not self.rows:
            return None
        return self.rows[0].get_width()

    def get_rows(self) -> list[TableRow]:
        """A new list sharing the table's rows."""
        return list(self.rows)

    def get_row_at(self, index: int) -> TableRow | None:
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def get_delimiter_row(self) -> TableRow | None:
        """Row 1 if it is a delimiter row, else None."""
        row = self.get_row_at(1)
        if row is not None and row.is_delimiter():
            return row
        return None

    def get_cell_at(self, row_index: int, column_index: int) -> TableCell | None:
        row = self.get_row_at(row_index)
        if row is None:
            return None
        return row.get_cell_at(column_index)

    def get_focused_cell(self, focus: Focus) -> TableCell | None:
        return self.get_cell_at(focus.row, focus.column)

    def to_lines(self) -> list[str]:
        """Serialize every row, one line per row."""
        return [row.to_text() for row in self.rows]

    def focus_of_position(self, pos: Point, row_offset: int) -> Focus | None:
        """Compute the focus of an editor position.

        Args:
            pos: Position in the editor
            row_offset: Editor row of the table's first row

        Returns:
            Focus of the span containing the position (LEADING at its
            start, TRAILING anywhere past it), None if the position is
            outside the table's rows
        """
        row_index = pos.row - row_offset
        row = self.get_row_at(row_index)
        if row is None:
            return None
        column = -1
        start, end = row._span_of_column(column)
        # Cells are visited left to right until the position falls in a span
        while pos.column > end and column < row.get_width():
            column += 1
            start, end = row._span_of_column(column)
        offset = FocusOffset.LEADING if pos.column <= start else FocusOffset.TRAILING
        return Focus(row_index, column, offset)

    def position_of_focus(self, focus: Focus, row_offset: int) -> Point | None:
        """Compute the editor position of a focus in this table's text.

        Args:
            focus: Focus to locate
            row_offset: Editor row of the table's first row

        Returns:
            Start of the focused span for LEADING, its end otherwise (one
            character past the last pipe for the right margin); None if
            the focused row is outside the table
        """
        row = self.get_row_at(focus.row)
        if row is None:
            return None
        width = row.get_width()
        start, end = row._span_of_column(min(focus.column, width))
        if focus.offset == FocusOffset.LEADING:
            column = start
        elif focus.column >= width:
            column = min(start + 1, end)
        else:
            column = end
        return Point(focus.row + row_offset, column)

    def selection_range_of_focus(self, focus: Focus, row_offset: int) -> Range | None:
        """Compute the range covering the trimmed content of the focused cell.

        Returns:
            The content range, None if the focus addresses no cell or the
            cell's content is empty
        """
        row = self.get_row_at(focus.row)
        if row is None:
            return None
        cell = row.get_cell_at(focus.column)
        if cell is None or cell.content == "":
            return None
        start, _ = row._span_of_column(focus.column)
        content_start = start + cell.padding_left
        line = focus.row + row_offset
        return Range(
            Point(line, content_start),
            Point(line, content_start + len(cell.content)),
        )
