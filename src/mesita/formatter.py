"""Table completion, formatting and structural editing.

Every function here is pure: it takes a Table and returns a new Table (or
a small result record), sharing unchanged rows with its input. Edits that
cannot apply, such as out-of-range indices, are soft no-ops. They return
the input instance itself, so callers can detect them with ``is``.

Row layout assumed by the editing operations:

    row 0   header      (can be blanked, never removed or moved)
    row 1   delimiter   (never removed or moved)
    row 2+  body        (freely inserted, removed and moved)

Formatting:
    NORMAL  every cell padded to its column width and aligned
    WEAK    cells padded by one space only; delimiter row regenerated

    >>> from mesita import read_table
    >>> table = read_table(["| A | B |", "|:-|-:|", "| long | x |"])
    >>> format_table(table).table.to_lines()
    ['| A    |   B |', '|:---- | ---:|', '| long |   x |']

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from mesita.alignment import Alignment, HeaderAlignment
from mesita.config import FormatOptions, FormatType, get_format_options
from mesita.errors import EmptyTableError, UnknownFormatTypeError
from mesita.nodes import Table, TableCell, TableRow
from mesita.utils.logger import get_logger
from mesita.width import (
    align_text,
    as_alignment,
    delimiter_text,
    extend_array,
    pad_text,
)

logger = get_logger(__name__)

_EMPTY_CELL = TableCell("")

# First row index that may be inserted, deleted or moved freely
_BODY_START = 2


@dataclass(frozen=True, slots=True)
class CompletedTable:
    """Result of complete_table.

    Attributes:
        table: The completed table
        delimiter_inserted: Whether a delimiter row was added after row 0
    """

    table: Table
    delimiter_inserted: bool


@dataclass(frozen=True, slots=True)
class FormattedTable:
    """Result of format_table.

    Attributes:
        table: The formatted table
        margin_left: The left margin now shared by every row
    """

    table: Table
    margin_left: str


def _default_delimiter_cell(width: int) -> TableCell:
    return TableCell(delimiter_text(Alignment.DEFAULT, width))


# =============================================================================
# Completion
# =============================================================================


def _complete_row(row: TableRow, width: int, filler: Callable[[int], TableCell]) -> TableRow:
    # The first added cell takes over the right margin: spaces typed after
    # the last pipe become the new cell's text.
    cells = row.cells
    if len(cells) >= width:
        return row
    return TableRow(
        tuple(extend_array(cells, width, filler)),
        row.margin_left,
        "",
    )


def complete_table(table: Table, options: FormatOptions | None = None) -> CompletedTable:
    """Complete a table by adding the missing delimiter row and cells.

    Every row is extended to the widest row's width. A missing delimiter
    row is inserted after the header with DEFAULT alignment.

    Args:
        table: Table to complete
        options: Uses ``min_delimiter_width``

    Returns:
        CompletedTable with the new table and whether a delimiter row was
        inserted

    Raises:
        EmptyTableError: If the table has no rows
    """
    options = options or get_format_options()
    if table.get_height() == 0:
        raise EmptyTableError()
    width = table.get_width()
    min_width = options.min_delimiter_width
    rows = table.get_rows()
    delimiter_row = table.get_delimiter_row()

    def content_filler(row: TableRow) -> Callable[[int], TableCell]:
        n = row.get_width()
        return lambda j: TableCell(row.margin_right if j == n else "")

    completed = [_complete_row(rows[0], width, content_filler(rows[0]))]
    if delimiter_row is not None:
        n = delimiter_row.get_width()
        # Trailing spaces after the last delimiter pipe widen the first new cell
        first_width = max(min_width, len(delimiter_row.margin_right) - 2)
        completed.append(
            _complete_row(
                delimiter_row,
                width,
                lambda j: _default_delimiter_cell(first_width if j == n else min_width),
            )
        )
    else:
        completed.append(
            TableRow(tuple(_default_delimiter_cell(min_width) for _ in range(width)), "", "")
        )
        logger.debug("Inserted delimiter row into %d-column table", width)
    body_start = 2 if delimiter_row is not None else 1
    for row in rows[body_start:]:
        completed.append(_complete_row(row, width, content_filler(row)))

    return CompletedTable(Table(tuple(completed)), delimiter_row is None)


# =============================================================================
# Formatting
# =============================================================================


def _collapse_margins(table: Table, margin_left: str) -> FormattedTable:
    # Header without cells: every row becomes a bare margin
    blank = TableRow((), margin_left, "")
    return FormattedTable(Table(tuple(blank for _ in table.rows)), margin_left)


def _column_alignments(table: Table, width: int, options: FormatOptions) -> list[Alignment]:
    delimiter_row = table.get_delimiter_row()
    declared: list[Alignment] = []
    if delimiter_row is not None:
        declared = [cell.get_alignment() or Alignment.DEFAULT for cell in delimiter_row.cells]
    default = as_alignment(options.default_alignment)
    return [
        default if alignment is Alignment.DEFAULT else alignment
        for alignment in extend_array(declared, width, lambda _: Alignment.DEFAULT)
    ]


def _format_table(table: Table, options: FormatOptions) -> FormattedTable:
    """Format a table, padding and aligning every cell to its column width."""
    if table.get_height() == 0:
        return FormattedTable(table, "")
    margin_left = table.rows[0].margin_left
    if table.get_header_width() == 0:
        return _collapse_margins(table, margin_left)

    delimiter_row = table.get_delimiter_row()
    width = table.get_width()
    tw_options = options.text_width_options

    column_widths = [0] * width
    if delimiter_row is not None:
        for j in range(delimiter_row.get_width()):
            column_widths[j] = options.min_delimiter_width
    for i, row in enumerate(table.rows):
        if delimiter_row is not None and i == 1:
            continue
        for j, cell in enumerate(row.cells):
            column_widths[j] = max(column_widths[j], cell.compute_width(tw_options))

    alignments = _column_alignments(table, width, options)
    header_alignment = options.header_alignment

    def format_cells(row: TableRow, header: bool) -> tuple[TableCell, ...]:
        cells = []
        for j, cell in enumerate(row.cells):
            alignment = alignments[j]
            if header and header_alignment is not HeaderAlignment.FOLLOW:
                alignment = as_alignment(header_alignment)
            text = align_text(cell.content, column_widths[j], alignment, tw_options)
            cells.append(TableCell(pad_text(text)))
        return tuple(cells)

    rows = [TableRow(format_cells(table.rows[0], True), margin_left, "")]
    if delimiter_row is not None:
        declared = [cell.get_alignment() or Alignment.DEFAULT for cell in delimiter_row.cells]
        rows.append(
            TableRow(
                tuple(
                    TableCell(delimiter_text(alignment, column_widths[j]))
                    for j, alignment in enumerate(declared)
                ),
                margin_left,
                "",
            )
        )
    body_start = 2 if delimiter_row is not None else 1
    for row in table.rows[body_start:]:
        rows.append(TableRow(format_cells(row, False), margin_left, ""))

    return FormattedTable(Table(tuple(rows)), margin_left)


def _weak_format_table(table: Table, options: FormatOptions) -> FormattedTable:
    """Format a table without aligning cells.

    Cells keep their content with one space of padding; only the delimiter
    row is rebuilt, with ``min_delimiter_width`` dashes per cell.
    """
    if table.get_height() == 0:
        return FormattedTable(table, "")
    margin_left = table.rows[0].margin_left
    if table.get_header_width() == 0:
        return _collapse_margins(table, margin_left)

    delimiter_row = table.get_delimiter_row()
    rows = []
    for i, row in enumerate(table.rows):
        if delimiter_row is not None and i == 1:
            cells = tuple(
                TableCell(
                    delimiter_text(
                        cell.get_alignment() or Alignment.DEFAULT,
                        options.min_delimiter_width,
                    )
                )
                for cell in row.cells
            )
        else:
            cells = tuple(TableCell(pad_text(cell.content)) for cell in row.cells)
        rows.append(TableRow(cells, margin_left, ""))

    return FormattedTable(Table(tuple(rows)), margin_left)


def format_table(table: Table, options: FormatOptions | None = None) -> FormattedTable:
    """Format a table.

    The table is formatted as it stands; run complete_table first to get a
    delimiter row and equal column counts. Every row takes the header's
    left margin and loses its right margin.

    Args:
        table: Table to format
        options: Format options; ``format_type`` selects NORMAL or WEAK

    Returns:
        FormattedTable with the new table and the shared left margin

    Raises:
        UnknownFormatTypeError: If the format type is not NORMAL or WEAK
        UnexpectedAlignmentError: If the default alignment is DEFAULT
    """
    options = options or get_format_options()
    match options.format_type:
        case FormatType.NORMAL:
            return _format_table(table, options)
        case FormatType.WEAK:
            return _weak_format_table(table, options)
    raise UnknownFormatTypeError(options.format_type)


# =============================================================================
# Alignment
# =============================================================================


def alter_alignment(
    table: Table,
    column_index: int,
    alignment: Alignment,
    options: FormatOptions | None = None,
) -> Table:
    """Change the alignment of a column by rewriting its delimiter cell.

    The new delimiter cell has ``min_delimiter_width`` dashes.

    Returns:
        A new table, or the input table itself if it has no delimiter row
        or the column is outside the header
    """
    options = options or get_format_options()
    delimiter_row = table.get_delimiter_row()
    header_width = table.get_header_width() or 0
    if delimiter_row is None or not 0 <= column_index < header_width:
        logger.debug("Alignment of column %d left unchanged", column_index)
        return table
    cells = extend_array(
        delimiter_row.cells,
        header_width,
        lambda _: _default_delimiter_cell(options.min_delimiter_width),
    )
    cells[column_index] = TableCell(delimiter_text(alignment, options.min_delimiter_width))
    rows = table.get_rows()
    rows[1] = TableRow(tuple(cells), delimiter_row.margin_left, delimiter_row.margin_right)
    return Table(tuple(rows))


# =============================================================================
# Rows
# =============================================================================


def insert_row(table: Table, row_index: int, row: TableRow) -> Table:
    """Insert a row.

    The header and delimiter rows stay in place, so the index is clamped to
    the body: ``[2, height]``.
    """
    rows = table.get_rows()
    rows.insert(min(max(row_index, _BODY_START), len(rows)), row)
    return Table(tuple(rows))


def delete_row(table: Table, row_index: int) -> Table:
    """Delete a row.

    Deleting the header blanks its cells instead of removing it; the
    delimiter row cannot be deleted.

    Returns:
        A new table, or the input table itself if nothing was deleted
    """
    if not 0 <= row_index < table.get_height() or row_index == 1:
        logger.debug("Row %d not deleted", row_index)
        return table
    rows = table.get_rows()
    if row_index == 0:
        header = rows[0]
        rows[0] = TableRow(
            tuple(_EMPTY_CELL for _ in header.cells),
            header.margin_left,
            header.margin_right,
        )
    else:
        del rows[row_index]
    return Table(tuple(rows))


def move_row(table: Table, row_index: int, dest_index: int) -> Table:
    """Move a body row to another body position.

    Returns:
        A new table, or the input table itself if either index is outside
        the body or the indices are equal
    """
    height = table.get_height()
    if (
        row_index == dest_index
        or not _BODY_START <= row_index < height
        or not _BODY_START <= dest_index < height
    ):
        return table
    rows = table.get_rows()
    row = rows.pop(row_index)
    rows.insert(dest_index, row)
    return Table(tuple(rows))


# =============================================================================
# Columns
# =============================================================================


def insert_column(
    table: Table,
    column_index: int,
    column: Sequence[TableCell],
    options: FormatOptions | None = None,
) -> Table:
    """Insert a column.

    Args:
        table: Table to edit
        column_index: Position of the new column, ``0..width``
        column: Cells for every row except the delimiter row, top to
            bottom; missing cells are empty
        options: Uses ``min_delimiter_width`` for the new delimiter cell

    Returns:
        A new table, or the input table itself if the index is out of range
    """
    options = options or get_format_options()
    if not 0 <= column_index <= table.get_width():
        return table
    has_delimiter = table.get_delimiter_row() is not None
    supplied = iter(column)
    rows = []
    for i, row in enumerate(table.rows):
        if has_delimiter and i == 1:
            cell = _default_delimiter_cell(options.min_delimiter_width)
        else:
            cell = next(supplied, _EMPTY_CELL)
        cells = extend_array(row.cells, column_index, lambda _: _EMPTY_CELL)
        cells.insert(column_index, cell)
        rows.append(TableRow(tuple(cells), row.margin_left, row.margin_right))
    return Table(tuple(rows))


def delete_column(
    table: Table,
    column_index: int,
    options: FormatOptions | None = None,
) -> Table:
    """Delete a column.

    A row never loses its last cell: it keeps an empty one (a DEFAULT
    delimiter cell in the delimiter row).

    Returns:
        A new table, or the input table itself if the index is out of range
    """
    options = options or get_format_options()
    if not 0 <= column_index < table.get_width():
        return table
    has_delimiter = table.get_delimiter_row() is not None
    rows = []
    for i, row in enumerate(table.rows):
        if column_index >= row.get_width():
            rows.append(row)
            continue
        if row.get_width() <= 1:
            if has_delimiter and i == 1:
                cells = (_default_delimiter_cell(options.min_delimiter_width),)
            else:
                cells = (_EMPTY_CELL,)
        else:
            cells = row.cells[:column_index] + row.cells[column_index + 1 :]
        rows.append(TableRow(cells, row.margin_left, row.margin_right))
    return Table(tuple(rows))


def move_column(table: Table, column_index: int, dest_index: int) -> Table:
    """Move a column to another position in every row.

    Returns:
        A new table, or the input table itself if the indices are equal or
        either is out of range
    """
    width = table.get_width()
    if column_index == dest_index or not 0 <= column_index < width or not 0 <= dest_index < width:
        return table
    size = max(column_index, dest_index) + 1
    rows = []
    for row in table.rows:
        cells = extend_array(row.cells, size, lambda _: _EMPTY_CELL)
        cells.insert(dest_index, cells.pop(column_index))
        rows.append(TableRow(tuple(cells), row.margin_left, row.margin_right))
    return Table(tuple(rows))


__all__ = [
    "CompletedTable",
    "FormattedTable",
    "alter_alignment",
    "complete_table",
    "delete_column",
    "delete_row",
    "format_table",
    "insert_column",
    "insert_row",
    "move_column",
    "move_row",
]
