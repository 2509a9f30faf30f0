"""One-call reformatting with cursor remapping.

Packages the cursor contract an editor follows around a reformat:

1. Read the table lines and capture the cursor as a Focus.
2. Complete the table (delimiter row, equal column counts).
3. Format it.
4. Map the Focus back to a position in the new text.

The Focus names a cell boundary rather than a character offset, so the
cursor stays at the same side of the same cell however much the cell's
padding changes.

Example:
    >>> from mesita import Point
    >>> result = reformat_lines(["| a | bc |", "| x |"], Point(1, 4))
    >>> result.lines
    ['| a   | bc  |', '| --- | --- |', '| x   |     |']
    >>> result.cursor
    Point(row=2, column=6)

Thread Safety:
    ``reformat_lines`` is a pure function and safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mesita.config import FormatOptions, ParserOptions, get_format_options
from mesita.formatter import complete_table, format_table
from mesita.location import Point
from mesita.parser import read_table
from mesita.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Reformatted:
    """Result of reformat_lines.

    Attributes:
        lines: The reformatted table lines
        cursor: The remapped cursor, None if no cursor was given or it was
            outside the table
        margin_left: The left margin shared by every row
        delimiter_inserted: Whether a delimiter row was added, making the
            result one line longer than the input
    """

    lines: list[str]
    cursor: Point | None
    margin_left: str
    delimiter_inserted: bool


def reformat_lines(
    lines: Sequence[str],
    cursor: Point | None = None,
    *,
    row_offset: int = 0,
    parser_options: ParserOptions | None = None,
    options: FormatOptions | None = None,
) -> Reformatted:
    """Complete and format table lines, remapping the cursor.

    Args:
        lines: Raw table lines
        cursor: Editor position to remap (optional)
        row_offset: Editor row of the first table line
        parser_options: Options for reading the lines
        options: Format options (defaults to the context-local options)

    Returns:
        Reformatted lines, cursor and margin

    Raises:
        UnknownFormatTypeError: If the format type is not NORMAL or WEAK
    """
    options = options or get_format_options()
    table = read_table(lines, parser_options)
    if table.get_height() == 0:
        return Reformatted([], None, "", False)

    focus = table.focus_of_position(cursor, row_offset) if cursor is not None else None
    if table.get_header_width() == 0:
        # Not a table yet: leave the text and the cursor alone
        logger.debug("Header has no cells, %d lines left unchanged", table.get_height())
        return Reformatted(
            list(lines),
            cursor if focus is not None else None,
            table.rows[0].margin_left,
            False,
        )
    completed = complete_table(table, options)
    formatted = format_table(completed.table, options)

    new_cursor = None
    if focus is not None:
        if completed.delimiter_inserted and focus.row >= 1:
            focus = focus.set_row(focus.row + 1)
        new_cursor = formatted.table.position_of_focus(focus, row_offset)

    logger.debug(
        "Reformatted %d-row table (delimiter inserted: %s)",
        formatted.table.get_height(),
        completed.delimiter_inserted,
    )
    return Reformatted(
        formatted.table.to_lines(),
        new_cursor,
        formatted.margin_left,
        completed.delimiter_inserted,
    )
