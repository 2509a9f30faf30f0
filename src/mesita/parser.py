"""Line parser for pipe-delimited tables.

Reads raw editor lines into TableRow/Table values. The grammar is
forgiving: a line is always a row. Whatever the text looks like, it
degrades to fewer, larger cells instead of failing; structural rules are
enforced later by complete_table.

Row structure:
    "  | A | B |  "
     ^^           margin_left  (whitespace or left-margin characters)
       ^^^^^^^^^  cells " A ", " B "
                ^^ margin_right (whitespace)

Pipes do not split cells when escaped (``\\|``) or inside a code span
(```a|b```), matching how Markdown renderers read table rows.

Example:
    >>> row = read_row("  | A | B |  ")
    >>> [cell.content for cell in row.cells], row.margin_left
    (['A', 'B'], '  ')

Thread Safety:
    All functions are pure. Compiled margin patterns are cached.

"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from mesita.config import ParserOptions
from mesita.nodes import Table, TableCell, TableRow

_BLANK_PATTERN = re.compile(r"\s*")

# Characters that can never be margin: they are table syntax
_SYNTAX_CHARS = frozenset("|\\`")


@lru_cache(maxsize=64)
def margin_pattern(chars: frozenset[str] = frozenset()) -> re.Pattern[str]:
    """Compile the pattern matching a left margin.

    Args:
        chars: Characters allowed in the margin besides whitespace

    Returns:
        Pattern to be used with ``fullmatch``
    """
    escaped = "".join(re.escape(c) for c in sorted(chars) if c not in _SYNTAX_CHARS)
    return re.compile(rf"[\s{escaped}]*")


def _read_code_span(text: str, pos: int) -> int:
    # End of the code span opened at pos, or -1 if the backtick run is unclosed
    opener_end = pos
    while opener_end < len(text) and text[opener_end] == "`":
        opener_end += 1
    size = opener_end - pos
    i = opener_end
    while i < len(text):
        if text[i] == "`":
            run_end = i
            while run_end < len(text) and text[run_end] == "`":
                run_end += 1
            if run_end - i == size:
                return run_end
            i = run_end
        else:
            i += 1
    return -1


def split_cells(text: str) -> list[str]:
    """Split a line on unescaped pipes outside code spans.

    Escapes and code spans are kept verbatim in the cell text.

    Returns:
        The segments between pipes; always at least one
    """
    cells: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "`":
            end = _read_code_span(text, i)
            if end == -1:
                # Unclosed: a literal backtick
                current.append(char)
                i += 1
            else:
                current.append(text[i:end])
                i = end
        elif char == "\\":
            # Escape the next character (a trailing backslash stays literal)
            current.append(text[i : i + 2])
            i += 2
        elif char == "|":
            cells.append("".join(current))
            current = []
            i += 1
        else:
            current.append(char)
            i += 1
    cells.append("".join(current))
    return cells


def read_row(text: str, left_margin: re.Pattern[str] | None = None) -> TableRow:
    """Read one line as a table row.

    Args:
        text: The line, without its line terminator
        left_margin: Pattern for the left margin (defaults to whitespace)

    Returns:
        The row. A line without pipes is a single cell, or no cells at all
        if the line is blank.
    """
    if left_margin is None:
        left_margin = margin_pattern()
    cells = split_cells(text)

    margin_left = ""
    if left_margin.fullmatch(cells[0]):
        margin_left = cells.pop(0)

    margin_right = ""
    if len(cells) > 1 and _BLANK_PATTERN.fullmatch(cells[-1]):
        margin_right = cells.pop()

    return TableRow(tuple(TableCell(cell) for cell in cells), margin_left, margin_right)


def read_table(lines: Iterable[str], options: ParserOptions | None = None) -> Table:
    """Read lines as a table, one row per line.

    Never fails; an empty input yields an empty table.

    Args:
        lines: Raw lines of the table
        options: Parser options (left margin characters)

    Returns:
        The table, as ragged as its lines
    """
    options = options or ParserOptions()
    left_margin = margin_pattern(options.left_margin_chars)
    return Table(tuple(read_row(line, left_margin) for line in lines))
