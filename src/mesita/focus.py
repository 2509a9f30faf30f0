"""Logical cursor coordinates inside a table.

A Focus names a cell (row, column) and which of its two boundaries the
cursor sits on, rather than a character offset. Cell widths change when a
table is reformatted; boundaries do not, so a Focus taken before
formatting can be mapped back to text afterwards.

Column -1 addresses the left margin and a column equal to the row width
addresses the right margin.

Thread Safety:
Focus is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum


class FocusOffset(IntEnum):
    """Which boundary of the focused unit the cursor sits on."""

    # Immediately after the left delimiter
    LEADING = 0
    # Immediately before the right delimiter
    TRAILING = 1


@dataclass(frozen=True, slots=True)
class Focus:
    """A table-relative cursor position.

    Attributes:
        row: Row index in the table
        column: Column index in the row (-1 to row width)
        offset: Boundary within the focused unit

    Examples:
        >>> focus = Focus(2, 0, FocusOffset.TRAILING)
        >>> focus.set_column(1)
        Focus(row=2, column=1, offset=<FocusOffset.TRAILING: 1>)

    """

    row: int
    column: int
    offset: FocusOffset = FocusOffset.LEADING

    def pos_equals(self, focus: Focus) -> bool:
        """Check whether two focuses point the same cell, ignoring the offset."""
        return self.row == focus.row and self.column == focus.column

    def set_row(self, row: int) -> Focus:
        return replace(self, row=row)

    def set_column(self, column: int) -> Focus:
        return replace(self, column=column)

    def set_offset(self, offset: FocusOffset) -> Focus:
        return replace(self, offset=offset)
