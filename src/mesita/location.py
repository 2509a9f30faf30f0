"""Raw text coordinates for cursor and selection tracking.

Provides Point and Range, the editor-facing coordinates that Table maps to
and from logical Focus positions.

Both are zero-based: ``row`` is a line index in the editor buffer and
``column`` is a character index into that line.

Thread Safety:
Point and Range are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A position in the text editor.

    Attributes:
        row: Line index (0-indexed)
        column: Character index within the line (0-indexed)

    Examples:
        >>> Point(1, 4)
        Point(row=1, column=4)

    """

    row: int
    column: int

    def equals(self, point: Point) -> bool:
        """Check whether two points address the same position."""
        return self.row == point.row and self.column == point.column


@dataclass(frozen=True, slots=True)
class Range:
    """A span of text between two points.

    Attributes:
        start: First position (inclusive)
        end: Last position (exclusive)

    """

    start: Point
    end: Point
