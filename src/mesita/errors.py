"""Exception classes for Mesita.

Provides the precondition errors raised by the formatter and the width
engine. Parsing never raises: malformed lines degrade to single-cell rows,
and out-of-range structural edits return their input unchanged.
"""

from __future__ import annotations

from typing import Any


class MesitaError(Exception):
    """Base exception for all Mesita errors.

    Subclass this for specific error categories.
    """

    pass


class EmptyTableError(MesitaError):
    """Error when an operation needs a header row but the table has no rows."""

    def __init__(self, message: str = "Empty table") -> None:
        super().__init__(message)


class UnknownAlignmentError(MesitaError):
    """Error when an alignment value is not one of the known alignments.

    Attributes:
        alignment: The rejected value, as given by the caller
    """

    def __init__(self, alignment: Any) -> None:
        self.alignment = alignment
        super().__init__(f"Unknown alignment: {alignment!r}")


class UnexpectedAlignmentError(MesitaError):
    """Error when the unset alignment is given where a resolved one is required.

    The unset (default) alignment is only meaningful as a column's current
    alignment; text cannot be aligned "by default".

    Attributes:
        alignment: The rejected value
    """

    def __init__(self, alignment: Any) -> None:
        self.alignment = alignment
        super().__init__(f"Unexpected default alignment: {alignment!r}")


class UnknownFormatTypeError(MesitaError):
    """Error when a format type is neither NORMAL nor WEAK.

    Attributes:
        format_type: The rejected value
    """

    def __init__(self, format_type: Any) -> None:
        self.format_type = format_type
        super().__init__(f"Unknown format type: {format_type!r}")
