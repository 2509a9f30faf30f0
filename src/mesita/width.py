"""Unicode-aware text width and alignment for table cells.

Cell padding is counted in display columns, not characters: a CJK
ideograph occupies two columns in a monospace editor, a Latin letter one.
Widths follow the Unicode East Asian Width property (UAX #11):

    W, F  -> 2 columns
    A     -> 2 columns if ambiguous_as_wide, else 1
    other -> 1 column

Per-character overrides in TextWidthOptions take precedence over the
property.

Example:
    >>> compute_text_width("ℵAあＡｱ∀")
    8
    >>> compute_text_width("ℵAあＡｱ∀", TextWidthOptions(ambiguous_as_wide=True))
    9
    >>> pad_text(align_text("foo", 5, Alignment.RIGHT))
    '   foo '

Thread Safety:
    All functions are pure. The width cache is a functools.lru_cache,
    which is safe to share across threads.

"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Sequence
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar

from mesita.alignment import Alignment
from mesita.config import TextWidthOptions
from mesita.errors import UnexpectedAlignmentError, UnknownAlignmentError

T = TypeVar("T")

_DEFAULT_TEXT_WIDTH_OPTIONS = TextWidthOptions()

# East Asian Width classes measured as two columns
_WIDE_CLASSES = frozenset({"W", "F"})


def as_alignment(alignment: Any) -> Alignment:
    """Resolve an alignment-like value to an Alignment.

    Accepts Alignment members, members of the policy enums that share its
    values (DefaultAlignment, HeaderAlignment other than FOLLOW) and their
    plain string values.

    Raises:
        UnknownAlignmentError: If the value names no column alignment
    """
    if isinstance(alignment, Alignment):
        return alignment
    value = alignment.value if isinstance(alignment, Enum) else alignment
    try:
        return Alignment(value)
    except ValueError:
        raise UnknownAlignmentError(alignment) from None


@lru_cache(maxsize=4096)
def _cached_text_width(text: str, options: TextWidthOptions) -> int:
    if options.normalize:
        text = unicodedata.normalize("NFC", text)
    width = 0
    for char in text:
        if char in options.wide_chars:
            width += 2
        elif char in options.narrow_chars:
            width += 1
        else:
            eaw = unicodedata.east_asian_width(char)
            if eaw in _WIDE_CLASSES or (eaw == "A" and options.ambiguous_as_wide):
                width += 2
            else:
                width += 1
    return width


def compute_text_width(text: str, options: TextWidthOptions | None = None) -> int:
    """Compute the display width of text.

    Args:
        text: Text to measure
        options: Measurement options (defaults to TextWidthOptions())

    Returns:
        Number of display columns, 0 for empty text
    """
    if not text:
        return 0
    return _cached_text_width(text, options or _DEFAULT_TEXT_WIDTH_OPTIONS)


def align_text(
    text: str,
    width: int,
    alignment: Alignment | Any,
    options: TextWidthOptions | None = None,
) -> str:
    """Pad text with spaces to fill at least ``width`` display columns.

    Text already at least ``width`` columns wide is returned unchanged; it
    is never truncated. CENTER puts the extra space on the right when the
    padding is odd.

    Args:
        text: Text to align
        width: Target width in display columns
        alignment: LEFT, RIGHT or CENTER
        options: Measurement options

    Returns:
        The padded text

    Raises:
        UnexpectedAlignmentError: If alignment is DEFAULT
        UnknownAlignmentError: If alignment is not an alignment at all
    """
    resolved = as_alignment(alignment)
    if resolved is Alignment.DEFAULT:
        raise UnexpectedAlignmentError(alignment)
    space = width - compute_text_width(text, options)
    if space <= 0:
        return text
    match resolved:
        case Alignment.LEFT:
            return text + " " * space
        case Alignment.RIGHT:
            return " " * space + text
        case Alignment.CENTER:
            left = space // 2
            return " " * left + text + " " * (space - left)
    raise UnknownAlignmentError(alignment)


def pad_text(text: str) -> str:
    """Wrap text with one space on each side."""
    return f" {text} "


def delimiter_text(alignment: Alignment | Any, width: int) -> str:
    """Render a delimiter cell.

    Args:
        alignment: Column alignment (DEFAULT renders no colons)
        width: Number of dashes

    Returns:
        ``width`` dashes with one character on each side: a colon marking
        the aligned side(s), a space otherwise

    Raises:
        UnknownAlignmentError: If alignment is not an alignment at all

    Example:
        >>> delimiter_text(Alignment.CENTER, 5)
        ':-----:'
    """
    bar = "-" * width
    match as_alignment(alignment):
        case Alignment.DEFAULT:
            return f" {bar} "
        case Alignment.LEFT:
            return f":{bar} "
        case Alignment.RIGHT:
            return f" {bar}:"
        case Alignment.CENTER:
            return f":{bar}:"
    raise UnknownAlignmentError(alignment)


def extend_array(seq: Sequence[T], size: int, factory: Callable[[int], T]) -> list[T]:
    """Extend a sequence to ``size`` elements.

    Args:
        seq: Source sequence (not modified)
        size: Minimum length of the result
        factory: Called with each missing index to create its element

    Returns:
        A new list; a plain copy of seq if it already has ``size`` elements
    """
    extended = list(seq)
    for i in range(len(seq), size):
        extended.append(factory(i))
    return extended
