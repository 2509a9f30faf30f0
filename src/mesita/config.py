"""Option structs and ContextVar-based formatting defaults for Mesita.

Every operation takes its options explicitly; the formatter falls back to
the context-local FormatOptions when none are given. Options are frozen
dataclasses, so a single instance can be shared by every editor event
handler.

Thread Safety:
    ContextVars are thread-local by design. Each thread (and asyncio task)
    has independent storage, so no locks are needed.

Usage:
    # Explicit options
    from mesita import FormatOptions, format_table
    result = format_table(table, FormatOptions(min_delimiter_width=5))

    # Context-local default for a block of work
    with format_options_context(FormatOptions(min_delimiter_width=5)):
        result = format_table(table)

    # From host configuration (e.g. editor settings)
    options = FormatOptions.from_dict({
        "format_type": "weak",
        "text_width_options": {"ambiguous_as_wide": True},
    })

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from mesita.alignment import DefaultAlignment, HeaderAlignment


class FormatType(Enum):
    """Formatting policy.

    - NORMAL: align and pad every cell to its column width
    - WEAK: only normalize padding and regenerate the delimiter row

    """

    NORMAL = "normal"
    WEAK = "weak"


def _valid_keys(cls: type, data: Mapping[str, Any]) -> dict[str, Any]:
    # Only keys that are dataclass fields; unknown keys are silently ignored
    valid_fields = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in valid_fields}


def _chars(value: Iterable[str | int]) -> frozenset[str]:
    # A plain string means "each of these characters"; ints are code points
    return frozenset(chr(c) if isinstance(c, int) else c for c in value)


@dataclass(frozen=True, slots=True)
class TextWidthOptions:
    """Options for measuring display width.

    Attributes:
        normalize: Compose text to NFC before measuring, so a base
            character followed by a combining mark counts once
        wide_chars: Characters always measured as two columns
        narrow_chars: Characters always measured as one column
        ambiguous_as_wide: Measure East Asian Ambiguous characters as two
            columns (CJK terminals and fonts)

    """

    normalize: bool = False
    wide_chars: frozenset[str] = frozenset()
    narrow_chars: frozenset[str] = frozenset()
    ambiguous_as_wide: bool = False

    def __post_init__(self) -> None:
        # Keep the struct hashable: width results are memoised per options
        object.__setattr__(self, "wide_chars", _chars(self.wide_chars))
        object.__setattr__(self, "narrow_chars", _chars(self.narrow_chars))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> TextWidthOptions:
        """Create TextWidthOptions from a dictionary, ignoring unknown keys."""
        return cls(**_valid_keys(cls, config_dict))


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Options for reading table lines.

    Attributes:
        left_margin_chars: Characters besides whitespace that may appear
            before the first pipe and belong to the margin, e.g. ``">"``
            for tables inside block quotes

    """

    left_margin_chars: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "left_margin_chars", _chars(self.left_margin_chars))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> ParserOptions:
        """Create ParserOptions from a dictionary, ignoring unknown keys."""
        return cls(**_valid_keys(cls, config_dict))


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Options for completing, formatting and editing tables.

    Attributes:
        format_type: NORMAL or WEAK formatting
        min_delimiter_width: Minimum number of dashes in a delimiter cell
        default_alignment: Alignment of columns without an explicit one
        header_alignment: Alignment of header cells (FOLLOW = column's)
        text_width_options: How to measure cell content

    Enum fields also accept their string values, and text_width_options a
    mapping, so ``FormatOptions(format_type="weak")`` works as expected.

    """

    format_type: FormatType = FormatType.NORMAL
    min_delimiter_width: int = 3
    default_alignment: DefaultAlignment = DefaultAlignment.LEFT
    header_alignment: HeaderAlignment = HeaderAlignment.FOLLOW
    text_width_options: TextWidthOptions = field(default_factory=TextWidthOptions)

    def __post_init__(self) -> None:
        # Enum fields accept their string values; unknown strings raise ValueError
        if isinstance(self.format_type, str):
            object.__setattr__(self, "format_type", FormatType(self.format_type))
        if isinstance(self.default_alignment, str):
            object.__setattr__(self, "default_alignment", DefaultAlignment(self.default_alignment))
        if isinstance(self.header_alignment, str):
            object.__setattr__(self, "header_alignment", HeaderAlignment(self.header_alignment))
        if isinstance(self.text_width_options, Mapping):
            object.__setattr__(
                self, "text_width_options", TextWidthOptions.from_dict(self.text_width_options)
            )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> FormatOptions:
        """Create FormatOptions from a dictionary.

        Useful for host integration where settings come from an editor
        configuration. Enum fields accept their string values and
        ``text_width_options`` may itself be a dictionary. Unknown keys are
        silently ignored.

        Args:
            config_dict: Dictionary with option values. Keys should match
                FormatOptions attribute names.

        Returns:
            New FormatOptions instance with values from dict.

        Raises:
            ValueError: If an enum field holds an unknown value

        Example:
            >>> options = FormatOptions.from_dict({
            ...     "format_type": "weak",
            ...     "min_delimiter_width": 5,
            ...     "unknown_key": "ignored",
            ... })
            >>> options.format_type
            <FormatType.WEAK: 'weak'>

        """
        return cls(**_valid_keys(cls, config_dict))


# Module-level default options (reused, never recreated)
_DEFAULT_FORMAT_OPTIONS: FormatOptions = FormatOptions()

_format_options: ContextVar[FormatOptions] = ContextVar(
    "format_options",
    default=_DEFAULT_FORMAT_OPTIONS,
)


def get_format_options() -> FormatOptions:
    """Get the current context-local format options."""
    return _format_options.get()


def set_format_options(options: FormatOptions) -> None:
    """Set format options for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _format_options.set(options)


def reset_format_options() -> None:
    """Reset to the module-level default options."""
    _format_options.set(_DEFAULT_FORMAT_OPTIONS)


@contextmanager
def format_options_context(options: FormatOptions) -> Iterator[None]:
    """Context manager for temporary option changes.

    Args:
        options: FormatOptions to use within the context.

    Yields:
        None

    Example:
        >>> with format_options_context(FormatOptions(min_delimiter_width=5)):
        ...     get_format_options().min_delimiter_width
        5

    Thread Safety:
        Only affects the current thread's context. Properly restores the
        previous options even if an exception is raised.

    """
    previous = _format_options.get()
    _format_options.set(options)
    try:
        yield
    finally:
        _format_options.set(previous)


__all__ = [
    "FormatOptions",
    "FormatType",
    "ParserOptions",
    "TextWidthOptions",
    "format_options_context",
    "get_format_options",
    "reset_format_options",
    "set_format_options",
]
