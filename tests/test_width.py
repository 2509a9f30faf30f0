"""Tests for display width, alignment and padding helpers."""

import pytest

from mesita import (
    Alignment,
    DefaultAlignment,
    HeaderAlignment,
    TextWidthOptions,
    UnexpectedAlignmentError,
    UnknownAlignmentError,
    align_text,
    compute_text_width,
    delimiter_text,
    extend_array,
    pad_text,
)
from mesita.width import as_alignment


class TestComputeTextWidth:
    """East Asian Width based measurement."""

    def test_empty(self) -> None:
        assert compute_text_width("") == 0

    def test_ascii(self) -> None:
        assert compute_text_width("foo bar") == 7

    def test_mixed_widths(self) -> None:
        """Neutral, narrow, wide, fullwidth, halfwidth and ambiguous characters."""
        assert compute_text_width("ℵAあＡｱ∀") == 8

    def test_ambiguous_as_wide(self) -> None:
        options = TextWidthOptions(ambiguous_as_wide=True)
        assert compute_text_width("ℵAあＡｱ∀", options) == 9

    def test_wide_chars_override(self) -> None:
        options = TextWidthOptions(wide_chars=frozenset("∀"))
        assert compute_text_width("∀", options) == 2
        assert compute_text_width("ℵAあＡｱ∀", options) == 9

    def test_narrow_chars_override(self) -> None:
        options = TextWidthOptions(narrow_chars=frozenset("あ"))
        assert compute_text_width("あい", options) == 3

    def test_narrow_chars_override_ambiguous_as_wide(self) -> None:
        options = TextWidthOptions(narrow_chars=frozenset("∀"), ambiguous_as_wide=True)
        assert compute_text_width("ℵAあＡｱ∀", options) == 8

    def test_wide_chars_take_precedence(self) -> None:
        options = TextWidthOptions(wide_chars=frozenset("a"), narrow_chars=frozenset("a"))
        assert compute_text_width("a", options) == 2

    def test_code_points_are_accepted(self) -> None:
        options = TextWidthOptions(wide_chars=[0x2200])
        assert compute_text_width("∀", options) == 2

    def test_normalize(self) -> None:
        decomposed = "e\u0301"
        assert compute_text_width(decomposed) == 2
        assert compute_text_width(decomposed, TextWidthOptions(normalize=True)) == 1

    def test_default_options(self) -> None:
        assert compute_text_width("あ", None) == compute_text_width("あ", TextWidthOptions())


class TestAsAlignment:
    """Resolving alignment-like values."""

    def test_alignment_passes_through(self) -> None:
        assert as_alignment(Alignment.CENTER) is Alignment.CENTER

    def test_policy_enums(self) -> None:
        assert as_alignment(DefaultAlignment.RIGHT) is Alignment.RIGHT
        assert as_alignment(HeaderAlignment.LEFT) is Alignment.LEFT

    def test_strings(self) -> None:
        assert as_alignment("center") is Alignment.CENTER
        assert as_alignment("default") is Alignment.DEFAULT

    def test_none_is_default(self) -> None:
        assert Alignment.NONE is Alignment.DEFAULT

    def test_follow_is_not_an_alignment(self) -> None:
        with pytest.raises(UnknownAlignmentError):
            as_alignment(HeaderAlignment.FOLLOW)

    def test_unknown(self) -> None:
        with pytest.raises(UnknownAlignmentError) as exc_info:
            as_alignment("justify")
        assert exc_info.value.alignment == "justify"


class TestAlignText:
    """Padding text to a width."""

    @pytest.mark.parametrize(
        ("alignment", "width", "expected"),
        [
            (Alignment.LEFT, 5, "foo  "),
            (Alignment.RIGHT, 5, "  foo"),
            (Alignment.CENTER, 5, " foo "),
            (Alignment.CENTER, 6, " foo  "),
            (Alignment.LEFT, 3, "foo"),
            (Alignment.RIGHT, 2, "foo"),
            (Alignment.CENTER, 0, "foo"),
        ],
    )
    def test_alignments(self, alignment: Alignment, width: int, expected: str) -> None:
        assert align_text("foo", width, alignment) == expected

    def test_wide_text(self) -> None:
        assert align_text("あ", 4, Alignment.LEFT) == "あ  "
        assert align_text("あい", 5, Alignment.RIGHT) == " あい"

    def test_ambiguous_as_wide(self) -> None:
        options = TextWidthOptions(ambiguous_as_wide=True)
        assert align_text("∀", 3, Alignment.LEFT) == "∀  "
        assert align_text("∀", 3, Alignment.LEFT, options) == "∀ "

    def test_policy_values(self) -> None:
        assert align_text("a", 3, DefaultAlignment.RIGHT) == "  a"
        assert align_text("a", 3, "center") == " a "

    def test_default_is_unexpected(self) -> None:
        with pytest.raises(UnexpectedAlignmentError):
            align_text("foo", 5, Alignment.DEFAULT)

    def test_unknown_alignment(self) -> None:
        with pytest.raises(UnknownAlignmentError):
            align_text("foo", 5, "justify")


class TestPadAndDelimiterText:
    """Cell padding and delimiter rendering."""

    def test_pad_text(self) -> None:
        assert pad_text("foo") == " foo "
        assert pad_text("") == "  "

    @pytest.mark.parametrize(
        ("alignment", "expected"),
        [
            (Alignment.DEFAULT, " --- "),
            (Alignment.LEFT, ":--- "),
            (Alignment.RIGHT, " ---:"),
            (Alignment.CENTER, ":---:"),
        ],
    )
    def test_delimiter_text(self, alignment: Alignment, expected: str) -> None:
        assert delimiter_text(alignment, 3) == expected

    def test_delimiter_text_width(self) -> None:
        assert delimiter_text(Alignment.CENTER, 5) == ":-----:"
        assert delimiter_text(Alignment.DEFAULT, 1) == " - "

    def test_delimiter_text_unknown_alignment(self) -> None:
        with pytest.raises(UnknownAlignmentError):
            delimiter_text("justify", 3)


class TestExtendArray:
    """Sequence extension."""

    def test_extends_with_factory(self) -> None:
        assert extend_array([1, 2], 4, lambda i: i * 10) == [1, 2, 20, 30]

    def test_source_is_not_modified(self) -> None:
        source = [1, 2]
        extended = extend_array(source, 3, lambda i: 0)
        assert source == [1, 2]
        assert extended is not source

    def test_already_long_enough(self) -> None:
        source = (1, 2, 3)
        assert extend_array(source, 2, lambda i: 0) == [1, 2, 3]

    def test_empty(self) -> None:
        assert extend_array([], 2, lambda i: "x") == ["x", "x"]
