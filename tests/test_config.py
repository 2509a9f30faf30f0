"""Tests for option structs and ContextVar-based format options.

Validates defaults, dictionary loading, context manager behavior and
thread isolation.
"""

import dataclasses
from threading import Thread

import pytest

from mesita import (
    DefaultAlignment,
    FormatOptions,
    FormatType,
    HeaderAlignment,
    ParserOptions,
    TextWidthOptions,
    format_options_context,
    get_format_options,
    read_table,
    reset_format_options,
    set_format_options,
)
from mesita.formatter import complete_table


class TestOptionDataclasses:
    """Test frozen option dataclasses."""

    def test_format_defaults(self) -> None:
        options = FormatOptions()
        assert options.format_type is FormatType.NORMAL
        assert options.min_delimiter_width == 3
        assert options.default_alignment is DefaultAlignment.LEFT
        assert options.header_alignment is HeaderAlignment.FOLLOW
        assert options.text_width_options == TextWidthOptions()

    def test_text_width_defaults(self) -> None:
        options = TextWidthOptions()
        assert options.normalize is False
        assert options.wide_chars == frozenset()
        assert options.narrow_chars == frozenset()
        assert options.ambiguous_as_wide is False

    def test_parser_defaults(self) -> None:
        assert ParserOptions().left_margin_chars == frozenset()

    def test_immutability(self) -> None:
        options = FormatOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.min_delimiter_width = 5  # type: ignore[misc]

    def test_enum_strings_are_coerced(self) -> None:
        options = FormatOptions(
            format_type="weak",  # type: ignore[arg-type]
            default_alignment="right",  # type: ignore[arg-type]
            header_alignment="follow",  # type: ignore[arg-type]
            text_width_options={"ambiguous_as_wide": True},  # type: ignore[arg-type]
        )
        assert options.format_type is FormatType.WEAK
        assert options.default_alignment is DefaultAlignment.RIGHT
        assert options.header_alignment is HeaderAlignment.FOLLOW
        assert options.text_width_options == TextWidthOptions(ambiguous_as_wide=True)
        assert options == FormatOptions.from_dict(
            {
                "format_type": "weak",
                "default_alignment": "right",
                "text_width_options": {"ambiguous_as_wide": True},
            }
        )

    def test_unknown_enum_string(self) -> None:
        with pytest.raises(ValueError):
            FormatOptions(format_type="fancy")  # type: ignore[arg-type]

    def test_chars_are_coerced(self) -> None:
        options = TextWidthOptions(wide_chars="ab", narrow_chars=[0x3042])
        assert options.wide_chars == frozenset({"a", "b"})
        assert options.narrow_chars == frozenset({"あ"})

    def test_options_are_hashable(self) -> None:
        a = TextWidthOptions(wide_chars=["x"])
        b = TextWidthOptions(wide_chars=frozenset("x"))
        assert a == b
        assert hash(a) == hash(b)
        assert hash(FormatOptions(text_width_options=a)) == hash(
            FormatOptions(text_width_options=b)
        )


class TestFromDict:
    """Test loading options from host settings."""

    def test_empty_dict_gives_defaults(self) -> None:
        assert FormatOptions.from_dict({}) == FormatOptions()

    def test_enum_values(self) -> None:
        options = FormatOptions.from_dict(
            {
                "format_type": "weak",
                "default_alignment": "center",
                "header_alignment": "right",
                "min_delimiter_width": 5,
            }
        )
        assert options.format_type is FormatType.WEAK
        assert options.default_alignment is DefaultAlignment.CENTER
        assert options.header_alignment is HeaderAlignment.RIGHT
        assert options.min_delimiter_width == 5

    def test_enum_members_pass_through(self) -> None:
        options = FormatOptions.from_dict({"format_type": FormatType.WEAK})
        assert options.format_type is FormatType.WEAK

    def test_nested_text_width_options(self) -> None:
        options = FormatOptions.from_dict(
            {"text_width_options": {"ambiguous_as_wide": True, "wide_chars": "∀", "bogus": 1}}
        )
        assert options.text_width_options.ambiguous_as_wide is True
        assert options.text_width_options.wide_chars == frozenset("∀")

    def test_unknown_keys_ignored(self) -> None:
        options = FormatOptions.from_dict({"unknown_key": "ignored", "min_delimiter_width": 4})
        assert options.min_delimiter_width == 4

    def test_invalid_enum_value(self) -> None:
        with pytest.raises(ValueError):
            FormatOptions.from_dict({"format_type": "fancy"})
        with pytest.raises(ValueError):
            FormatOptions.from_dict({"default_alignment": "follow"})

    def test_parser_options(self) -> None:
        options = ParserOptions.from_dict({"left_margin_chars": ">", "other": True})
        assert options.left_margin_chars == frozenset(">")

    def test_text_width_options(self) -> None:
        options = TextWidthOptions.from_dict({"normalize": True})
        assert options.normalize is True


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset options after each test."""
        reset_format_options()

    def test_default_options(self) -> None:
        assert get_format_options() == FormatOptions()

    def test_set_and_get(self) -> None:
        set_format_options(FormatOptions(min_delimiter_width=7))
        assert get_format_options().min_delimiter_width == 7

    def test_reset_restores_default(self) -> None:
        set_format_options(FormatOptions(min_delimiter_width=7))
        reset_format_options()
        assert get_format_options().min_delimiter_width == 3

    def test_set_options_are_used_by_formatter(self) -> None:
        set_format_options(FormatOptions(min_delimiter_width=4))
        result = complete_table(read_table(["| a |"]))
        assert result.table.to_lines()[1] == "| ---- |"


class TestFormatOptionsContext:
    """Test format_options_context context manager."""

    def test_context_sets_options(self) -> None:
        with format_options_context(FormatOptions(format_type=FormatType.WEAK)):
            assert get_format_options().format_type is FormatType.WEAK
        # Restored after context
        assert get_format_options().format_type is FormatType.NORMAL

    def test_nested_contexts(self) -> None:
        with format_options_context(FormatOptions(min_delimiter_width=4)):
            with format_options_context(FormatOptions(min_delimiter_width=5)):
                assert get_format_options().min_delimiter_width == 5
            assert get_format_options().min_delimiter_width == 4
        assert get_format_options().min_delimiter_width == 3

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with format_options_context(FormatOptions(min_delimiter_width=4)):
                raise ValueError("test")
        assert get_format_options().min_delimiter_width == 3


class TestThreadIsolation:
    """Test thread-local option isolation."""

    def test_thread_isolation(self) -> None:
        """Each thread sees its own options."""
        results: dict[int, list[str]] = {}

        def worker(thread_id: int, width: int) -> None:
            set_format_options(FormatOptions(min_delimiter_width=width))
            results[thread_id] = complete_table(read_table(["| a |"])).table.to_lines()

        threads = [Thread(target=worker, args=(i, i + 1)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for i in range(4):
            assert results[i] == ["| a |", f"| {'-' * (i + 1)} |"]

    def test_main_thread_unaffected(self) -> None:
        """Options set in a worker thread do not leak."""

        def worker() -> None:
            set_format_options(FormatOptions(min_delimiter_width=9))

        t = Thread(target=worker)
        t.start()
        t.join()
        assert get_format_options().min_delimiter_width == 3
