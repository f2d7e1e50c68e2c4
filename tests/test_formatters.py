"""
Unit tests for ggrep.formatters

Tests record rendering, highlighting and the color decision.
"""
import os
from unittest.mock import MagicMock

from ggrep.core.domain import ColorMode, LineMatch, OutputMode, ScanResult
from ggrep.core.matcher import compile_pattern
from ggrep.formatters import (
    ANSI_BOLD_RED,
    ANSI_RESET,
    display_path,
    format_count,
    format_file,
    format_line_match,
    highlight_line,
    render,
    should_colorize,
)


def red(text):
    return f"{ANSI_BOLD_RED}{text}{ANSI_RESET}"


class TestHighlight:
    """Test match highlighting."""

    def test_no_color(self):
        """Test the line is unchanged without color."""
        assert highlight_line("foobar", compile_pattern("foo"), False) == "foobar"

    def test_single_span(self):
        assert highlight_line("foobar", compile_pattern("foo"), True) == red("foo") + "bar"

    def test_every_span(self):
        """Test all matches are wrapped, not just the first."""
        line = highlight_line("a foo b foo", compile_pattern("foo"), True)
        assert line == "a " + red("foo") + " b " + red("foo")

    def test_ignore_case_keeps_original_text(self):
        matcher = compile_pattern("foo", ignore_case=True)
        assert highlight_line("FOO", matcher, True) == red("FOO")

    def test_non_matching_line_unchanged(self):
        """Test invert-mode lines carry no escapes."""
        assert highlight_line("bar", compile_pattern("foo"), True) == "bar"


class TestRecords:
    """Test record formats."""

    def test_line_record(self):
        match = LineMatch(line_number=3, line="foobar")
        assert format_line_match("./a.py", match, compile_pattern("foo"), False) == "./a.py:3:foobar"

    def test_line_record_colored(self):
        match = LineMatch(line_number=1, line="foo")
        assert format_line_match("./a.py", match, compile_pattern("foo"), True) == "./a.py:1:" + red("foo")

    def test_count_record(self):
        assert format_count(ScanResult(path="./a.py", count=2)) == "./a.py:2"

    def test_file_record(self):
        assert format_file(ScanResult(path="./a.py", count=2)) == "./a.py"


class TestRender:
    """Test rendering per output mode."""

    def setup_method(self):
        self.matcher = compile_pattern("foo")
        self.result = ScanResult(
            path="./a.py",
            count=2,
            matches=[LineMatch(1, "foo"), LineMatch(3, "foobar")]
        )

    def test_lines_mode(self):
        assert render(OutputMode.LINES, self.result, self.matcher, False) == [
            "./a.py:1:foo",
            "./a.py:3:foobar",
        ]

    def test_count_mode(self):
        assert render(OutputMode.COUNT, self.result, self.matcher, True) == ["./a.py:2"]

    def test_files_mode(self):
        assert render(OutputMode.FILES, self.result, self.matcher, True) == ["./a.py"]

    def test_zero_count_renders_nothing(self):
        """Test files without qualifying lines print nothing in any mode."""
        empty = ScanResult(path="./b.txt", count=0)
        for mode in OutputMode:
            assert render(mode, empty, self.matcher, False) == []

    def test_failed_renders_nothing(self):
        failed = ScanResult(path="./c.txt", error="Permission denied")
        assert render(OutputMode.COUNT, failed, self.matcher, False) == []


class TestShouldColorize:
    """Test the color decision."""

    def test_always(self):
        stream = MagicMock()
        stream.isatty.return_value = False
        assert should_colorize(ColorMode.ALWAYS, stream) is True

    def test_never(self):
        stream = MagicMock()
        stream.isatty.return_value = True
        assert should_colorize(ColorMode.NEVER, stream) is False

    def test_auto_terminal(self):
        stream = MagicMock()
        stream.isatty.return_value = True
        assert should_colorize(ColorMode.AUTO, stream) is True

    def test_auto_pipe(self):
        stream = MagicMock()
        stream.isatty.return_value = False
        assert should_colorize(ColorMode.AUTO, stream) is False

    def test_auto_without_isatty(self):
        """Test streams lacking isatty are treated as non-terminals."""
        assert should_colorize(ColorMode.AUTO, object()) is False


class TestDisplayPath:
    """Test printable paths."""

    def test_plain_path_unchanged(self):
        assert display_path("./src/app.py") == "./src/app.py"

    def test_undecodable_name_replaced(self):
        """Test bytes that are not UTF-8 print as U+FFFD."""
        path = os.fsdecode(b"./\xff.py")
        assert display_path(path) == "./\ufffd.py"
        assert display_path(path).encode("utf-8") == b"./\xef\xbf\xbd.py"

    def test_records_use_display_path(self):
        path = os.fsdecode(b"./\xff.py")
        result = ScanResult(path=path, count=1, matches=[LineMatch(1, "foo")])
        assert render(OutputMode.COUNT, result, compile_pattern("foo"), False) == ["./\ufffd.py:1"]
        assert render(OutputMode.LINES, result, compile_pattern("foo"), False) == ["./\ufffd.py:1:foo"]
