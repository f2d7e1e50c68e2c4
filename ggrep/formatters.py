"""
Output formatters for search results

Format scan results as grep-style text records, one per output line.
Used by the CLI; kept free of I/O so they can be tested directly.
"""
import os
from typing import TextIO

from .core.domain import ColorMode, LineMatch, OutputMode, ScanResult
from .core.matcher import Matcher

ANSI_BOLD_RED = "\x1b[1;31m"
ANSI_RESET = "\x1b[0m"


def should_colorize(mode: ColorMode, stream: TextIO) -> bool:
    """Decide highlighting once per run.

    ALWAYS and NEVER are absolute; AUTO highlights only when the stream
    is an interactive terminal (not a pipe or a redirected file).
    """
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def display_path(path: str) -> str:
    """Printable form of a path.

    Names that are not valid UTF-8 come back from the filesystem with
    surrogate escapes; those bytes are shown as U+FFFD.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def highlight_line(line: str, matcher: Matcher, colorize: bool) -> str:
    """Wrap every match span in bold red."""
    if not colorize:
        return line

    parts = []
    last_end = 0
    for start, end in matcher.find_spans(line):
        parts.append(line[last_end:start])
        parts.append(f"{ANSI_BOLD_RED}{line[start:end]}{ANSI_RESET}")
        last_end = end
    parts.append(line[last_end:])
    return "".join(parts)


def format_line_match(path: str, match: LineMatch, matcher: Matcher, colorize: bool) -> str:
    """Format a qualifying line.

    Example output:
        ./src/app.py:12:    return foo(bar)
    """
    return f"{display_path(path)}:{match.line_number}:{highlight_line(match.line, matcher, colorize)}"


def format_count(result: ScanResult) -> str:
    """Example output: ./src/app.py:3"""
    return f"{display_path(result.path)}:{result.count}"


def format_file(result: ScanResult) -> str:
    return display_path(result.path)


def render(mode: OutputMode, result: ScanResult, matcher: Matcher, colorize: bool) -> list[str]:
    """Render one file's result as output lines.

    Files without qualifying lines (or that failed) render nothing.
    """
    if not result.has_match:
        return []

    if mode is OutputMode.COUNT:
        return [format_count(result)]
    if mode is OutputMode.FILES:
        return [format_file(result)]
    return [format_line_match(result.path, m, matcher, colorize) for m in result.matches]
