"""
Pattern Compiler

Turns a keyword plus -F/-w/-i into a single compiled Matcher.
"""
import re
from dataclasses import dataclass

from .errors import PatternError


@dataclass(frozen=True)
class Matcher:
    """A compiled search pattern"""
    pattern: str
    regex: re.Pattern

    def matches(self, line: str) -> bool:
        """Does this line contain a match"""
        return self.regex.search(line) is not None

    def find_spans(self, line: str) -> list[tuple[int, int]]:
        """All non-overlapping match spans, left to right"""
        return [m.span() for m in self.regex.finditer(line)]


def build_pattern(keyword: str, fixed_strings: bool = False, word_regexp: bool = False) -> str:
    """Build the regex source text for a keyword"""
    pattern = re.escape(keyword) if fixed_strings else keyword
    if word_regexp:
        pattern = rf"\b{pattern}\b"
    return pattern


def compile_pattern(
    keyword: str,
    fixed_strings: bool = False,
    word_regexp: bool = False,
    ignore_case: bool = False
) -> Matcher:
    """
    Compile a keyword into a Matcher.

    Case-insensitivity is applied by the regex engine, not by lowercasing
    the text. Raises PatternError if the resulting pattern is invalid,
    which can only happen when fixed_strings is False.
    """
    pattern = build_pattern(keyword, fixed_strings, word_regexp)
    flags = re.IGNORECASE if ignore_case else 0
    try:
        regex = re.compile(pattern, flags)
    except re.error as e:
        raise PatternError(pattern, str(e)) from e
    return Matcher(pattern=pattern, regex=regex)
