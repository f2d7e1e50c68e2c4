"""
Unit tests for ggrep.core.matcher

Tests pattern construction and the Matcher contract.
"""
import pytest

from ggrep.core.errors import PatternError
from ggrep.core.matcher import build_pattern, compile_pattern


class TestBuildPattern:
    """Test regex source construction."""

    def test_raw_keyword(self):
        """Test keyword is used as-is by default."""
        assert build_pattern("fo+") == "fo+"

    def test_fixed_strings_escapes(self):
        """Test metacharacters are escaped."""
        assert build_pattern("a.b*c", fixed_strings=True) == r"a\.b\*c"

    def test_word_regexp_wraps(self):
        """Test word boundaries on both sides."""
        assert build_pattern("cat", word_regexp=True) == r"\bcat\b"

    def test_fixed_then_word(self):
        """Test escaping happens before wrapping."""
        assert build_pattern("a.b", fixed_strings=True, word_regexp=True) == r"\ba\.b\b"


class TestCompilePattern:
    """Test compiled matchers."""

    def test_regex_match(self):
        """Test regex syntax is interpreted."""
        matcher = compile_pattern("fo+bar")
        assert matcher.matches("xx foooobar yy")
        assert not matcher.matches("fbar")

    def test_fixed_strings_literal_only(self):
        """Test -F matches only the literal text."""
        matcher = compile_pattern("a.b*c", fixed_strings=True)
        assert matcher.matches("see a.b*c here")
        assert not matcher.matches("axbbbc")
        assert not matcher.matches("ac")

    def test_regex_interpretation_without_fixed(self):
        """Test the same keyword acts as a regex without -F."""
        matcher = compile_pattern("a.b*c")
        assert matcher.matches("axbbbc")

    def test_word_regexp(self):
        """Test -w rejects matches inside words."""
        matcher = compile_pattern("cat", word_regexp=True)
        assert matcher.matches("the cat sat")
        assert not matcher.matches("concatenate")

    def test_ignore_case(self):
        """Test -i folds case in the engine."""
        matcher = compile_pattern("hello", ignore_case=True)
        assert matcher.matches("HeLLo world")
        assert not compile_pattern("hello").matches("HELLO")

    def test_ignore_case_unicode(self):
        """Test case folding applies to non-ASCII text."""
        assert compile_pattern("ärger", ignore_case=True).matches("ÄRGER")

    def test_find_spans(self):
        """Test all spans are found left to right."""
        matcher = compile_pattern("foo")
        assert matcher.find_spans("foo bar foofoo") == [(0, 3), (8, 11), (11, 14)]

    def test_find_spans_no_match(self):
        """Test no spans on a non-matching line."""
        assert compile_pattern("foo").find_spans("bar") == []

    def test_invalid_pattern(self):
        """Test invalid regex raises PatternError."""
        with pytest.raises(PatternError) as exc_info:
            compile_pattern("(unclosed")

        err = exc_info.value
        assert err.pattern == "(unclosed"
        assert err.reason
        assert str(err).startswith("Invalid pattern '(unclosed': ")

    def test_invalid_pattern_after_word_wrap(self):
        """Test the reported pattern is the wrapped one."""
        with pytest.raises(PatternError) as exc_info:
            compile_pattern("[", word_regexp=True)
        assert exc_info.value.pattern == r"\b[\b"

    def test_fixed_strings_never_invalid(self):
        """Test escaping makes any keyword compile."""
        matcher = compile_pattern("(unclosed[", fixed_strings=True)
        assert matcher.matches("x(unclosed[y")
