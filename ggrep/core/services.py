"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no presentation concerns.
"""
import logging
from typing import Iterator

from .domain import OutputMode, ScanResult, SearchOptions
from .errors import FileReadError
from .matcher import Matcher, compile_pattern
from .ports import FileWalker, LineScanner

logger = logging.getLogger(__name__)


class SearchService:
    """Use case: search every candidate file below a prefix"""

    def __init__(self, walker: FileWalker, scanner: LineScanner):
        self.walker = walker
        self.scanner = scanner

    def compile(self, options: SearchOptions) -> Matcher:
        """Compile the matcher for a run. Raises PatternError."""
        return compile_pattern(
            options.keyword,
            fixed_strings=options.fixed_strings,
            word_regexp=options.word_regexp,
            ignore_case=options.ignore_case
        )

    def scan_file(self, path: str, options: SearchOptions, matcher: Matcher) -> ScanResult:
        """
        Scan one file in the active output mode.

        Count and list modes share the counting pass; only full-listing
        mode keeps the qualifying lines. A read failure yields a result
        carrying the error and no matches.
        """
        invert = options.invert_match
        try:
            if options.output_mode is OutputMode.LINES:
                matches = self.scanner.collect(path, matcher, invert)
                return ScanResult(path=path, count=len(matches), matches=matches)
            return ScanResult(path=path, count=self.scanner.count(path, matcher, invert))
        except FileReadError as e:
            logger.debug("skipping %s: %s", path, e.message)
            return ScanResult(path=path, error=e.message)

    def execute(self, options: SearchOptions, matcher: Matcher) -> Iterator[ScanResult]:
        """
        Walk the prefix and scan each candidate, one file at a time.

        Lazy: results are yielded as soon as each file is done.
        """
        for candidate in self.walker.walk(options.prefix):
            yield self.scan_file(candidate.path, options, matcher)
