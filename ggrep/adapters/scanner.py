"""
Line Scanner Adapter

Implements LineScanner port by reading files line by line.
"""
from typing import Iterator

from ..core.domain import LineMatch
from ..core.errors import FileReadError
from ..core.matcher import Matcher
from ..core.ports import LineScanner


class FileLineScanner(LineScanner):
    """Line scanner reading UTF-8 text files"""

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    def count(self, path: str, matcher: Matcher, invert: bool = False) -> int:
        """Count qualifying lines (reads the whole file)"""
        count = 0
        for _, line in self._read_lines(path):
            if invert ^ matcher.matches(line):
                count += 1
        return count

    def collect(self, path: str, matcher: Matcher, invert: bool = False) -> list[LineMatch]:
        """Return qualifying lines in file order"""
        matches = []
        for line_number, line in self._read_lines(path):
            if invert ^ matcher.matches(line):
                matches.append(LineMatch(line_number=line_number, line=line))
        return matches

    def _read_lines(self, path: str) -> Iterator[tuple[int, str]]:
        """
        Yield (line_number, text) with the terminator removed.

        Lines are split on \\n only; a \\r directly before it is dropped
        too. Raises FileReadError on open, read or decode failure.
        """
        try:
            with open(path, 'rb') as f:
                for line_number, raw in enumerate(f, 1):
                    if raw.endswith(b'\n'):
                        raw = raw[:-1]
                        if raw.endswith(b'\r'):
                            raw = raw[:-1]
                    try:
                        text = raw.decode(self.encoding)
                    except UnicodeDecodeError as e:
                        raise FileReadError(path, f"invalid UTF-8 on line {line_number} ({e.reason})") from e
                    yield line_number, text
        except FileReadError:
            raise
        except OSError as e:
            raise FileReadError(path, e.strerror or str(e)) from e
