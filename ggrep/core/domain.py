"""
Domain Models - Pure search entities

No external dependencies. These represent one invocation and what it finds.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Optional


class ColorMode(str, Enum):
    """When to highlight matches"""
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class OutputMode(str, Enum):
    """How results are rendered"""
    LINES = "lines"  # path:line:text (default)
    COUNT = "count"  # path:count
    FILES = "files"  # path


def file_extension(path) -> str:
    """Text after the last dot of the file name.

    A name whose only dot is the leading one (".py") has no extension,
    but "..py" and ".hidden.py" do.
    """
    stem, dot, ext = PurePath(path).name.rpartition(".")
    return ext if dot and stem else ""


@dataclass(frozen=True)
class SearchOptions:
    """Invocation configuration, built once from the command line"""
    keyword: str
    prefix: str = "."
    ignore_case: bool = False
    invert_match: bool = False
    count: bool = False
    list_files: bool = False
    fixed_strings: bool = False
    word_regexp: bool = False
    color: ColorMode = ColorMode.AUTO

    @property
    def output_mode(self) -> OutputMode:
        # -c wins over -l when both are given
        if self.count:
            return OutputMode.COUNT
        if self.list_files:
            return OutputMode.FILES
        return OutputMode.LINES


@dataclass(frozen=True)
class CandidateFile:
    """A file discovered by the walk"""
    path: str
    depth: int

    @property
    def extension(self) -> str:
        return file_extension(self.path)


@dataclass
class LineMatch:
    """A qualifying line within a file"""
    line_number: int  # 1-based
    line: str


@dataclass
class ScanResult:
    """Results from scanning one file"""
    path: str
    count: int = 0
    matches: list[LineMatch] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def has_match(self) -> bool:
        return not self.failed and self.count > 0


@dataclass
class RunOutcome:
    """Aggregate of a whole run, mapped to the exit status"""
    any_match: bool = False
    files_scanned: int = 0
    files_failed: int = 0
    lines_reported: int = 0

    def record(self, result: ScanResult) -> None:
        """Fold one file's result into the running totals"""
        if result.failed:
            self.files_failed += 1
            return
        self.files_scanned += 1
        self.lines_reported += len(result.matches)
        self.any_match = self.any_match or result.has_match
