"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- errors.py: Domain errors
- matcher.py: Pattern compiler
- ports.py: Port interfaces (abstractions for the filesystem)
- services.py: Application services (use cases)
"""
from .domain import (
    ColorMode,
    OutputMode,
    SearchOptions,
    CandidateFile,
    LineMatch,
    ScanResult,
    RunOutcome,
    file_extension,
)
from .errors import GgrepError, PatternError, FileReadError
from .matcher import Matcher, build_pattern, compile_pattern
from .ports import FileWalker, LineScanner
from .services import SearchService

__all__ = [
    # Domain models
    "ColorMode",
    "OutputMode",
    "SearchOptions",
    "CandidateFile",
    "LineMatch",
    "ScanResult",
    "RunOutcome",
    "file_extension",
    # Errors
    "GgrepError",
    "PatternError",
    "FileReadError",
    # Pattern compiler
    "Matcher",
    "build_pattern",
    "compile_pattern",
    # Ports
    "FileWalker",
    "LineScanner",
    # Services
    "SearchService",
]
