"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the filesystem,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .domain import CandidateFile, LineMatch
from .matcher import Matcher


class FileWalker(ABC):
    """Port for discovering candidate files"""

    @abstractmethod
    def walk(self, root: str, max_depth: Optional[int] = None) -> Iterator[CandidateFile]:
        """Lazily yield candidate files below root"""
        pass


class LineScanner(ABC):
    """Port for scanning a file line by line"""

    @abstractmethod
    def count(self, path: str, matcher: Matcher, invert: bool = False) -> int:
        """Count qualifying lines in a file"""
        pass

    @abstractmethod
    def collect(self, path: str, matcher: Matcher, invert: bool = False) -> list[LineMatch]:
        """Return qualifying lines with 1-based line numbers"""
        pass
