"""
Filesystem Walker Adapter

Implements FileWalker port with os.scandir, bounded by depth and
filtered by file extension.
"""
import logging
import os
import stat
from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..core.domain import CandidateFile, file_extension
from ..core.ports import FileWalker

logger = logging.getLogger(__name__)

# Number of nested sub-directories searched below the prefix
MAX_DEPTH = 7

# Searched file extensions (exact, case-sensitive)
EXTENSIONS = frozenset({
    'cpp', 'h', 'txt', 'html', 'php', 'c', 'css', 'json', 'py', 'js',
})


class ScandirWalker(FileWalker):
    """Depth-first walk yielding regular files with an allowed extension"""

    def __init__(self, extensions: Optional[Iterable[str]] = None, max_depth: int = MAX_DEPTH):
        self.extensions = frozenset(extensions) if extensions is not None else EXTENSIONS
        self.max_depth = max_depth

    def walk(self, root: str, max_depth: Optional[int] = None) -> Iterator[CandidateFile]:
        """
        Lazily yield candidate files below root.

        Files at most max_depth directories below root are yielded (depth
        counts path components, so a direct child of root has depth 1).
        Symlinks are never followed. Unreadable entries are skipped.
        Candidate paths keep the prefix as given (e.g. "./a.py").
        """
        if max_depth is None:
            max_depth = self.max_depth

        root_path = Path(root)
        try:
            st = root_path.stat()
        except OSError as e:
            logger.debug("cannot stat %s: %s", root_path, e)
            return

        if stat.S_ISREG(st.st_mode):
            if self._allowed(root_path):
                yield CandidateFile(path=root, depth=0)
            return

        if stat.S_ISDIR(st.st_mode):
            yield from self._walk_dir(root, 1, max_depth + 1)

    def _walk_dir(self, directory: str, depth: int, limit: int) -> Iterator[CandidateFile]:
        """Yield candidates among directory's entries, which sit at depth"""
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug("cannot read directory %s: %s", directory, e)
            return

        for entry in entries:
            try:
                is_file = entry.is_file(follow_symlinks=False)
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.debug("cannot stat %s: %s", entry.path, e)
                continue

            if is_file:
                if self._allowed(Path(entry.name)):
                    yield CandidateFile(path=entry.path, depth=depth)
            elif is_dir and depth < limit:
                yield from self._walk_dir(entry.path, depth + 1, limit)

    def _allowed(self, path: Path) -> bool:
        """Check the file's extension against the allow-list"""
        return file_extension(path) in self.extensions
