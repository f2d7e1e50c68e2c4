"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: Depth- and extension-bounded directory walker
- scanner.py: Line-by-line file scanner
"""
from .filesystem import ScandirWalker, MAX_DEPTH, EXTENSIONS
from .scanner import FileLineScanner

__all__ = [
    "ScandirWalker",
    "FileLineScanner",
    "MAX_DEPTH",
    "EXTENSIONS",
]
