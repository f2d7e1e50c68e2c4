"""
ggrep - recursive, extension-filtered text search

Hexagonal layout:
- core/: domain models, pattern compiler, ports and the search service
- adapters/: filesystem walker and line scanner
- formatters.py: grep-style output records
- cli.py: command-line entry point
"""

__version__ = "0.1.0"
