"""
Domain errors

PatternError is fatal for the whole run; FileReadError only skips one file.
"""


class GgrepError(Exception):
    """Base class for ggrep errors"""


class PatternError(GgrepError, ValueError):
    """Search pattern failed to compile"""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern '{pattern}': {reason}")


class FileReadError(GgrepError, OSError):
    """A candidate file could not be opened or decoded"""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Error reading {path}: {message}")

    def __str__(self) -> str:
        return f"Error reading {self.path}: {self.message}"
