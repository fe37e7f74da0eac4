"""Error types raised while loading environment files."""

from __future__ import annotations

import os
from typing import Any


class EasyEnvError(Exception):
    """Base class for every loader failure."""


class InvalidPathError(EasyEnvError, ValueError):
    """Raised when a supplied path is not a usable, non-empty path value."""

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(f"A file path is invalid: {path!r}")


class FileReadError(EasyEnvError, OSError):
    """Raised when an environment file is missing or cannot be read."""

    def __init__(self, path: str | os.PathLike[str], reason: str = "") -> None:
        self.path = os.fspath(path)
        self.reason = reason
        message = f"Unable to load file '{self.path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidRowError(EasyEnvError, ValueError):
    """Raised when a line is neither a comment nor a valid assignment."""

    def __init__(self, line: int, row: str, source: str = "") -> None:
        self.line = line
        self.row = row
        self.source = source
        location = f"{source}:{line}" if source else f"line {line}"
        super().__init__(f"{location} row '{row}' is not valid")


__all__ = ["EasyEnvError", "InvalidPathError", "FileReadError", "InvalidRowError"]
