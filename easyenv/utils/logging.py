"""Compiler-style warnings for entries skipped while loading in silent mode."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List

WARN_CODES = {
    "invalid-row": "W001",
    "file-unreadable": "W002",
    "invalid-path": "W003",
}


@dataclass(frozen=True)
class WarningEntry:
    """Captured warning with minimal metadata."""

    filename: str
    line: int | None
    element_type: str
    message: str
    code: str

    def format(self) -> str:
        location = f"{self.filename}:{self.line}" if self.line is not None else self.filename
        return f"{location} [{self.code}][{self.element_type}] {self.message}"


class WarningLogger:
    """Collect warnings and write them to a timestamped log file."""

    def __init__(self, root_name: str, *, log_dir: Path | None = None) -> None:
        sanitized = re.sub(r"[^A-Za-z0-9_-]", "_", root_name) or "env"
        timestamp = datetime.now().strftime("%Y-%m-%d-%H%M")
        self.log_path = (log_dir or Path("logs")) / f"{sanitized}_{timestamp}.log"
        self._warnings: List[WarningEntry] = []

    @property
    def warnings(self) -> list[WarningEntry]:
        return list(self._warnings)

    def warn(
        self,
        *,
        filename: str,
        line: int | None,
        element_type: str,
        message: str,
        code: str,
    ) -> None:
        entry = self._record(
            filename=filename,
            line=line,
            element_type=element_type,
            message=message,
            code=code,
        )
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with self.log_path.open("a", encoding="utf-8") as handle:
            handle.write(f"{entry.format()}\n")

    def summary(self) -> str:
        return f"Found {len(self._warnings)} warnings. See {self.log_path.name}"

    def has_warnings(self) -> bool:
        return bool(self._warnings)

    def _record(
        self,
        *,
        filename: str,
        line: int | None,
        element_type: str,
        message: str,
        code: str,
    ) -> WarningEntry:
        entry = WarningEntry(
            filename=Path(filename).as_posix() if filename else "<input>",
            line=line,
            element_type=element_type,
            message=message,
            code=WARN_CODES.get(code, code),
        )
        self._warnings.append(entry)
        return entry


class NullLogger(WarningLogger):
    """Logger that keeps warnings in memory without touching the filesystem."""

    def __init__(self) -> None:
        self.log_path = Path("/dev/null")
        self._warnings: list[WarningEntry] = []

    def warn(
        self,
        *,
        filename: str,
        line: int | None,
        element_type: str,
        message: str,
        code: str,
    ) -> None:
        self._record(
            filename=filename,
            line=line,
            element_type=element_type,
            message=message,
            code=code,
        )

    def summary(self) -> str:
        return f"Found {len(self._warnings)} warnings."


def render_summary(logger: WarningLogger) -> str:
    """Return a human-readable summary of captured warnings."""

    return logger.summary()


__all__ = ["WarningLogger", "WarningEntry", "render_summary", "NullLogger", "WARN_CODES"]
