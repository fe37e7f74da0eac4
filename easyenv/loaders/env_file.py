"""Load ``KEY=VALUE`` files into the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from easyenv.errors import FileReadError, InvalidPathError
from easyenv.parsing.rows import ParsedEntry, iter_entries
from easyenv.utils.logging import NullLogger, WarningLogger

from .environment import EnvironmentSink, process_environment

PathArg = str | os.PathLike[str]


@dataclass(frozen=True)
class LoaderConfig:
    """Immutable options for a single load.

    Attributes:
        paths: Files to load, in order; later files override earlier ones.
        append: Keep existing non-empty values instead of overwriting them.
        silent: Skip unreadable files and invalid rows instead of raising.
        system: Also write values into ``os.environ`` for child processes.
    """

    paths: tuple[PathArg, ...]
    append: bool = False
    silent: bool = False
    system: bool = True

    @classmethod
    def from_paths(
        cls,
        paths: PathArg | Sequence[Any],
        *,
        append: bool = False,
        silent: bool = False,
        system: bool = True,
        logger: WarningLogger | None = None,
    ) -> "LoaderConfig":
        """Build a config from one path or a sequence of paths.

        Every entry must be a non-empty ``str`` or ``os.PathLike``. Invalid
        entries raise :class:`InvalidPathError`, or are dropped and logged when
        ``silent`` is set.
        """

        if isinstance(paths, (str, bytes, os.PathLike)):
            candidates: list[Any] = [paths]
        elif isinstance(paths, Sequence):
            candidates = list(paths)
        else:
            candidates = [paths]

        valid: list[PathArg] = []
        for candidate in candidates:
            if _is_valid_path(candidate):
                valid.append(candidate)
                continue
            if not silent:
                raise InvalidPathError(candidate)
            if logger is not None:
                logger.warn(
                    filename=str(candidate),
                    line=None,
                    element_type="Path",
                    message=f"Skipped invalid path {candidate!r}",
                    code="invalid-path",
                )

        return cls(paths=tuple(valid), append=append, silent=silent, system=system)


class EnvFileLoader:
    """Read environment files and apply their entries to a sink."""

    def __init__(
        self,
        config: LoaderConfig,
        store: EnvironmentSink | None = None,
        logger: WarningLogger | None = None,
    ) -> None:
        self.config = config
        self.store = store if store is not None else process_environment()
        self.logger = logger or NullLogger()

    def load_all(self) -> list[ParsedEntry]:
        """Load every configured file in order.

        Returns:
            list[ParsedEntry]: Entries written to the store across all files.
        """

        applied: list[ParsedEntry] = []
        for path in self.config.paths:
            applied.extend(self.load(path))
        return applied

    def load(self, path: PathArg) -> list[ParsedEntry]:
        """Load a single file and apply its entries row by row.

        Args:
            path: Environment file to read.

        Returns:
            list[ParsedEntry]: Entries written to the store. Rows skipped by
            append mode are not included.

        Raises:
            FileReadError: If the file cannot be read and ``silent`` is off.
            InvalidRowError: If a row is invalid and ``silent`` is off. Rows
                before it stay applied.
        """

        text = self._read(path)
        if text is None:
            return []

        applied: list[ParsedEntry] = []
        entries = iter_entries(
            text,
            source=os.fspath(path),
            silent=self.config.silent,
            logger=self.logger,
        )
        for entry in entries:
            if self.config.append and self.store.has_value(entry.name):
                continue
            self.store.set(entry.name, entry.value, system=self.config.system)
            applied.append(entry)
        return applied

    def _read(self, path: PathArg) -> str | None:
        try:
            return Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
            if not self.config.silent:
                raise FileReadError(path, reason) from exc
            self.logger.warn(
                filename=os.fspath(path),
                line=None,
                element_type="File",
                message=f"Skipped unreadable file: {reason}",
                code="file-unreadable",
            )
            return None


def load(
    paths: PathArg | Sequence[PathArg],
    *,
    append: bool = False,
    silent: bool = False,
    system: bool = True,
    store: EnvironmentSink | None = None,
    logger: WarningLogger | None = None,
) -> None:
    """Load one or more environment files into the process environment.

    Args:
        paths: A path or an ordered list of paths.
        append: Do not overwrite variables that already hold a non-empty value.
        silent: Skip invalid paths, unreadable files and invalid rows.
        system: Also export values to ``os.environ``.
        store: Optional sink replacing the process-wide store, e.g. in tests.
        logger: Optional warning collector for silently skipped input.

    Raises:
        InvalidPathError: A path is not a non-empty string or path object.
        FileReadError: A file is missing or unreadable.
        InvalidRowError: A row is not a valid assignment.
    """

    active_logger = logger or NullLogger()
    config = LoaderConfig.from_paths(
        paths, append=append, silent=silent, system=system, logger=active_logger
    )
    EnvFileLoader(config, store=store, logger=active_logger).load_all()


def _is_valid_path(candidate: Any) -> bool:
    if isinstance(candidate, str):
        return candidate.strip() != ""
    if isinstance(candidate, os.PathLike):
        return os.fspath(candidate) not in ("", ".")
    return False


__all__ = ["EnvFileLoader", "LoaderConfig", "load"]
