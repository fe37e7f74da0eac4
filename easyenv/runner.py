"""Entry points for running easyenv operations."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Sequence

from .loaders.env_file import EnvFileLoader, LoaderConfig, load
from .loaders.environment import EnvironmentStore
from .parsing.rows import ParsedEntry
from .utils.logging import NullLogger, WarningLogger, render_summary


def run_check(files: Sequence[Path]) -> int:
    """Parse environment files without applying them and report problems.

    Args:
        files: Environment files to check.

    Returns:
        int: 0 when every file is readable and every row is valid; 1 otherwise.
    """

    print("🔧 Checking env files…")
    logger = NullLogger()
    config = LoaderConfig.from_paths(list(files), silent=True, system=False, logger=logger)
    entries = EnvFileLoader(config, store=EnvironmentStore.in_memory(), logger=logger).load_all()

    if logger.has_warnings():
        print("❌ Problems found:")
        for warning in logger.warnings:
            print(f" - {warning.format()}")
        print(f"Found {len(logger.warnings)} problem(s).")
        return 1

    print(f"Parsed {len(entries)} entries from {len(config.paths)} file(s).")
    print("✅ All checks passed.")
    return 0


def run_show(
    files: Sequence[Path],
    *,
    append: bool = False,
    silent: bool = False,
    logger: WarningLogger | None = None,
) -> list[ParsedEntry]:
    """Return the entries a load *would* apply without touching ``os.environ``.

    The dry run works on a copy of the current environment so append mode
    reports the same skips a real load would.

    Args:
        files: Environment files to load.
        append: Skip names that already hold a non-empty value.
        silent: Skip unreadable files and invalid rows.
        logger: Optional warning logger for skipped input.

    Returns:
        list[ParsedEntry]: Entries that would be written, in load order.
    """

    active_logger = logger or NullLogger()
    store = EnvironmentStore.in_memory(os.environ)
    config = LoaderConfig.from_paths(
        list(files), append=append, silent=silent, logger=active_logger
    )
    entries = EnvFileLoader(config, store=store, logger=active_logger).load_all()

    if active_logger.has_warnings():
        print(render_summary(active_logger))
    return entries


def run_exec(
    files: Sequence[Path],
    command: Sequence[str],
    *,
    append: bool = False,
    silent: bool = False,
    logger: WarningLogger | None = None,
) -> int:
    """Load environment files into this process and run ``command`` with them.

    Args:
        files: Environment files to load before starting the command.
        command: Program and arguments to execute.
        append: Keep variables that are already set.
        silent: Skip unreadable files and invalid rows.
        logger: Optional warning logger for skipped input.

    Returns:
        int: The command's exit code, or 127 when it cannot be started.
    """

    active_logger = logger or NullLogger()
    load(list(files), append=append, silent=silent, system=True, logger=active_logger)
    if active_logger.has_warnings():
        print(render_summary(active_logger))

    try:
        completed = subprocess.run(list(command), check=False)
    except FileNotFoundError:
        print(f"❌ Command not found: {command[0]}")
        return 127
    return completed.returncode
