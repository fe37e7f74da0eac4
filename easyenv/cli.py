from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .errors import EasyEnvError
from .parsing.rows import ParsedEntry
from .runner import run_check, run_exec, run_show
from .utils.logging import WarningLogger

app = typer.Typer(
    name="easyenv",
    help="Load KEY=VALUE environment files into the process environment.",
    add_completion=True,
)

console = Console()
err_console = Console(stderr=True)

FILES_OPTION_HELP = "Environment file to load. Repeat to load several files in order."
LOG_DIR_OPTION_HELP = "Directory for the warning log written when input is skipped."


def render_entries(entries: list[ParsedEntry], target: Console) -> None:
    """Print entries as a table of name, type and value.

    Args:
        entries: Entries to render, in load order.
        target: Console receiving the table.
    """
    table = Table(title="Entries to apply")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Value")
    table.add_column("Source")
    for entry in entries:
        source = Path(entry.source).name
        location = f"{source}:{entry.line}" if entry.line is not None else source
        table.add_row(entry.name, type(entry.value).__name__, entry.env_string(), location)
    target.print(table)


def _fail(exc: EasyEnvError) -> typer.Exit:
    err_console.print(f"❌ {exc}", style="red", markup=False, soft_wrap=True)
    return typer.Exit(code=1)


@app.command("check")
def check(
    files: list[Path] = typer.Option(..., "--file", "-f", help=FILES_OPTION_HELP),
) -> None:
    """
    Check environment files without loading them.

    Reports unreadable files and rows that are neither comments nor valid
    ``NAME=value`` assignments, and exits with code 1 when any are found.

    Example:
        easyenv check -f .env -f .env.local
    """
    exit_code = run_check(files)
    if exit_code:
        raise typer.Exit(code=exit_code)


@app.command("show")
def show(
    files: list[Path] = typer.Option(..., "--file", "-f", help=FILES_OPTION_HELP),
    append: bool = typer.Option(
        False,
        "--append",
        "-a",
        help="Keep variables that are already set instead of overwriting them.",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        "-s",
        help="Skip unreadable files and invalid rows instead of failing.",
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", envvar="EASYENV_LOG_DIR", help=LOG_DIR_OPTION_HELP
    ),
) -> None:
    """
    Perform a dry run and show the typed entries that would be applied.

    Example:
        easyenv show -f .env
        easyenv show -f .env --append --silent
    """
    logger = WarningLogger("easyenv", log_dir=log_dir)
    try:
        entries = run_show(files, append=append, silent=silent, logger=logger)
    except EasyEnvError as exc:
        raise _fail(exc) from exc
    render_entries(entries, console)
    console.print("\n(no changes made)")


@app.command(
    "exec",
    context_settings={"allow_interspersed_args": False},
)
def exec_command(
    command: list[str] = typer.Argument(..., help="Command to run with the loaded environment."),
    files: list[Path] = typer.Option(..., "--file", "-f", help=FILES_OPTION_HELP),
    append: bool = typer.Option(
        False,
        "--append",
        "-a",
        help="Keep variables that are already set instead of overwriting them.",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        "-s",
        help="Skip unreadable files and invalid rows instead of failing.",
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", envvar="EASYENV_LOG_DIR", help=LOG_DIR_OPTION_HELP
    ),
) -> None:
    """
    Load environment files, then run a command that inherits them.

    Exits with the command's own exit code.

    Example:
        easyenv exec -f .env -- python manage.py runserver
    """
    logger = WarningLogger("easyenv", log_dir=log_dir)
    try:
        exit_code = run_exec(files, command, append=append, silent=silent, logger=logger)
    except EasyEnvError as exc:
        raise _fail(exc) from exc
    if exit_code:
        raise typer.Exit(code=exit_code)


def main() -> None:
    """Entry point for Python -m execution."""
    app()


if __name__ == "__main__":
    main()
