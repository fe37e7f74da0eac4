"""Row-level parsing of ``KEY=VALUE`` environment files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Tuple

from easyenv.errors import InvalidRowError
from easyenv.parsing.values import EnvValue, coerce_value, strip_quotes, to_env_string
from easyenv.utils.logging import NullLogger, WarningLogger

COMMENT_PREFIXES = ("#", "//")
NAME_PATTERN = re.compile(r"[A-Z_][A-Z0-9_]*", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class ParsedEntry:
    """A validated name/value pair produced from a single line."""

    name: str
    value: EnvValue
    line: int | None = None
    source: str = ""

    def env_string(self) -> str:
        """Return the value as written into the OS environment."""

        return to_env_string(self.value)


def is_comment(row: str) -> bool:
    return row.lstrip().startswith(COMMENT_PREFIXES)


def parse_name(raw: str) -> str | None:
    """Return the unquoted variable name, or None when it is not a valid identifier."""

    name = strip_quotes(raw)
    if not name or NAME_PATTERN.fullmatch(name) is None:
        return None
    return name


def parse_row(row: str) -> Tuple[str, EnvValue] | None:
    """Split a row on its first ``=`` and parse both sides.

    Args:
        row: A single non-comment line from an environment file.

    Returns:
        tuple[str, EnvValue] | None: The name and coerced value, or None when the
        row has no ``=`` or its name is not a valid identifier.
    """

    if "=" not in row:
        return None

    raw_name, raw_value = row.split("=", 1)
    name = parse_name(raw_name)
    if name is None:
        return None
    return name, coerce_value(raw_value)


def iter_entries(
    text: str,
    *,
    source: str = "",
    silent: bool = False,
    logger: WarningLogger | None = None,
) -> Iterator[ParsedEntry]:
    """Yield entries from environment file text in line order.

    Comments and blank lines are skipped. Invalid rows raise
    :class:`InvalidRowError` unless ``silent`` is set, in which case they are
    recorded on ``logger`` and skipped. Rows are yielded lazily so callers can
    apply each entry before a later row fails.
    """

    active_logger = logger or NullLogger()
    content = text.strip()
    # lines dropped by the leading strip still count towards line numbers
    offset = text[: len(text) - len(text.lstrip())].count("\n")
    for index, row in enumerate(content.split("\n")):
        line = index + offset + 1
        if not row.strip() or is_comment(row):
            continue

        parsed = parse_row(row)
        if parsed is None:
            if not silent:
                raise InvalidRowError(line, row, source)
            active_logger.warn(
                filename=source,
                line=line,
                element_type="Row",
                message=f"Skipped invalid row '{row}'",
                code="invalid-row",
            )
            continue

        name, value = parsed
        yield ParsedEntry(name=name, value=value, line=line, source=source)


__all__ = [
    "COMMENT_PREFIXES",
    "NAME_PATTERN",
    "ParsedEntry",
    "is_comment",
    "iter_entries",
    "parse_name",
    "parse_row",
]
