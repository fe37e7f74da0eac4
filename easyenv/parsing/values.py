"""Value coercion for environment file entries.

Values are coerced in a fixed order, first match wins:

* an optional ``-`` followed by ASCII digits becomes an ``int``
* any other numeric string (decimals, exponents) becomes a ``float``
* ``true`` / ``false`` in any case become a ``bool``
* everything else stays a ``str``
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

EnvValue = int | float | bool | str

_INT_PATTERN = re.compile(r"-?[0-9]+")
_NUMERIC_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_QUOTES = ('"', "'")


def strip_quotes(text: str) -> str:
    """Remove one layer of matching surrounding single or double quotes."""

    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        return text[1:-1]
    return text


def is_an_int(text: str) -> bool:
    """Return True when ``text`` is an optional ``-`` followed by ASCII digits."""

    return _INT_PATTERN.fullmatch(text) is not None


def is_numeric(text: str) -> bool:
    """Return True for decimal numeric strings such as ``3.14``, ``.5`` or ``1e-3``.

    ``float()`` alone is too permissive here: it also accepts ``inf``, ``nan``,
    underscores and surrounding whitespace, none of which should turn a value
    into a number.
    """

    return _NUMERIC_PATTERN.fullmatch(text) is not None


def coerce_value(raw: str) -> EnvValue:
    """Strip one quote layer from ``raw`` and cast it to its natural type.

    Args:
        raw: Text to the right of the first ``=`` on a row.

    Returns:
        EnvValue: ``int``, ``float``, ``bool`` or the unquoted ``str``.
    """

    value = strip_quotes(raw)

    if is_an_int(value):
        try:
            return int(value)
        except ValueError:
            # beyond the interpreter's integer string conversion limit
            return value
    if is_numeric(value):
        return float(value)

    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return value


def to_env_string(value: EnvValue) -> str:
    """Render a value the way it is written into ``os.environ``."""

    # bool is checked first because it is a subclass of int
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return _float_text(value)
    return str(value)


def _float_text(value: float) -> str:
    """Render a float positionally without a trailing ``.0``, e.g. ``3`` or ``0.00001``."""

    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


__all__ = [
    "EnvValue",
    "coerce_value",
    "is_an_int",
    "is_numeric",
    "strip_quotes",
    "to_env_string",
]
