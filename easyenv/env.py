"""Typed accessors for variables loaded into the environment."""

from __future__ import annotations

from easyenv.loaders.environment import EnvironmentSink, process_environment
from easyenv.parsing.values import EnvValue, is_an_int, to_env_string

TRUE_STRINGS = {"1", "true", "yes", "on"}
FALSE_STRINGS = {"0", "false", "no", "off", ""}


def _lookup(name: str, store: EnvironmentSink | None) -> EnvValue | None:
    active = store if store is not None else process_environment()
    return active.get(name)


def get_string(name: str, *, store: EnvironmentSink | None = None) -> str:
    """Return the string form of ``name``, or an empty string when unset."""

    value = get_string_or_none(name, store=store)
    return "" if value is None else value


def get_string_or_none(name: str, *, store: EnvironmentSink | None = None) -> str | None:
    value = _lookup(name, store)
    if value is None:
        return None
    return value if isinstance(value, str) else to_env_string(value)


def get_bool(name: str, *, store: EnvironmentSink | None = None) -> bool:
    """Return ``name`` as a boolean, treating unset or unrecognised values as False."""

    return get_bool_or_none(name, store=store) is True


def get_bool_or_none(name: str, *, store: EnvironmentSink | None = None) -> bool | None:
    """Return ``name`` as a boolean.

    Typed booleans are returned unchanged. Strings coming from the system
    environment are matched case-insensitively against ``1/true/yes/on`` and
    ``0/false/no/off``; anything else, including an unset name, gives None.
    """

    value = _lookup(name, store)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    text = to_env_string(value).strip().lower()
    if text in TRUE_STRINGS:
        return True
    if text in FALSE_STRINGS:
        return False
    return None


def get_int(name: str, default: int = 0, *, store: EnvironmentSink | None = None) -> int:
    value = get_int_or_none(name, store=store)
    return default if value is None else value


def get_int_or_none(name: str, *, store: EnvironmentSink | None = None) -> int | None:
    """Return ``name`` as an int when it holds one, otherwise None."""

    value = _lookup(name, store)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and is_an_int(value.strip()):
        return int(value.strip())
    return None


__all__ = [
    "get_bool",
    "get_bool_or_none",
    "get_int",
    "get_int_or_none",
    "get_string",
    "get_string_or_none",
]
