"""Environment stores that loaded entries are written into."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, MutableMapping, Protocol

from easyenv.parsing.values import EnvValue, to_env_string


class EnvironmentSink(Protocol):
    """Capability the loader needs to read and write environment values."""

    def get(self, name: str) -> EnvValue | None:
        """Return the current value for ``name`` or None when unset."""

    def has_value(self, name: str) -> bool:
        """Return True when ``name`` is set to a non-empty value."""

    def set(self, name: str, value: EnvValue, *, system: bool = True) -> None:
        """Store a value, optionally propagating its string form to the OS."""


@dataclass
class EnvironmentStore:
    """Typed in-process values backed by a string-only system mapping.

    ``values`` keeps the coerced Python objects; ``system`` receives their
    string form and is ``os.environ`` for the process-wide store.
    """

    values: dict[str, EnvValue] = field(default_factory=dict)
    system: MutableMapping[str, str] = field(default_factory=dict)

    @classmethod
    def in_memory(cls, seed: Mapping[str, str] | None = None) -> "EnvironmentStore":
        """Create a store that never touches ``os.environ``.

        Args:
            seed: Optional system variables to start from, e.g. a copy of
                ``os.environ`` for dry runs.
        """

        return cls(values={}, system=dict(seed or {}))

    def get(self, name: str) -> EnvValue | None:
        if name in self.values:
            return self.values[name]
        return self.system.get(name)

    def has_value(self, name: str) -> bool:
        value = self.get(name)
        return value is not None and to_env_string(value) != ""

    def set(self, name: str, value: EnvValue, *, system: bool = True) -> None:
        self.values[name] = value
        if system:
            self.system[name] = to_env_string(value)


_PROCESS_STORE = EnvironmentStore(values={}, system=os.environ)


def process_environment() -> EnvironmentStore:
    """Return the process-wide store bound to ``os.environ``."""

    return _PROCESS_STORE


__all__ = ["EnvironmentSink", "EnvironmentStore", "process_environment"]
