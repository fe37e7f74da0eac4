from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from easyenv.loaders.environment import EnvironmentStore, process_environment  # noqa: E402

FIXTURE_NAMES = (
    "TEST1",
    "TEST2",
    "PORT",
    "OFFSET",
    "RATIO",
    "DEBUG",
    "VERBOSE",
    "CACHE",
    "NAME",
    "GREETING",
    "FAREWELL",
    "QUOTED_NAME",
    "GOOD",
    "AFTER",
)


@pytest.fixture
def fixtures_path() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def memory_store() -> EnvironmentStore:
    return EnvironmentStore.in_memory()


@pytest.fixture
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> EnvironmentStore:
    """Process store with fixture names unset; restored after the test."""
    store = process_environment()
    monkeypatch.setattr(store, "values", {})
    for name in FIXTURE_NAMES:
        # setenv first so monkeypatch records the name and removes it on undo
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return store
