from pathlib import Path

from easyenv.loaders.env_file import load
from easyenv.loaders.environment import EnvironmentStore
from easyenv.utils.logging import NullLogger, WarningLogger, render_summary


def test_logger_writes_skipped_rows_to_log_file(fixtures_path: Path, tmp_path: Path) -> None:
    logger = WarningLogger("app env", log_dir=tmp_path / "logs")

    load(
        fixtures_path / "broken.env",
        silent=True,
        store=EnvironmentStore.in_memory(),
        logger=logger,
    )

    assert logger.log_path.name.startswith("app_env_")
    written = logger.log_path.read_text(encoding="utf-8").splitlines()
    assert len(written) == 2
    assert written[0].endswith("[W001][Row] Skipped invalid row 'this line has no equals sign'")
    assert render_summary(logger) == f"Found 2 warnings. See {logger.log_path.name}"


def test_logger_creates_no_file_without_warnings(fixtures_path: Path, tmp_path: Path) -> None:
    logger = WarningLogger("env", log_dir=tmp_path / "logs")

    load(fixtures_path / "basic.env", store=EnvironmentStore.in_memory(), logger=logger)

    assert not logger.has_warnings()
    assert not logger.log_path.exists()


def test_null_logger_keeps_warnings_in_memory() -> None:
    logger = NullLogger()
    logger.warn(
        filename="missing.env",
        line=None,
        element_type="File",
        message="Skipped unreadable file",
        code="file-unreadable",
    )

    assert logger.warnings[0].format() == "missing.env [W002][File] Skipped unreadable file"
    assert logger.summary() == "Found 1 warnings."
