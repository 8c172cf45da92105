"""Shared fixtures for CLI tests."""

import pytest
import structlog
from typer.testing import CliRunner

from course_catalog_common import get_settings

END = "Instructor Permission Required: No\\"


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_cli_state(monkeypatch):
    """Isolate each command from the environment and from logging set up by the previous one."""
    for var in (
        "CATALOG_INPUT_PATH",
        "CATALOG_OUTPUT_PATH",
        "CATALOG_OUTPUT_FORMAT",
        "CATALOG_DATASETS_DIR",
        "CATALOG_STRICT",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def catalog_file(tmp_path):
    """Small catalog text using department codes from the packaged datasets."""
    path = tmp_path / "catalog_text.txt"
    path.write_text(
        "\n".join(
            [
                "Course Offerings\\",
                f"HIST 264 Topics in World History \\ Survey. {END}",
                f"HISP 390 Latin American Film \\ Spanish section. {END}",
                f"LALS 390 Latin American Film \\ Cross-listed. {END}",
                f"PHYS 107 Introductory Physics of Living \\ Lab. {END}",
                f"ENGS 121G Writing About Place \\ Seminar. {END}",
                f"FYS 445 First-Year Seminar \\ Retired. {END}",
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def keeperless_catalog_file(tmp_path):
    """Two cross-listed codes sharing a title, neither of them a keeper."""
    path = tmp_path / "keeperless.txt"
    path.write_text(
        "Course Offerings\\ "
        f"ANTH 301 Ritual \\ a {END} "
        f"REL 301 Ritual \\ b {END}",
        encoding="utf-8",
    )
    return path
