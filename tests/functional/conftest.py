"""Fixtures for CLI flows driven through ``click.testing.CliRunner``."""

from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name


@pytest.fixture
def cli_env(tmp_path: Path, sqlite_url: str) -> dict[str, str]:
    """Environment pointing the CLI at a scratch SQLite file and log path."""
    return {
        "CARBOOK_DB_URL": sqlite_url,
        "CARBOOK_LOG_PATH": str(tmp_path / "logs" / "latest.log"),
    }


@pytest.fixture
def runner(cli_env: dict[str, str]) -> CliRunner:
    """CliRunner with `cli_env` applied to every invocation."""
    return CliRunner(env=cli_env)


@pytest.fixture
def no_url_runner(tmp_path: Path) -> CliRunner:
    """CliRunner for a user who has not set ``CARBOOK_DB_URL`` yet."""
    return CliRunner(
        env={
            "CARBOOK_DB_URL": "",
            "CARBOOK_LOG_PATH": str(tmp_path / "logs" / "latest.log"),
        }
    )
