"""Environment settings for CARBOOK.

Every setting is read from a ``CARBOOK_*`` environment variable. The names
live here so the CLI options, the Alembic environment and the tests agree
on them. The database URL is the only setting the library itself needs;
the rest configure logging in the command-line interface.
"""

import os
import sys
from collections.abc import Mapping
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

ENV_PREFIX = "CARBOOK"  # pragma: no mutate


def envvar(name: str) -> str:
    """Return the environment variable for setting `name` (``log_path`` -> ``CARBOOK_LOG_PATH``)."""
    return f"{ENV_PREFIX}_{name.upper()}"


DB_URL_ENVVAR = envvar("db_url")
LOG_PATH_ENVVAR = envvar("log_path")
LOGGER_LEVELS_ENVVAR = envvar("logger_levels")
FLIGHT_RECORDER_ENVVAR = envvar("flight_recorder")
FLIGHT_RECORDER_CAPACITY_ENVVAR = envvar("flight_recorder_capacity")
FORCE_FLUSH_ENVVAR = envvar("force_flush_flight_recorder")

# Alembic "main" option names
ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate

MIGRATIONS_PACKAGE = "carbook.adapters.db.alembic"


class DatabaseUrlNotSetError(Exception):
    """Raised when no database URL is configured."""

    def __init__(self) -> None:
        super().__init__(f"{DB_URL_ENVVAR} is not set")


def get_db_url(environ: Mapping[str, str] | None = None) -> str:
    """Return the configured database URL.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``.

    Raises:
        DatabaseUrlNotSetError: If the variable is missing or blank.
    """
    env = os.environ if environ is None else environ
    url = env.get(DB_URL_ENVVAR, "").strip()
    if not url:
        raise DatabaseUrlNotSetError
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO | None = None
) -> Config:
    """Alembic config for the packaged ``cars`` migrations.

    No ``alembic.ini`` is involved. `db_url` may be omitted for commands
    that only read the scripts (``heads``, ``history``). Status lines go to
    `stdout`, which defaults to the ``sys.stdout`` of the moment of the call.
    """
    cfg = Config(stdout=sys.stdout if stdout is None else stdout)
    cfg.set_main_option(ALEMBIC_SCRIPT_LOCATION_KEY, str(files(MIGRATIONS_PACKAGE)))
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    return cfg
