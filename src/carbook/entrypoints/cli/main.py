"""CARBOOK CLI entry point.

Defines the top-level ``carbook`` command (via Click-Extra) and registers
its command groups:

- ``carbook db``: forward-only database management (upgrade/current/heads/history/status).
- ``carbook cars``: add, get, update, delete and is-booked.

The version comes from `carbook.__version__` and is displayed by Click-Extra
(``--version``). Every option can also be set through a ``CARBOOK_*``
environment variable.

Examples
    $ carbook --version
    $ carbook db upgrade
    $ carbook cars add --make Toyota --model Corolla --color Red --owner Alice --year 2020
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from carbook import __version__, config
from carbook.logging import config_console_handler, config_flight_recorder, log_startup

from .cars import cars as cars_group
from .db import db as db_group
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """CARBOOK command-line interface.

    CARBOOK keeps a registry of cars and whether each one is booked. Cars
    can be added, read, overwritten and deleted; every command prints its
    result as JSON.
    """

DEFAULT_LOG_PATH = (
    Path(user_log_dir("carbook", appauthor=False, ensure_exists=True)) / "latest.log"
)

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Database: set CARBOOK_DB_URL, then run 'carbook db upgrade'",
        "  Logs    : " + hyperlink(DEFAULT_LOG_PATH.as_uri()),
    ]
)


def effective_level(verbose_count: int, quiet_count: int) -> int:
    """Console level: WARNING moved one step per -v (down) or -q (up)."""
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths on the console).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file written by the flight recorder.",
    default=DEFAULT_LOG_PATH,
    envvar=config.LOG_PATH_ENVVAR,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar=config.FLIGHT_RECORDER_CAPACITY_ENVVAR,
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via CARBOOK_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a WARNING/ERROR "
        "occurs, or on clean exit if --force-flush is set."
    ),
    default=True,
    envvar=config.FLIGHT_RECORDER_ENVVAR,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR; console output is unaffected."
    ),
    default=False,
    show_default=True,
    envvar=config.FORCE_FLUSH_ENVVAR,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). This changes the "
        "logger's own level, so it applies to BOTH console and flight-recorder. "
        "Repeatable (e.g. -L sqlalchemy=INFO -L carbook.service_layer=DEBUG) "
        "or via CARBOOK_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    envvar=config.LOGGER_LEVELS_ENVVAR,
    show_envvar=True,
)
@clickx.pass_context
def carbook(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """CARBOOK command-line interface."""

    level = effective_level(verbose_count, quiet_count)
    handlers: list[Handler] = []

    # None or True => allow color
    use_color = ctx.color is not False
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    if flight_recorder:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # root captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=logging.DEBUG if debug else level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        db_url=_configured_db_url(),
    )

    # runs after the subcommand returns
    ctx.call_on_close(logging.shutdown)


def _configured_db_url() -> str | None:
    try:
        return config.get_db_url()
    except config.DatabaseUrlNotSetError:
        return None


carbook.add_command(db_group)
carbook.add_command(cars_group)
