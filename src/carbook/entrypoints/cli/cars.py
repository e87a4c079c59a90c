"""``carbook cars``: the five car operations from the command line.

Each command prints the operation's result as JSON on **stdout**, e.g.::

    $ carbook cars get 7
    {"Err": {"NotFound": {"code": 404, "msg": "a car with id=7 not found"}}}

and exits with status 1 when the result is an ``Err``. Cars are stored in the
database named by ``CARBOOK_DB_URL``; run ``carbook db upgrade`` first.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from sqlalchemy.exc import OperationalError, ProgrammingError

from carbook.bootstrap import AppContainer, bootstrap, build_write_uow
from carbook.domain.model import CarUpdatePayload

from .db import UPGRADE_SCHEMA_INSTRUCTIONS, resolve_db_url

if TYPE_CHECKING:
    from collections.abc import Callable

    from carbook.domain.result import BooleanResult, CarResult

logger = logging.getLogger(__name__)

SCHEMA_ERROR_MSG = "The database rejected the request; is the schema up to date?"


def payload_options(func: Callable) -> Callable:
    """Attach the text and year options of a car payload."""
    options = [
        click.option("--make", required=True, help="Manufacturer, e.g. Toyota."),
        click.option("--model", required=True, help="Model name, e.g. Corolla."),
        click.option("--color", required=True, help="Body color."),
        click.option("--owner", required=True, help="Owner name."),
        click.option("--year", type=int, required=True, help="Model year."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def booking_option(*, required: bool) -> Callable[[Callable], Callable]:
    """The ``--booked/--available`` flag.

    `add` defaults to available. `update` overwrites every field, so it
    requires the flag rather than quietly unbooking the car.
    """
    if required:
        return click.option(
            "--booked/--available",
            "is_booked",
            required=True,
            default=None,
            help="Booking flag (required: update overwrites every field).",
        )
    return click.option(
        "--booked/--available",
        "is_booked",
        default=False,
        show_default=True,
        help="Booking flag.",
    )


def get_container(ctx: click.Context) -> AppContainer:
    """Return the container on the context, wiring a database one if absent."""
    if (container := ctx.find_object(AppContainer)) is None:
        container = bootstrap(build_write_uow(resolve_db_url()))
        ctx.obj = container
    return container


def emit(ctx: click.Context, call: Callable[[], CarResult | BooleanResult]) -> None:
    """Run `call`, print its result as JSON and exit 1 on ``Err``."""
    try:
        result = call()
    except (OperationalError, ProgrammingError) as e:
        raise click.ClickException(
            f"{SCHEMA_ERROR_MSG}\n{UPGRADE_SCHEMA_INSTRUCTIONS}"
        ) from e
    click.echo(json.dumps(result.to_dict()))
    if result.is_err():
        ctx.exit(1)


@click.group(cls=clickx.ExtraGroup)
def cars() -> None:
    """Create, read, update and delete cars."""


@cars.command()
@payload_options
@booking_option(required=False)
@click.pass_context
def add(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    make: str,
    model: str,
    color: str,
    owner: str,
    year: int,
    is_booked: bool,
) -> None:
    """Add a car and print it with its new id."""
    payload = CarUpdatePayload(
        is_booked=is_booked, model=model, owner=owner, make=make, color=color, year=year
    )
    service = get_container(ctx).service
    emit(ctx, lambda: service.add_car(payload))


@cars.command()
@click.argument("car_id", metavar="ID", type=int)
@click.pass_context
def get(ctx: click.Context, car_id: int) -> None:
    """Print the car with the given ID."""
    service = get_container(ctx).service
    emit(ctx, lambda: service.get_car(car_id))


@cars.command()
@click.argument("car_id", metavar="ID", type=int)
@payload_options
@booking_option(required=True)
@click.pass_context
def update(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    car_id: int,
    make: str,
    model: str,
    color: str,
    owner: str,
    year: int,
    is_booked: bool,
) -> None:
    """Overwrite every field of the car with the given ID."""
    payload = CarUpdatePayload(
        is_booked=is_booked, model=model, owner=owner, make=make, color=color, year=year
    )
    service = get_container(ctx).service
    emit(ctx, lambda: service.update_car(car_id, payload))


@cars.command()
@click.argument("car_id", metavar="ID", type=int)
@click.pass_context
def delete(ctx: click.Context, car_id: int) -> None:
    """Delete the car with the given ID and print it."""
    service = get_container(ctx).service
    emit(ctx, lambda: service.delete_car(car_id))


@cars.command("is-booked")
@click.argument("car_id", metavar="ID", type=int)
@click.pass_context
def is_booked_cmd(ctx: click.Context, car_id: int) -> None:
    """Print whether the car with the given ID is booked."""
    service = get_container(ctx).service
    emit(ctx, lambda: service.is_booked(car_id))
