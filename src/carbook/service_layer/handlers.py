"""Service layer handlers.

Each handler runs one command inside one unit of work and returns a
typed result. A missing car is an expected outcome and comes back as
``Err(NotFound)``; anything else propagates.
"""

import logging
from collections.abc import Callable

from carbook.domain.errors import CarNotFoundError
from carbook.domain.result import BooleanResult, CarResult, Err, NotFound, Ok
from carbook.interfaces.unit_of_work import AbstractUnitOfWork

from . import commands

logger = logging.getLogger(__name__)


def add_car(cmd: commands.AddCar, uow: AbstractUnitOfWork) -> CarResult:
    """Store a new car."""
    with uow:
        car = uow.cars.add(cmd.payload)
        uow.commit()
    logger.info("Added car %s (%s %s)", car.id, car.make, car.model)
    return Ok(car)


def get_car(cmd: commands.GetCar, uow: AbstractUnitOfWork) -> CarResult:
    """Read a car."""
    with uow:
        car = uow.cars.get(cmd.car_id)
    if car is None:
        logger.debug("GetCar %s: not found", cmd.car_id)
        return Err(NotFound.for_car(cmd.car_id))
    return Ok(car)


def update_car(cmd: commands.UpdateCar, uow: AbstractUnitOfWork) -> CarResult:
    """Overwrite the mutable fields of a car."""
    with uow:
        try:
            car = uow.cars.update(cmd.car_id, cmd.payload)
        except CarNotFoundError:
            logger.debug("UpdateCar %s: not found", cmd.car_id)
            return Err(NotFound.for_car(cmd.car_id))
        uow.commit()
    logger.info("Updated car %s (booked=%s)", car.id, car.is_booked)
    return Ok(car)


def delete_car(cmd: commands.DeleteCar, uow: AbstractUnitOfWork) -> CarResult:
    """Remove a car and return it."""
    with uow:
        try:
            car = uow.cars.delete(cmd.car_id)
        except CarNotFoundError:
            logger.debug("DeleteCar %s: not found", cmd.car_id)
            return Err(NotFound.for_car(cmd.car_id))
        uow.commit()
    logger.info("Deleted car %s", car.id)
    return Ok(car)


def check_booking(cmd: commands.CheckBooking, uow: AbstractUnitOfWork) -> BooleanResult:
    """Read the booking flag of a car."""
    with uow:
        try:
            booked = uow.cars.is_booked(cmd.car_id)
        except CarNotFoundError:
            logger.debug("CheckBooking %s: not found", cmd.car_id)
            return Err(NotFound.for_car(cmd.car_id))
    return Ok(booked)


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., object]] = {
    commands.AddCar: add_car,
    commands.GetCar: get_car,
    commands.UpdateCar: update_car,
    commands.DeleteCar: delete_car,
    commands.CheckBooking: check_booking,
}
