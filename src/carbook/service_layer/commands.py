"""Module defining Commands.

One command per car service operation. Commands carry already-validated
input; validation happens in the facade before a command is built.
"""

from dataclasses import dataclass

from carbook.domain.model import CarUpdatePayload


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class AddCar(Command):
    """Command to store a new car."""

    payload: CarUpdatePayload


@dataclass(frozen=True)
class GetCar(Command):
    """Command to read a car by id."""

    car_id: int


@dataclass(frozen=True)
class UpdateCar(Command):
    """Command to overwrite the mutable fields of an existing car."""

    car_id: int
    payload: CarUpdatePayload


@dataclass(frozen=True)
class DeleteCar(Command):
    """Command to remove a car."""

    car_id: int


@dataclass(frozen=True)
class CheckBooking(Command):
    """Command to read the booking flag of a car."""

    car_id: int
