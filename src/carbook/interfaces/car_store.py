"""Interface for the Car record store."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from carbook.domain.model import Car, CarUpdatePayload


class CarStore(abc.ABC):
    """Keyed storage of Car records with store-assigned ids.

    The store is the only owner of Car state. It hands out immutable `Car`
    snapshots, so nothing a caller does to a returned value can change what
    is stored.

    Payloads are assumed to be validated already; the store does not
    re-check field values.
    """

    @abc.abstractmethod
    def add(self, payload: CarUpdatePayload) -> Car:
        """Store a new car built from `payload`.

        The new car gets a fresh id, `created_at` set to the current time and
        no `updated_at`.

        Args:
            payload: Field values for the new car.

        Returns:
            The stored car.
        """

    @abc.abstractmethod
    def get(self, car_id: int) -> Car | None:
        """Get a car by id.

        Args:
            car_id: The id assigned when the car was added.

        Returns:
            The car if it exists, otherwise None.
        """

    @abc.abstractmethod
    def update(self, car_id: int, payload: CarUpdatePayload) -> Car:
        """Overwrite every mutable field of a car and stamp `updated_at`.

        `updated_at` is the current time, but never earlier than `created_at`.

        Args:
            car_id: The id of the car to update.
            payload: New field values.

        Returns:
            The updated car.

        Raises:
            CarNotFoundError: If no car exists with `car_id`.
        """

    @abc.abstractmethod
    def delete(self, car_id: int) -> Car:
        """Remove a car.

        Args:
            car_id: The id of the car to delete.

        Returns:
            The car as it was just before removal.

        Raises:
            CarNotFoundError: If no car exists with `car_id`.
        """

    @abc.abstractmethod
    def is_booked(self, car_id: int) -> bool:
        """Return the booking flag of a car.

        Raises:
            CarNotFoundError: If no car exists with `car_id`.
        """
