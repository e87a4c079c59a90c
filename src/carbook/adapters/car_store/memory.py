"""In-memory CarStore implementation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from carbook.adapters.clock import SystemClock
from carbook.adapters.id_generators import SequentialIdGenerator
from carbook.domain.errors import CarNotFoundError
from carbook.domain.model import Car
from carbook.interfaces.car_store import CarStore

if TYPE_CHECKING:
    from collections.abc import Callable

    from carbook.domain.model import CarUpdatePayload
    from carbook.interfaces.clock import Clock
    from carbook.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InMemoryCarData:
    """Backing state shared by an in-memory store and its unit of work.

    `cars` is keyed by car id. `ids` is the id source; it lives here rather
    than in the store so that ids keep increasing across store instances
    built over the same data (one per unit of work).
    """

    cars: dict[int, Car] = field(default_factory=dict)
    ids: IdGenerator = field(default_factory=SequentialIdGenerator)


class InMemoryCarStore(CarStore):
    """CarStore keeping cars in a dict.

    Note: Not thread-safe by itself. Concurrent callers go through
    `InMemoryUnitOfWork`, which serializes access.

    Args:
        data: The shared backing state.
        clock: Time source for `created_at`/`updated_at`.
        before_write: Called before every change to `data.cars`; the unit of
            work uses it to snapshot lazily.
    """

    def __init__(
        self,
        data: InMemoryCarData,
        clock: Clock | None = None,
        before_write: Callable[[], None] | None = None,
    ) -> None:
        self._data = data
        self._clock = clock or SystemClock()
        self._before_write = before_write

    def add(self, payload: CarUpdatePayload) -> Car:
        car = Car.create(self._data.ids.new_id(), payload, self._clock.now_ns())
        self._touch()
        self._data.cars[car.id] = car
        logger.debug("Stored car %s", car.id)
        return car

    def get(self, car_id: int) -> Car | None:
        return self._data.cars.get(car_id)

    def update(self, car_id: int, payload: CarUpdatePayload) -> Car:
        current = self._require(car_id)
        # wall clocks can step backwards; keep created_at <= updated_at
        updated_at = max(self._clock.now_ns(), current.created_at)
        car = current.apply(payload, updated_at)
        # the record can be removed while the clock is read
        if car_id not in self._data.cars:
            raise CarNotFoundError(car_id)
        self._touch()
        self._data.cars[car_id] = car
        return car

    def delete(self, car_id: int) -> Car:
        car = self._require(car_id)
        self._touch()
        if self._data.cars.pop(car_id, None) is None:
            raise CarNotFoundError(car_id)
        return car

    def is_booked(self, car_id: int) -> bool:
        return self._require(car_id).is_booked

    def _touch(self) -> None:
        if self._before_write is not None:
            self._before_write()

    def _require(self, car_id: int) -> Car:
        if (car := self._data.cars.get(car_id)) is None:
            raise CarNotFoundError(car_id)
        return car
