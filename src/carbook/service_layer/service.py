"""The car service facade.

`CarService` is the boundary of the application: the five RPC operations
(`add_car`, `get_car`, `update_car`, `delete_car`, `is_booked`) plus
`invoke`, which dispatches by method name. Every operation validates its
input first and returns a tagged result; expected failures never raise.

Example:
    ```py
    >>> service = bootstrap(build_memory_uow()).service
    >>> service.add_car({"make": "Toyota", "model": "Corolla", "color": "Red",
    ...                  "owner": "Alice", "year": 2020, "is_booked": False})
    Ok(value=Car(id=1, make='Toyota', ...))
    >>> service.invoke("get_car", 2)
    Err(error=NotFound(msg='a car with id=2 not found', code=404))
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from carbook.domain.errors import InvalidPayloadError
from carbook.domain.result import Err, InvalidPayload

from . import commands
from .validation import validate_car_id, validate_payload

if TYPE_CHECKING:
    from carbook.domain.model import CarUpdatePayload
    from carbook.domain.result import BooleanResult, CarResult

    from .messagebus import MessageBus

logger = logging.getLogger(__name__)


class UnknownMethodError(LookupError):
    """Raised by `CarService.invoke` for a method name it does not expose."""

    def __init__(self, method_name: str) -> None:
        super().__init__(
            f"Unknown method {method_name!r}; expected one of {', '.join(CarService.METHODS)}"
        )
        self.method_name = method_name


class CarService:
    """Validating facade over the message bus.

    Args:
        bus: Message bus wired with the car command handlers.
    """

    METHODS: tuple[str, ...] = (
        "add_car",
        "get_car",
        "update_car",
        "delete_car",
        "is_booked",
    )

    def __init__(self, bus: MessageBus) -> None:
        self.bus = bus

    def add_car(self, payload: CarUpdatePayload | Mapping[str, Any]) -> CarResult:
        """Create a car. Returns the stored car or ``Err(InvalidPayload)``."""
        try:
            cmd = commands.AddCar(validate_payload(payload))
        except InvalidPayloadError as e:
            return self._rejected("add_car", e)
        return self.bus.handle(cmd)

    def get_car(self, car_id: int) -> CarResult:
        """Read a car. Returns the car or ``Err(NotFound | InvalidPayload)``."""
        try:
            cmd = commands.GetCar(validate_car_id(car_id))
        except InvalidPayloadError as e:
            return self._rejected("get_car", e)
        return self.bus.handle(cmd)

    def update_car(
        self, car_id: int, payload: CarUpdatePayload | Mapping[str, Any]
    ) -> CarResult:
        """Overwrite a car's mutable fields. Returns the updated car or an `Err`."""
        try:
            cmd = commands.UpdateCar(validate_car_id(car_id), validate_payload(payload))
        except InvalidPayloadError as e:
            return self._rejected("update_car", e)
        return self.bus.handle(cmd)

    def delete_car(self, car_id: int) -> CarResult:
        """Delete a car. Returns the deleted car or an `Err`."""
        try:
            cmd = commands.DeleteCar(validate_car_id(car_id))
        except InvalidPayloadError as e:
            return self._rejected("delete_car", e)
        return self.bus.handle(cmd)

    def is_booked(self, car_id: int) -> BooleanResult:
        """Read a car's booking flag. Returns ``Ok(bool)`` or an `Err`."""
        try:
            cmd = commands.CheckBooking(validate_car_id(car_id))
        except InvalidPayloadError as e:
            return self._rejected("is_booked", e)
        return self.bus.handle(cmd)

    def invoke(self, method_name: str, *args: Any) -> CarResult | BooleanResult:
        """Call an operation by its RPC method name.

        Args:
            method_name: One of `METHODS`.
            *args: The operation's positional arguments.

        Raises:
            UnknownMethodError: If `method_name` is not one of `METHODS`.
            TypeError: If the number of arguments does not match the method.
        """
        if method_name not in self.METHODS:
            raise UnknownMethodError(method_name)
        return getattr(self, method_name)(*args)

    @staticmethod
    def _rejected(method_name: str, error: InvalidPayloadError) -> Err:
        logger.info("%s rejected: %s", method_name, error)
        return Err(InvalidPayload(str(error)))
