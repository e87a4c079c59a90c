"""Tagged results returned by the car service.

Every service operation returns either ``Ok(value)`` or ``Err(error)``.
Expected failures (an unknown id, a malformed payload) are values, not
exceptions; callers inspect the tag before touching the payload::

    result = service.get_car(1)
    if isinstance(result, Ok):
        print(result.value.make)
    else:
        print(result.error.msg)

`to_dict` renders the logical wire shape used by the RPC surface,
e.g. ``{"Err": {"NotFound": {"code": 404, "msg": "..."}}}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, NoReturn, TypeAlias, TypeVar

from .model import Car

T = TypeVar("T")

NOT_FOUND_CODE = 404
INVALID_PAYLOAD_CODE = 400


class UnwrapError(Exception):
    """Raised when `unwrap()` is called on an `Err`."""

    def __init__(self, error: CarError) -> None:
        super().__init__(f"called unwrap() on Err: {error.msg}")
        self.error = error


# ============================================================================
#                               Error variants
# ============================================================================


@dataclass(frozen=True, slots=True)
class NotFound:
    """No live record exists for the requested id."""

    TAG: ClassVar[str] = "NotFound"

    msg: str
    code: int = NOT_FOUND_CODE

    @classmethod
    def for_car(cls, car_id: int) -> NotFound:
        """Build the canonical not-found error for `car_id`."""
        return cls(f"a car with id={car_id} not found")

    def to_dict(self) -> dict[str, Any]:
        """Render as ``{"NotFound": {"code": ..., "msg": ...}}``."""
        return {self.TAG: {"code": self.code, "msg": self.msg}}


@dataclass(frozen=True, slots=True)
class InvalidPayload:
    """The request failed validation before reaching the store."""

    TAG: ClassVar[str] = "InvalidPayload"

    msg: str
    code: int = INVALID_PAYLOAD_CODE

    def to_dict(self) -> dict[str, Any]:
        """Render as ``{"InvalidPayload": {"code": ..., "msg": ...}}``."""
        return {self.TAG: {"code": self.code, "msg": self.msg}}


CarError: TypeAlias = NotFound | InvalidPayload


# ============================================================================
#                               Result variants
# ============================================================================


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying `value`."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        value = self.value
        if isinstance(value, Car):
            return {"Ok": value.to_dict()}
        return {"Ok": value}


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome carrying a typed `error`."""

    error: CarError

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(self.error)

    def to_dict(self) -> dict[str, Any]:
        return {"Err": self.error.to_dict()}


Result: TypeAlias = Ok[T] | Err
CarResult: TypeAlias = Ok[Car] | Err
BooleanResult: TypeAlias = Ok[bool] | Err
