"""The Car record and the payload used to create or update it."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from .errors import InvalidCarError, InvalidPayloadError

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True, slots=True)
class CarUpdatePayload:
    """Every mutable Car field, as supplied by a caller.

    The payload is never stored; the store copies its values into a `Car`.
    Values are not checked here; see `carbook.service_layer.validation`.
    """

    is_booked: bool
    model: str
    owner: str
    make: str
    color: str
    year: int

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of the payload fields, in declaration order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CarUpdatePayload:
        """Build a payload from a raw mapping such as decoded JSON.

        Raises:
            InvalidPayloadError: If a field is missing or an unknown key is present.
        """
        expected = set(cls.field_names())
        if missing := sorted(expected - data.keys()):
            raise InvalidPayloadError(missing[0], "is required")
        if unknown := sorted(set(data.keys()) - expected, key=str):
            raise InvalidPayloadError(str(unknown[0]), "is not a payload field")
        return cls(**{name: data[name] for name in cls.field_names()})

    def to_dict(self) -> dict[str, Any]:
        """Return the payload as a plain dict."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Car:
    """Immutable snapshot of a stored car.

    Conventions:
      - `id` is assigned by the store and never reused.
      - `created_at` / `updated_at` are nanoseconds since the Unix epoch.
      - `updated_at` is None until the first successful update. None is
        distinct from 0, which would be a (strange) real timestamp.
    """

    id: int
    make: str
    model: str
    color: str
    owner: str
    year: int
    is_booked: bool
    created_at: int
    updated_at: int | None = None

    def __post_init__(self) -> None:
        if self.updated_at is not None and self.updated_at < self.created_at:
            raise InvalidCarError(self.id, "updated_at must not precede created_at")

    @classmethod
    def create(cls, car_id: int, payload: CarUpdatePayload, created_at: int) -> Car:
        """Build a never-updated car from a payload."""
        return cls(
            id=car_id,
            make=payload.make,
            model=payload.model,
            color=payload.color,
            owner=payload.owner,
            year=payload.year,
            is_booked=payload.is_booked,
            created_at=created_at,
        )

    def apply(self, payload: CarUpdatePayload, updated_at: int) -> Car:
        """Return a copy with every mutable field taken from `payload`."""
        return replace(
            self,
            make=payload.make,
            model=payload.model,
            color=payload.color,
            owner=payload.owner,
            year=payload.year,
            is_booked=payload.is_booked,
            updated_at=updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the car as a plain, JSON-ready dict."""
        return asdict(self)
