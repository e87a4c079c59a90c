"""Input validation for the car service facade.

Everything a caller sends is checked here before any command reaches the
store, so a rejected request never causes a partial write.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import Any

from carbook.domain.errors import InvalidPayloadError
from carbook.domain.model import CarUpdatePayload

TEXT_FIELDS = ("make", "model", "color", "owner")
TEXT_MAX_LENGTH = 255

# Benz Patent-Motorwagen
MIN_CAR_YEAR = 1886
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


def max_car_year() -> int:
    """Latest plausible model year: next calendar year (UTC)."""
    return datetime.datetime.now(datetime.timezone.utc).year + 1


def validate_car_id(raw: Any) -> int:
    """Return `raw` if it is a valid u64 car id.

    Raises:
        InvalidPayloadError: If `raw` is not an int in ``[0, 2**64 - 1]``.
    """
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InvalidPayloadError("id", f"must be an integer, got {type(raw).__name__}")
    if not 0 <= raw <= U64_MAX:
        raise InvalidPayloadError("id", "must be between 0 and 2**64 - 1")
    return raw


def validate_payload(raw: CarUpdatePayload | Mapping[str, Any]) -> CarUpdatePayload:
    """Check a create/update payload and return it as a `CarUpdatePayload`.

    Rules:
      - text fields (make, model, color, owner) are non-blank strings of at
        most 255 characters;
      - `year` is an int (not a bool) between 1886 and next year;
      - `is_booked` is a bool.

    Args:
        raw: A payload object or a mapping with exactly the payload fields.

    Raises:
        InvalidPayloadError: Naming the first offending field.
    """
    if isinstance(raw, CarUpdatePayload):
        payload = raw
    elif isinstance(raw, Mapping):
        payload = CarUpdatePayload.from_mapping(raw)
    else:
        raise InvalidPayloadError(
            "payload", f"must be a mapping, got {type(raw).__name__}"
        )

    for name in TEXT_FIELDS:
        _check_text(name, getattr(payload, name))
    _check_year(payload.year)
    if not isinstance(payload.is_booked, bool):
        raise InvalidPayloadError("is_booked", "must be a boolean")
    return payload


def _check_text(name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidPayloadError(name, "must be a string")
    if not value.strip():
        raise InvalidPayloadError(name, "must not be empty")
    if len(value) > TEXT_MAX_LENGTH:
        raise InvalidPayloadError(name, f"must be at most {TEXT_MAX_LENGTH} characters")


def _check_year(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPayloadError("year", "must be an integer")
    latest = min(max_car_year(), U32_MAX)
    if not MIN_CAR_YEAR <= value <= latest:
        raise InvalidPayloadError("year", f"must be between {MIN_CAR_YEAR} and {latest}")
