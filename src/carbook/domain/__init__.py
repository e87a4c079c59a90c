"""Domain layer: the Car record, its update payload and typed results."""

from .errors import CarNotFoundError, DomainError, InvalidCarError, InvalidPayloadError
from .model import Car, CarUpdatePayload
from .result import (
    BooleanResult,
    CarError,
    CarResult,
    Err,
    InvalidPayload,
    NotFound,
    Ok,
    Result,
    UnwrapError,
)

__all__ = [
    "BooleanResult",
    "Car",
    "CarError",
    "CarNotFoundError",
    "CarResult",
    "CarUpdatePayload",
    "DomainError",
    "Err",
    "InvalidCarError",
    "InvalidPayload",
    "InvalidPayloadError",
    "NotFound",
    "Ok",
    "Result",
    "UnwrapError",
]
