"""Domain-layer error definitions.

These exceptions travel between the store, the handlers and the facade.
The facade turns the expected ones into `Err` values, so callers of the
public service never have to catch them.
"""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidCarError(DomainError):
    """Raised when a Car would violate one of its invariants."""

    def __init__(self, car_id: int, reason: str) -> None:
        super().__init__(f"Invalid car (id={car_id}): {reason}")
        self.car_id = car_id
        self.reason = reason


# ============================================================================
#                           Lookup and input errors
# ============================================================================


class CarNotFoundError(DomainError, LookupError):
    """Raised when no live record exists for a car id."""

    def __init__(self, car_id: int) -> None:
        super().__init__(f"a car with id={car_id} not found")
        self.car_id = car_id


class InvalidPayloadError(DomainError, ValueError):
    """Raised when request input fails validation."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"invalid payload: {field} {reason}")
        self.field = field
        self.reason = reason
