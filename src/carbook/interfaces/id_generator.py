"""Interface for ID generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for a car id source.

    Ids are positive integers, strictly increasing per instance and never
    handed out twice, even when the record they were issued for is deleted.
    Implementations must be safe to call from several threads.
    """

    @abc.abstractmethod
    def new_id(self) -> int:
        """Generate a new unique identifier."""
