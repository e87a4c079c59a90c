"""Unit of Work interface for CARBOOK.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing a CarStore and abstract commit/rollback methods.
"""

from __future__ import annotations

import abc

from .car_store import CarStore


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work.

    One service operation runs inside one unit of work, so it observes a
    consistent view of the store and commits as a single unit.
    """

    cars: CarStore

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
