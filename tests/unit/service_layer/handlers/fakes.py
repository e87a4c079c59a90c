"""Fake implementations for testing service layer handlers."""

from carbook.adapters.car_store.memory import InMemoryCarData, InMemoryCarStore
from carbook.bootstrap.bootstrap import build_message_bus
from carbook.interfaces.unit_of_work import AbstractUnitOfWork
from carbook.service_layer.handlers import COMMAND_HANDLERS

from tests.helpers.clocks import SteppingClock


class FakeUoW(AbstractUnitOfWork):
    """A unit of work over an in-memory store that records commits."""

    def __init__(self, clock=None):
        self.data = InMemoryCarData(cars={})
        self.cars = InMemoryCarStore(self.data, clock or SteppingClock())
        self.committed = False
        self.commits = 0

    def commit(self):
        self.committed = True
        self.commits += 1

    def rollback(self):
        pass


def bootstrap_test_bus(clock=None):
    """Bootstrap a message bus over a fresh `FakeUoW`."""
    return build_message_bus(uow=FakeUoW(clock), command_handlers=COMMAND_HANDLERS)
