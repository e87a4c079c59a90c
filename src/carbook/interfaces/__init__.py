"""Ports the service layer depends on; adapters implement them."""

from .car_store import CarStore
from .clock import Clock
from .id_generator import IdGenerator
from .unit_of_work import AbstractUnitOfWork

__all__ = ["AbstractUnitOfWork", "CarStore", "Clock", "IdGenerator"]
