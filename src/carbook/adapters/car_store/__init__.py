"""CarStore adapters: in-memory and SQLAlchemy."""

from .memory import InMemoryCarData, InMemoryCarStore
from .sqlalchemy_store import SqlAlchemyCarStore

__all__ = ["InMemoryCarData", "InMemoryCarStore", "SqlAlchemyCarStore"]
