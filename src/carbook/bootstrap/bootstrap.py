"""Bootstrap the message bus and car service with a unit of work."""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from carbook import config
from carbook.adapters.car_store.memory import InMemoryCarData
from carbook.adapters.db.engine import make_engine
from carbook.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from carbook.service_layer.handlers import COMMAND_HANDLERS
from carbook.service_layer.messagebus import MessageBus
from carbook.service_layer.service import CarService

if TYPE_CHECKING:
    from carbook.interfaces.clock import Clock
    from carbook.interfaces.unit_of_work import AbstractUnitOfWork
    from carbook.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    service: CarService


def build_write_uow(url: str, clock: Clock | None = None) -> SqlAlchemyUnitOfWork:
    """Build a database-backed unit of work for `url`."""
    return SqlAlchemyUnitOfWork(make_engine(url), clock)


def build_memory_uow(
    data: InMemoryCarData | None = None, clock: Clock | None = None
) -> InMemoryUnitOfWork:
    """Build a process-local unit of work (fresh, empty store by default)."""
    return InMemoryUnitOfWork(data, clock)


def build_message_bus(
    uow: AbstractUnitOfWork, command_handlers: Mapping[type[Command], Callable[..., Any]]
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }
    return MessageBus(uow, command_handlers=injected_command_handlers)


def bootstrap(uow: AbstractUnitOfWork | None = None) -> AppContainer:
    """Wire the car service.

    Args:
        uow: Unit of work to use. When omitted, a database unit of work is
            built from ``CARBOOK_DB_URL``.

    Raises:
        DatabaseUrlNotSetError: If `uow` is omitted and ``CARBOOK_DB_URL`` is unset.
    """
    if uow is None:
        uow = build_write_uow(config.get_db_url())
    logger.debug("Bootstrapping with %s", type(uow).__name__)
    message_bus = build_message_bus(uow, COMMAND_HANDLERS)
    return AppContainer(message_bus=message_bus, service=CarService(message_bus))


def inject_dependencies(
    handler: Callable[..., Any], dependencies: Mapping[str, object]
) -> Callable[..., Any]:
    """Bind the dependencies a handler declares (by parameter name)."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
