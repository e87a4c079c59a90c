"""Application wiring."""

from .bootstrap import (
    AppContainer,
    bootstrap,
    build_memory_uow,
    build_message_bus,
    build_write_uow,
    inject_dependencies,
)

__all__ = [
    "AppContainer",
    "bootstrap",
    "build_memory_uow",
    "build_message_bus",
    "build_write_uow",
    "inject_dependencies",
]
