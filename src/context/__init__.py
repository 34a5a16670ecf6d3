"""Application context shared by service entries."""

from .entry import Entry, EntryRegFunc
from .app_context import (
    AppContext,
    LoggerPair,
    ShutdownHook,
    DEFAULT_APPLICATION_NAME,
    DEFAULT_LOGGER_NAME,
)

__all__ = [
    "Entry",
    "EntryRegFunc",
    "AppContext",
    "LoggerPair",
    "ShutdownHook",
    "DEFAULT_APPLICATION_NAME",
    "DEFAULT_LOGGER_NAME",
]
