"""
@meta
name: app_context
type: runtime
domain: context
responsibility:
  - Hold process-wide service state (name, start time, loggers, configs, values)
  - Keep entries, entry registration functions and shutdown hooks
  - Turn shutdown signals into a waitable event
inputs:
  - Loggers, config trees, entries registered by the service
outputs:
  - AppContext instance passed to entry points
tags:
  - runtime
  - context
lifecycle:
  status: active
"""

from __future__ import annotations

import logging
import signal
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

from common.shared.logging_utils import LoggerConfig, get_logger, get_nop_logger

from .entry import Entry, EntryRegFunc

DEFAULT_APPLICATION_NAME = "app"
DEFAULT_LOGGER_NAME = "default"

SHUTDOWN_SIGNAL_NAMES = ("SIGHUP", "SIGINT", "SIGTERM", "SIGQUIT")

ShutdownHook = Callable[[], None]


@dataclass
class LoggerPair:
    """A logger together with the config it was built from, so it can be rebuilt."""

    logger: logging.Logger
    config: LoggerConfig = field(default_factory=LoggerConfig)


class AppContext:
    """
    Service-wide state shared by entries.

    Construct one per process at the entry point and pass it explicitly;
    call ``close()`` on teardown. No internal locking is done, callers that
    share a context across threads synchronise themselves.
    """

    def __init__(self, application_name: str = DEFAULT_APPLICATION_NAME):
        self.application_name = application_name
        self.start_time = datetime.now(timezone.utc)
        self._loggers: Dict[str, LoggerPair] = {}
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._values: Dict[str, Any] = {}
        self._entries: Dict[str, Entry] = {}
        self._entry_reg_funcs: List[EntryRegFunc] = []
        self._shutdown_hooks: Dict[str, ShutdownHook] = {}
        self._shutdown_event = threading.Event()
        self._shutdown_signal: Optional[int] = None
        self._previous_handlers: Dict[int, Any] = {}

        self.add_logger_pair(DEFAULT_LOGGER_NAME, LoggerPair(logger=get_logger(DEFAULT_LOGGER_NAME)))

    # Uptime
    def up_time(self) -> timedelta:
        return datetime.now(timezone.utc) - self.start_time

    # Custom values
    def add_value(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get_value(self, key: str) -> Any:
        return self._values.get(key)

    def list_values(self) -> Dict[str, Any]:
        return self._values

    def delete_value(self, key: str) -> None:
        self._values.pop(key, None)

    def clear_values(self) -> None:
        self._values.clear()

    # Loggers
    def add_logger_pair(self, name: str, pair: Optional[LoggerPair]) -> str:
        """
        Register a logger pair.

        Returns:
            The stored name; ``logger-<n>`` when ``name`` is empty, or an empty
            string when ``pair`` is None (nothing stored).
        """
        if pair is None:
            return ""
        if not name:
            name = f"logger-{len(self._loggers) + 1}"
        self._loggers[name] = pair
        return name

    def get_logger_pair(self, name: str) -> Optional[LoggerPair]:
        return self._loggers.get(name)

    def list_logger_pairs(self) -> Dict[str, LoggerPair]:
        return self._loggers

    def get_logger(self, name: str) -> logging.Logger:
        """Return the named logger, or a logger discarding every record when missing."""
        pair = self._loggers.get(name)
        if pair is None:
            return get_nop_logger()
        return pair.logger

    def get_default_logger(self) -> logging.Logger:
        return self.get_logger(DEFAULT_LOGGER_NAME)

    def get_logger_config(self, name: str) -> Optional[LoggerConfig]:
        pair = self._loggers.get(name)
        return pair.config if pair is not None else None

    # Configs
    def add_config(self, name: str, config: Optional[Dict[str, Any]]) -> None:
        if config is None or not name:
            return
        self._configs[name] = config

    def get_config(self, name: str) -> Optional[Dict[str, Any]]:
        return self._configs.get(name)

    def list_configs(self) -> Dict[str, Dict[str, Any]]:
        return self._configs

    # Entries
    def register_entry(self, reg_func: Optional[EntryRegFunc]) -> None:
        if reg_func is None:
            return
        self._entry_reg_funcs.append(reg_func)

    def list_entry_reg_funcs(self) -> List[EntryRegFunc]:
        return list(self._entry_reg_funcs)

    def add_entry(self, name: str, entry: Optional[Entry]) -> None:
        if entry is None:
            return
        self._entries[name] = entry

    def get_entry(self, name: str) -> Optional[Entry]:
        return self._entries.get(name)

    def merge_entries(self, entries: Dict[str, Entry]) -> None:
        self._entries.update(entries)

    def list_entries(self) -> Dict[str, Entry]:
        return self._entries

    # Shutdown hooks
    def add_shutdown_hook(self, name: str, hook: Optional[ShutdownHook]) -> None:
        if hook is None:
            return
        self._shutdown_hooks[name] = hook

    def get_shutdown_hook(self, name: str) -> Optional[ShutdownHook]:
        return self._shutdown_hooks.get(name)

    def list_shutdown_hooks(self) -> Dict[str, ShutdownHook]:
        return self._shutdown_hooks

    def run_shutdown_hooks(self) -> None:
        """Run hooks in registration order; an exception stops the remaining hooks."""
        for name, hook in list(self._shutdown_hooks.items()):
            self.get_default_logger().info(f"Running shutdown hook '{name}'")
            hook()

    # Shutdown signals
    def notify_shutdown_signals(self) -> None:
        """
        Route SIGHUP, SIGINT, SIGTERM and SIGQUIT (where available) to this context.

        Must be called from the main thread.
        """
        for signal_name in SHUTDOWN_SIGNAL_NAMES:
            signum = getattr(signal, signal_name, None)
            if signum is None:
                continue
            previous = signal.signal(signum, self._handle_shutdown_signal)
            self._previous_handlers.setdefault(signum, previous)

    def _handle_shutdown_signal(self, signum: int, frame: Any) -> None:
        self.trigger_shutdown(signum)

    def trigger_shutdown(self, signum: Optional[int] = None) -> None:
        """Mark the context as shutting down, as a received signal would."""
        self._shutdown_signal = signum
        self._shutdown_event.set()

    def wait_for_shutdown_sig(self, timeout: Optional[float] = None) -> Optional[int]:
        """
        Block until a shutdown signal arrives or ``timeout`` seconds elapse.

        Returns:
            The received signal number, or None on timeout or programmatic shutdown.
        """
        self._shutdown_event.wait(timeout)
        return self._shutdown_signal

    def is_shutting_down(self) -> bool:
        return self._shutdown_event.is_set()

    def close(self) -> None:
        """Restore previous signal handlers and clear all registries."""
        for signum, previous in self._previous_handlers.items():
            signal.signal(signum, previous)
        self._previous_handlers.clear()

        self._loggers.clear()
        self._configs.clear()
        self._values.clear()
        self._entries.clear()
        self._entry_reg_funcs.clear()
        self._shutdown_hooks.clear()
