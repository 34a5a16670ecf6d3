"""Unit tests for AppContext and the Entry interface."""

import json
import logging
import os
import signal
import threading
from datetime import timezone
from typing import Dict, List, Optional

import pytest

from common.shared.logging_utils import LoggerConfig
from context import AppContext, Entry, LoggerPair


class EchoEntry(Entry):
    """Minimal entry recording its lifecycle calls."""

    def __init__(self, name: str):
        self._name = name
        self.calls: List[str] = []

    def bootstrap(self, ctx: AppContext) -> None:
        self.calls.append("bootstrap")

    def wait_for_shutdown_sig(self, timeout: Optional[float] = None) -> None:
        self.calls.append("wait")

    def shutdown(self, ctx: AppContext) -> None:
        self.calls.append("shutdown")

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_name(self) -> str:
        return "echo"


def register_echo_entries(boot_config_path: str, ctx: AppContext) -> Dict[str, Entry]:
    return {"echo": EchoEntry("echo")}


@pytest.fixture
def ctx():
    app_ctx = AppContext("my-svc")
    yield app_ctx
    app_ctx.close()


class TestEntry:
    """Test the entry interface."""

    def test_str(self):
        """Test that entries describe themselves as JSON."""
        assert json.loads(str(EchoEntry("echo"))) == {"name": "echo", "type": "echo"}

    def test_abstract(self):
        """Test that the interface can't be instantiated."""
        with pytest.raises(TypeError):
            Entry()


class TestAppContextBasics:
    """Test name, uptime and custom values."""

    def test_defaults(self):
        """Test the default application name and start time."""
        app_ctx = AppContext()
        assert app_ctx.application_name == "app"
        assert app_ctx.start_time.tzinfo is timezone.utc
        app_ctx.close()

    def test_up_time(self, ctx):
        """Test that uptime is non-negative."""
        assert ctx.up_time().total_seconds() >= 0

    def test_values(self, ctx):
        """Test adding, listing and deleting values."""
        ctx.add_value("key", 1)
        assert ctx.get_value("key") == 1
        assert ctx.list_values() == {"key": 1}

        ctx.delete_value("key")
        ctx.delete_value("missing")
        assert ctx.get_value("key") is None

        ctx.add_value("a", 1)
        ctx.clear_values()
        assert ctx.list_values() == {}


class TestAppContextLoggers:
    """Test logger registry."""

    def test_default_logger(self, ctx):
        """Test that a default logger is always registered."""
        assert isinstance(ctx.get_default_logger(), logging.Logger)
        assert ctx.get_logger_pair("default") is not None

    def test_add_logger_pair(self, ctx):
        """Test registering a named pair."""
        config = LoggerConfig(level="debug")
        pair = LoggerPair(logger=logging.getLogger("svc-test"), config=config)
        assert ctx.add_logger_pair("svc", pair) == "svc"
        assert ctx.get_logger("svc") is pair.logger
        assert ctx.get_logger_config("svc") is config
        assert "svc" in ctx.list_logger_pairs()

    def test_generated_name(self, ctx):
        """Test that an empty name is generated."""
        name = ctx.add_logger_pair("", LoggerPair(logger=logging.getLogger("svc-test")))
        assert name.startswith("logger-")
        assert ctx.get_logger_pair(name) is not None

    def test_none_pair(self, ctx):
        """Test that None pairs are ignored."""
        assert ctx.add_logger_pair("svc", None) == ""
        assert ctx.get_logger_pair("svc") is None

    def test_missing_logger(self, ctx):
        """Test that missing loggers discard records."""
        logger = ctx.get_logger("missing")
        assert logger.propagate is False
        assert ctx.get_logger_config("missing") is None


class TestAppContextConfigsAndEntries:
    """Test config and entry registries."""

    def test_configs(self, ctx):
        """Test registering configs."""
        ctx.add_config("boot", {"a": 1})
        ctx.add_config("", {"b": 1})
        ctx.add_config("none", None)
        assert ctx.get_config("boot") == {"a": 1}
        assert ctx.list_configs() == {"boot": {"a": 1}}

    def test_entry_reg_funcs(self, ctx):
        """Test registering entry builders."""
        ctx.register_entry(register_echo_entries)
        ctx.register_entry(None)
        funcs = ctx.list_entry_reg_funcs()
        assert funcs == [register_echo_entries]

        funcs.clear()
        assert len(ctx.list_entry_reg_funcs()) == 1

    def test_entries(self, ctx):
        """Test adding and merging entries."""
        entry = EchoEntry("first")
        ctx.add_entry("first", entry)
        ctx.add_entry("none", None)
        ctx.merge_entries(register_echo_entries("boot.yaml", ctx))

        assert ctx.get_entry("first") is entry
        assert set(ctx.list_entries()) == {"first", "echo"}

    def test_entry_lifecycle(self, ctx):
        """Test driving entries built from registration functions."""
        ctx.register_entry(register_echo_entries)
        for reg_func in ctx.list_entry_reg_funcs():
            ctx.merge_entries(reg_func("boot.yaml", ctx))

        for entry in ctx.list_entries().values():
            entry.bootstrap(ctx)
        for entry in ctx.list_entries().values():
            entry.shutdown(ctx)

        assert ctx.get_entry("echo").calls == ["bootstrap", "shutdown"]


class TestAppContextShutdown:
    """Test shutdown hooks and signals."""

    def test_hooks_run_in_order(self, ctx):
        """Test that hooks run in registration order."""
        calls = []
        ctx.add_shutdown_hook("first", lambda: calls.append("first"))
        ctx.add_shutdown_hook("second", lambda: calls.append("second"))
        ctx.add_shutdown_hook("none", None)

        ctx.run_shutdown_hooks()

        assert calls == ["first", "second"]
        assert ctx.get_shutdown_hook("first") is not None
        assert list(ctx.list_shutdown_hooks()) == ["first", "second"]

    def test_hook_error_propagates(self, ctx):
        """Test that a failing hook raises."""

        def fail():
            raise RuntimeError("hook failed")

        ctx.add_shutdown_hook("fail", fail)
        with pytest.raises(RuntimeError, match="hook failed"):
            ctx.run_shutdown_hooks()

    def test_wait_timeout(self, ctx):
        """Test that waiting times out without a signal."""
        assert ctx.wait_for_shutdown_sig(timeout=0.01) is None
        assert not ctx.is_shutting_down()

    def test_trigger_shutdown(self, ctx):
        """Test programmatic shutdown from another thread."""
        threading.Timer(0.01, ctx.trigger_shutdown, args=(signal.SIGTERM,)).start()
        assert ctx.wait_for_shutdown_sig(timeout=5) == signal.SIGTERM
        assert ctx.is_shutting_down()

    @pytest.mark.skipif(not hasattr(signal, "SIGHUP"), reason="POSIX signals only")
    def test_signal_received(self, ctx):
        """Test that a real signal wakes the waiter and handlers are restored on close."""
        previous = signal.getsignal(signal.SIGHUP)
        ctx.notify_shutdown_signals()

        os.kill(os.getpid(), signal.SIGHUP)

        assert ctx.wait_for_shutdown_sig(timeout=5) == signal.SIGHUP
        ctx.close()
        assert signal.getsignal(signal.SIGHUP) == previous

    def test_close_clears_registries(self, ctx):
        """Test that close empties the context."""
        ctx.add_value("a", 1)
        ctx.add_config("boot", {})
        ctx.add_entry("echo", EchoEntry("echo"))
        ctx.add_shutdown_hook("hook", lambda: None)

        ctx.close()

        assert ctx.list_values() == {}
        assert ctx.list_configs() == {}
        assert ctx.list_entries() == {}
        assert ctx.list_shutdown_hooks() == {}
        assert ctx.list_logger_pairs() == {}
