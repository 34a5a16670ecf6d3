"""Unit tests for logging utilities."""

import logging
import logging.handlers
import sys
import uuid
from pathlib import Path

import pytest

from common.shared.logging_utils import (
    DEFAULT_FORMAT,
    LoggerConfig,
    RotationConfig,
    build_logger,
    get_logger,
    get_nop_logger,
    override_logger_config,
    override_rotation_config,
)


@pytest.fixture
def logger_name():
    """Unique logger name, handlers closed after the test."""
    name = f"svc-test-{uuid.uuid4().hex}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestGetLogger:
    """Test standard logger creation."""

    def test_default_level_and_handler(self, logger_name):
        """Test that a new logger gets one handler and INFO level."""
        logger = get_logger(logger_name)
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.handlers[0].formatter._fmt == DEFAULT_FORMAT

    def test_no_duplicate_handlers(self, logger_name):
        """Test that repeated calls don't add handlers."""
        get_logger(logger_name)
        assert len(get_logger(logger_name).handlers) == 1

    def test_explicit_level(self, logger_name):
        """Test that an explicit level is applied."""
        assert get_logger(logger_name, logging.DEBUG).level == logging.DEBUG

    def test_nop_logger(self):
        """Test that the nop logger discards records."""
        logger = get_nop_logger()
        assert logger.propagate is False
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)


class TestOverrideLoggerConfig:
    """Test overriding logger configs."""

    def test_none_override(self):
        """Test that None leaves the origin alone."""
        origin = LoggerConfig(level="info")
        override_logger_config(origin, None)
        assert origin == LoggerConfig(level="info")

    def test_non_empty_fields_copied(self):
        """Test that only set fields replace the origin."""
        origin = LoggerConfig(level="info", format="%(message)s", output_paths=["stdout"], propagate=True)
        override_logger_config(origin, LoggerConfig(level="debug", output_paths=["app.log"]))

        assert origin.level == "debug"
        assert origin.format == "%(message)s"
        assert origin.output_paths == ["app.log"]
        assert origin.propagate is False

    def test_rotation_created(self):
        """Test that rotation settings are added when missing."""
        origin = LoggerConfig()
        override_logger_config(origin, LoggerConfig(rotation=RotationConfig(filename="app.log", max_size_mb=10)))
        assert origin.rotation == RotationConfig(filename="app.log", max_size_mb=10)

    def test_rotation_merged(self):
        """Test that positive rotation fields replace the origin."""
        origin = RotationConfig(filename="a.log", max_size_mb=5, max_backups=3)
        override_rotation_config(origin, RotationConfig(max_backups=7, encoding=""))
        assert origin == RotationConfig(filename="a.log", max_size_mb=5, max_backups=7, encoding="utf-8")


class TestBuildLogger:
    """Test building loggers from configs."""

    def test_default_stdout(self, logger_name):
        """Test that an empty config logs to stdout at INFO."""
        logger = build_logger(logger_name, LoggerConfig())
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stdout

    def test_string_level(self, logger_name):
        """Test that level names are case insensitive."""
        assert build_logger(logger_name, LoggerConfig(level="debug")).level == logging.DEBUG

    def test_file_output(self, logger_name, tmp_path: Path):
        """Test that records reach a file output."""
        log_file = tmp_path / "app.log"
        logger = build_logger(
            logger_name,
            LoggerConfig(output_paths=[str(log_file)], format="%(levelname)s %(message)s"),
        )
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert log_file.read_text() == "INFO hello\n"

    def test_rotating_output(self, logger_name, tmp_path: Path):
        """Test that the rotation filename gets a rotating handler."""
        log_file = str(tmp_path / "app.log")
        logger = build_logger(
            logger_name,
            LoggerConfig(
                output_paths=["stderr", log_file],
                rotation=RotationConfig(filename=log_file, max_size_mb=1, max_backups=2),
            ),
        )
        rotating = [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(rotating) == 1
        assert rotating[0].maxBytes == 1024 * 1024
        assert rotating[0].backupCount == 2

    def test_rebuild_replaces_handlers(self, logger_name):
        """Test that rebuilding doesn't stack handlers."""
        build_logger(logger_name, LoggerConfig(output_paths=["stdout", "stderr"]))
        logger = build_logger(logger_name, LoggerConfig(output_paths=["stderr"]))
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr
