"""
@meta
name: shared_logging_utils
type: utility
domain: shared
responsibility:
  - Provide consistent logging utilities across services
  - Build loggers from declarative configs and merge config overrides
inputs:
  - Logger names
  - LoggerConfig instances
outputs:
  - Configured logger instances
tags:
  - utility
  - shared
  - logging
lifecycle:
  status: active
"""

"""Shared logging utilities for consistent logging across services."""

import logging
import logging.handlers
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
NOP_LOGGER_NAME = "nop"

STDOUT = "stdout"
STDERR = "stderr"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with standardized formatting.

    Args:
        name: Logger name (typically __name__ or script name).
        level: Optional logging level (default: INFO).

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(DEFAULT_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if level is not None:
            logger.setLevel(level)
        elif logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)

    return logger


def get_nop_logger() -> logging.Logger:
    """Return a logger that discards every record."""
    logger = logging.getLogger(NOP_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        logger.propagate = False
    return logger


@dataclass
class RotationConfig:
    """Size based rotation settings for a file output."""

    filename: str = ""
    max_size_mb: int = 0
    max_backups: int = 0
    encoding: str = "utf-8"


@dataclass
class LoggerConfig:
    """
    Declarative logger settings.

    ``output_paths`` accepts ``stdout``, ``stderr`` or file paths. When
    ``rotation`` is set and its filename matches an output path, that path is
    written through a ``RotatingFileHandler``.
    """

    level: Union[int, str, None] = None
    format: str = ""
    date_format: str = ""
    output_paths: List[str] = field(default_factory=list)
    propagate: bool = False
    rotation: Optional[RotationConfig] = None


def override_rotation_config(origin: RotationConfig, override: Optional[RotationConfig]) -> None:
    """Override fields of ``origin`` with the non-empty, positive fields of ``override``."""
    if override is None:
        return

    if override.max_size_mb > 0:
        origin.max_size_mb = override.max_size_mb
    if override.max_backups > 0:
        origin.max_backups = override.max_backups
    if override.filename:
        origin.filename = override.filename
    if override.encoding:
        origin.encoding = override.encoding


def override_logger_config(origin: LoggerConfig, override: Optional[LoggerConfig]) -> None:
    """
    Override fields of ``origin`` with the non-empty fields of ``override``.

    Booleans default to False and can't be told apart from "unset", so they
    are always copied.
    """
    if override is None:
        return

    origin.propagate = override.propagate

    if override.level is not None:
        origin.level = override.level
    if override.format:
        origin.format = override.format
    if override.date_format:
        origin.date_format = override.date_format
    if override.output_paths:
        origin.output_paths = list(override.output_paths)

    if override.rotation is not None:
        if origin.rotation is None:
            origin.rotation = RotationConfig()
        override_rotation_config(origin.rotation, override.rotation)


def _build_handler(path: str, config: LoggerConfig) -> logging.Handler:
    if path == STDOUT:
        return logging.StreamHandler(sys.stdout)
    if path == STDERR:
        return logging.StreamHandler(sys.stderr)

    rotation = config.rotation
    if rotation is not None and rotation.filename == path:
        return logging.handlers.RotatingFileHandler(
            path,
            maxBytes=rotation.max_size_mb * 1024 * 1024,
            backupCount=rotation.max_backups,
            encoding=rotation.encoding,
        )
    return logging.FileHandler(path, encoding="utf-8")


def build_logger(name: str, config: LoggerConfig) -> logging.Logger:
    """
    Build (or rebuild) a named logger from a ``LoggerConfig``.

    Existing handlers on the logger are closed and replaced, so a logger can
    be rebuilt after its config was overridden.

    Args:
        name: Logger name.
        config: Declarative logger settings.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        config.format or DEFAULT_FORMAT,
        datefmt=config.date_format or None,
    )
    for path in config.output_paths or [STDOUT]:
        handler = _build_handler(path, config)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    level = config.level
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level if level is not None else logging.INFO)
    logger.propagate = config.propagate
    return logger
