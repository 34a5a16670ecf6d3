"""File utility functions for reading and existence checks."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def _resolve(file_path: PathLike) -> Path:
    """Join relative paths with the current working directory."""
    path = Path(file_path)
    if not path.is_absolute():
        path = Path(os.getcwd()) / path
    return path


def file_exists(file_path: PathLike) -> bool:
    """Return True only for an existing regular file (directories do not count)."""
    if not file_path:
        return False
    return Path(file_path).is_file()


def try_read_file(file_path: PathLike) -> bytes:
    """
    Read a file, ignoring any error.

    Relative paths are resolved against the working directory.

    Returns:
        File content, or empty bytes if the path is empty or unreadable.
    """
    if not file_path:
        return b""
    try:
        return _resolve(file_path).read_bytes()
    except OSError:
        return b""


def must_read_file(file_path: PathLike) -> bytes:
    """
    Read a file that is required to exist, e.g. a config file.

    Raises:
        ValueError: If the path is empty.
        FileNotFoundError: If the file doesn't exist.
    """
    if not file_path:
        raise ValueError("empty file path")
    path = _resolve(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_bytes()
