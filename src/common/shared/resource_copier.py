"""Copy files bundled inside a package (``importlib.resources``) to the local file system."""

from __future__ import annotations

import os
import shutil
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Union

# rwx for user, read for group and others
DEFAULT_FILE_MODE = 0o744


def resolve_resource(package: str, src_path: str = "") -> Traversable:
    """Return the traversable for ``src_path`` inside ``package``."""
    root = resources.files(package)
    for part in Path(src_path).parts:
        if part in ("/", "."):
            continue
        root = root.joinpath(part)
    return root


def copy_resource_file(src: Traversable, dst_path: Union[str, Path]) -> Path:
    """Copy a single resource file to ``dst_path`` and grant ``DEFAULT_FILE_MODE``."""
    dst = Path(dst_path)
    with src.open("rb") as src_fd, dst.open("wb") as dst_fd:
        shutil.copyfileobj(src_fd, dst_fd)
    os.chmod(dst, DEFAULT_FILE_MODE)
    return dst


def copy_resource_dir(src: Traversable, dst_path: Union[str, Path]) -> Path:
    """
    Recursively copy a resource directory to ``dst_path``.

    Args:
        src: Directory traversable, see ``resolve_resource``.
        dst_path: Local destination, created if missing.

    Returns:
        Destination path.

    Raises:
        NotADirectoryError: If ``src`` is not a directory.
    """
    if not src.is_dir():
        raise NotADirectoryError(f"Resource is not a directory: {src}")

    dst = Path(dst_path)
    dst.mkdir(parents=True, exist_ok=True)

    for child in src.iterdir():
        if child.is_dir():
            copy_resource_dir(child, dst / child.name)
        else:
            copy_resource_file(child, dst / child.name)

    return dst
