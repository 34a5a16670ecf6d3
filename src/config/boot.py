"""
@meta
name: boot_config_loader
type: utility
domain: config
responsibility:
  - Resolve the boot config path from code defaults and --boot-config
  - Load the boot config file into a generic tree
  - Apply --set overrides with the shape-preserving deep merge
  - Decode the merged tree into a typed config object
inputs:
  - Boot config file (YAML or JSON)
  - Command-line arguments
outputs:
  - Typed boot config instance
tags:
  - config
  - loading
lifecycle:
  status: active
"""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar, Union

import yaml

from common.shared.argument_parsing import add_boot_arguments
from common.shared.file_utils import file_exists
from common.shared.logging_utils import get_logger
from common.shared.yaml_utils import load_yaml

from .binding import decode
from .errors import BootConfigError, OverrideParseError
from .merging import override_map
from .overrides import parse_overrides

logger = get_logger(__name__)

T = TypeVar("T")

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


@dataclass(frozen=True)
class BootFlags:
    """Boot config flags passed on the command line."""

    boot_config_path: str = ""
    overrides: str = ""


def parse_boot_flags(argv: Optional[Sequence[str]] = None) -> BootFlags:
    """
    Read ``--boot-config`` and ``--set`` from command-line arguments.

    Unknown arguments are left for the service's own parser.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``).

    Returns:
        Parsed ``BootFlags``.
    """
    parser = argparse.ArgumentParser(add_help=False)
    add_boot_arguments(parser)
    args, _ = parser.parse_known_args(argv)
    return BootFlags(
        boot_config_path=args.boot_config_path or "",
        overrides=args.boot_config_overrides or "",
    )


def get_boot_config_path(config_file_path: Union[str, Path], flags: Optional[BootFlags] = None) -> Path:
    """
    Resolve the boot config file path.

    A non-empty ``--boot-config`` flag wins over ``config_file_path``; relative
    paths are joined with the working directory.

    Raises:
        BootConfigError: If the resolved file doesn't exist.
    """
    flags = flags or BootFlags()
    if flags.boot_config_path:
        config_file_path = flags.boot_config_path

    path = Path(config_file_path)
    if not path.is_absolute():
        path = Path(os.getcwd()) / path

    if not file_exists(path):
        raise BootConfigError(f"config file does not exist with path: {path}", path=str(path))

    return path


def get_boot_config_overrides(flags: Optional[BootFlags] = None) -> Dict[str, Any]:
    """
    Parse ``--set`` overrides into a sparse config tree.

    Raises:
        BootConfigError: If the override expression is malformed.
    """
    flags = flags or BootFlags()
    try:
        return parse_overrides(flags.overrides)
    except OverrideParseError as e:
        raise BootConfigError(f"invalid boot config overrides: {e}") from e


def _load_tree(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        text = path.read_text(encoding="utf-8")
        return json.loads(text) if text.strip() else None
    if suffix in YAML_SUFFIXES:
        return load_yaml(path)
    raise BootConfigError(f"unsupported config file type '{suffix}'", path=str(path))


def get_boot_config_original(config_file_path: Union[str, Path], flags: Optional[BootFlags] = None) -> Dict[str, Any]:
    """
    Read the boot config file into a generic mapping.

    An empty file yields an empty mapping.

    Raises:
        BootConfigError: If the file is missing, unparsable, or not a mapping.
    """
    path = get_boot_config_path(config_file_path, flags)

    try:
        tree = _load_tree(path)
    except (yaml.YAMLError, ValueError) as e:
        raise BootConfigError(f"failed to parse config file: {e}", path=str(path)) from e

    if tree is None:
        return {}
    if not isinstance(tree, dict):
        raise BootConfigError("top level of config file must be a mapping", path=str(path))
    return tree


def unmarshal_boot_config(
    config_file_path: Union[str, Path],
    target: Type[T],
    flags: Optional[BootFlags] = None,
) -> T:
    """
    Load the boot config, apply ``--set`` overrides and decode into ``target``.

    Steps:
    1. read the config file into a generic mapping (``--boot-config`` honoured)
    2. override the mapping with ``--set`` values where shapes agree
    3. decode the merged mapping into ``target``

    Args:
        config_file_path: Default config path, used when ``--boot-config`` is absent.
        target: Dataclass, pydantic model or annotated type to decode into.
        flags: Parsed flags (default: parsed from ``sys.argv``).

    Returns:
        Decoded config instance.

    Raises:
        BootConfigError: If loading or overriding fails.
        BindingError: If decoding fails.
    """
    if flags is None:
        flags = parse_boot_flags()

    config_map = get_boot_config_original(config_file_path, flags)

    dropped: List[str] = []
    override_map(config_map, get_boot_config_overrides(flags), dropped=dropped)
    for path in dropped:
        logger.warning(f"Ignoring boot config override '{path}': key missing or type mismatch")

    return decode(config_map, target)
