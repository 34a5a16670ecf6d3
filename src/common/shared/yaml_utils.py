"""YAML loading helpers producing generic config trees."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import yaml

TYPED_SCALAR_TAGS = frozenset(
    {
        "tag:yaml.org,2002:null",
        "tag:yaml.org,2002:bool",
        "tag:yaml.org,2002:int",
        "tag:yaml.org,2002:float",
        "tag:yaml.org,2002:timestamp",
    }
)

_SCALAR_RESOLVER = yaml.resolver.Resolver()
_SCALAR_CONSTRUCTOR = yaml.constructor.SafeConstructor()


def load_yaml(path: Union[str, Path]) -> Any:
    """
    Load a YAML file from disk.

    Args:
        path: Absolute or relative path to a YAML file.

    Returns:
        Parsed YAML content (a generic tree of dicts, lists and scalars),
        or ``None`` for an empty document.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file cannot be parsed as valid YAML.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def parse_yaml_scalar(raw: str) -> Any:
    """
    Type a raw string the way YAML types a plain scalar.

    ``"true"`` -> ``True``, ``"2008"`` -> ``2008``, ``"0.5"`` -> ``0.5``,
    ``"null"`` -> ``None``, ``"2020-01-01"`` -> ``date``. Only the implicit
    scalar tags are resolved; the text is never parsed as a document, so
    comments (``#``), markers (``...``, ``---``) and flow collections stay
    the raw string.
    """
    if raw == "":
        return raw
    tag = _SCALAR_RESOLVER.resolve(yaml.ScalarNode, raw, (True, False))
    if tag not in TYPED_SCALAR_TAGS:
        return raw
    return yaml.SafeLoader.yaml_constructors[tag](_SCALAR_CONSTRUCTOR, yaml.ScalarNode(tag, raw))
