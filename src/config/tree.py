"""Generic config tree model.

A config tree is the untyped value produced by parsing a structured config
document (``yaml.safe_load`` / ``json.loads``): dicts for mappings, lists for
sequences and plain scalars for leaves. Nodes are compared by *kind* so an
override can never change the shape of a config.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Union

GenericNode = Union[None, bool, int, float, str, List[Any], Dict[Any, Any], Any]


class NodeKind(str, Enum):
    """Tag distinguishing the variants of a generic tree node."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


def kind_of(node: Any) -> NodeKind:
    """Classify a node. ``bool`` is checked before ``int`` since it subclasses it."""
    if node is None:
        return NodeKind.NULL
    if isinstance(node, bool):
        return NodeKind.BOOL
    if isinstance(node, int):
        return NodeKind.INT
    if isinstance(node, float):
        return NodeKind.FLOAT
    if isinstance(node, str):
        return NodeKind.STRING
    if isinstance(node, list):
        return NodeKind.SEQUENCE
    if isinstance(node, dict):
        return NodeKind.MAPPING
    return NodeKind.OTHER


def same_kind(left: Any, right: Any) -> bool:
    """
    Return True when both nodes have the same kind.

    Nodes of kind ``OTHER`` (e.g. YAML timestamps) must also share their exact type.
    """
    kind = kind_of(left)
    if kind is not kind_of(right):
        return False
    if kind is NodeKind.OTHER:
        return type(left) is type(right)
    return True


def generalize_keys(node: Any) -> Any:
    """
    Return a copy of ``node`` whose mapping keys are all strings.

    YAML may produce int or bool keys (``1: a``, ``on: b``); typed decoders
    expect string keys.
    """
    if isinstance(node, dict):
        return {str(key): generalize_keys(value) for key, value in node.items()}
    if isinstance(node, list):
        return [generalize_keys(item) for item in node]
    return node
