"""Deep-merge of sparse override trees onto a base config tree.

Overrides win only where shapes agree:

- a key/index missing from the base is dropped (sequences never grow)
- a node whose kind differs from the base node is dropped
- mappings and sequences of the same kind are merged recursively
- scalars of the same kind replace the base value

The base is mutated in place and returned; the override is never mutated.
No combination of inputs raises.
"""

from typing import Any, Dict, List, Optional

from .tree import kind_of, same_kind, NodeKind


def _key_path(parent: str, key: Any) -> str:
    return f"{parent}.{key}" if parent else str(key)


def _merge_node(base_item: Any, override_item: Any, path: str, dropped: Optional[List[str]]) -> Any:
    """Return the value to store in the base slot once kinds are known to match."""
    kind = kind_of(override_item)
    if kind is NodeKind.MAPPING:
        return _override_map(base_item, override_item, path, dropped)
    if kind is NodeKind.SEQUENCE:
        return _override_sequence(base_item, override_item, path, dropped)
    return override_item


def _override_map(
    base: Dict[Any, Any],
    override: Dict[Any, Any],
    path: str,
    dropped: Optional[List[str]],
) -> Dict[Any, Any]:
    for key, override_item in override.items():
        key_path = _key_path(path, key)
        if key in base and same_kind(base[key], override_item):
            base[key] = _merge_node(base[key], override_item, key_path, dropped)
        elif dropped is not None:
            dropped.append(key_path)
    return base


def _override_sequence(
    base: List[Any],
    override: List[Any],
    path: str,
    dropped: Optional[List[str]],
) -> List[Any]:
    for index, override_item in enumerate(override):
        # Unset slots of a sparse override sequence
        if override_item is None:
            continue
        index_path = f"{path}[{index}]"
        if index < len(base) and same_kind(base[index], override_item):
            base[index] = _merge_node(base[index], override_item, index_path, dropped)
        elif dropped is not None:
            dropped.append(index_path)
    return base


def override_map(
    base: Optional[Dict[Any, Any]],
    override: Optional[Dict[Any, Any]],
    dropped: Optional[List[str]] = None,
) -> Optional[Dict[Any, Any]]:
    """
    Merge an override mapping into a base mapping in place.

    Args:
        base: Base config mapping, mutated in place.
        override: Sparse override mapping, never mutated.
        dropped: Optional list collecting the dotted paths (``a.b[0].c``) of
            override entries that were dropped.

    Returns:
        ``base`` (unchanged if either input is None or not a mapping).
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        return base
    return _override_map(base, override, "", dropped)


def override_sequence(
    base: Optional[List[Any]],
    override: Optional[List[Any]],
    dropped: Optional[List[str]] = None,
) -> Optional[List[Any]]:
    """
    Merge an override sequence into a base sequence in place, position by position.

    ``None`` items in the override are skipped; indices past the end of the
    base are dropped.

    Returns:
        ``base`` (unchanged if either input is None or not a list).
    """
    if not isinstance(base, list) or not isinstance(override, list):
        return base
    return _override_sequence(base, override, "", dropped)


def override_tree(base: Any, override: Any, dropped: Optional[List[str]] = None) -> Any:
    """Merge two config trees of matching root kind; mismatched roots are a no-op."""
    if base is None or override is None or not same_kind(base, override):
        return base
    kind = kind_of(base)
    if kind is NodeKind.MAPPING:
        return _override_map(base, override, "", dropped)
    if kind is NodeKind.SEQUENCE:
        return _override_sequence(base, override, "", dropped)
    return base
