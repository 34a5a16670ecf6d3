"""JSON conversions for dataclasses, pydantic models and plain mappings.

All helpers are lenient: ``None`` input or a value that can't be serialised
produces an empty result instead of raising.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel


def _to_jsonable(src: Any) -> Any:
    if isinstance(src, BaseModel):
        return src.model_dump(mode="json")
    if dataclasses.is_dataclass(src) and not isinstance(src, type):
        return dataclasses.asdict(src)
    if isinstance(src, (list, tuple)):
        return [_to_jsonable(item) for item in src]
    return src


def convert_json_to_map(text: str) -> Dict[str, Any]:
    """
    Convert a JSON object string to a dict.

    Returns an empty dict if the input is shorter than 2 characters, is not
    valid JSON, or is not a JSON object.
    """
    if not text or len(text) < 2:
        return {}
    try:
        res = json.loads(text)
    except ValueError:
        return {}
    return res if isinstance(res, dict) else {}


def convert_struct_to_bytes(src: Any) -> bytes:
    """Serialise to compact JSON bytes; empty bytes for ``None`` or unserialisable input."""
    if src is None:
        return b""
    try:
        return json.dumps(_to_jsonable(src), separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError):
        return b""


def convert_struct_to_json(src: Any) -> str:
    """Serialise to a compact JSON string; empty string for ``None`` or unserialisable input."""
    if src is None:
        return ""
    return convert_struct_to_bytes(src).decode("utf-8")


def convert_struct_to_json_pretty(src: Any) -> str:
    """Serialise to an indented JSON string; ``"{}"`` for unserialisable input."""
    if src is None:
        return ""
    try:
        return json.dumps(_to_jsonable(src), indent=2)
    except (TypeError, ValueError):
        return "{}"


def convert_struct_to_map(src: Any) -> Dict[str, Any]:
    """Convert to a JSON-compatible dict through a JSON round trip."""
    raw = convert_struct_to_bytes(src)
    if not raw:
        return {}
    res = json.loads(raw)
    return res if isinstance(res, dict) else {}


def convert_struct_to_fields(src: Any) -> List[Tuple[str, Any]]:
    """
    Convert to ``(key, value)`` pairs for structured log lines.

    Example:
        >>> " ".join(f"{k}={v}" for k, v in convert_struct_to_fields(info))
    """
    return list(convert_struct_to_map(src).items())
