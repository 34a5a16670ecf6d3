"""
@meta
name: config_overrides
type: parser
domain: config
responsibility:
  - Parse flattened command-line overrides into a generic config tree
inputs:
  - Override expressions, e.g. "server[0].port=2008,server[0].common.enabled=false"
outputs:
  - Sparse override mapping, ready for config.merging.override_map
tags:
  - config
  - parsing
lifecycle:
  status: active
"""

"""Parser for flattened ``key=value`` config overrides.

Grammar:

- comma (``,``) separates assignments
- dot (``.``) traverses mappings, ``[N]`` indexes sequences
- ``key={a,b}`` assigns a list
- backslash escapes the next character (``\\,`` ``\\=`` ``\\.`` ``\\[``)

Values are typed the way YAML types scalars (``true``, ``2008``, ``0.5``,
``null``) so they kind-match a YAML-loaded base tree. Sequences are
materialised with ``None`` slots up to the highest referenced index.
"""

from typing import Any, Dict, List, Tuple, Union

from common.shared.yaml_utils import parse_yaml_scalar

from .errors import OverrideParseError

MAX_INDEX = 65536

ESCAPE = "\\"
ASSIGNMENT_SEPARATOR = ","
KEY_VALUE_SEPARATOR = "="
MAPPING_SEPARATOR = "."
INDEX_OPEN = "["
INDEX_CLOSE = "]"
LIST_OPEN = "{"
LIST_CLOSE = "}"

# A path segment is either a mapping key (str) or a sequence index (int)
Segment = Union[str, int]


class _Scanner:
    """Character cursor over the override text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def done(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos]

    def next(self) -> Tuple[str, bool]:
        """Return the next character and whether it was escaped."""
        char = self.text[self.pos]
        self.pos += 1
        if char == ESCAPE and not self.done():
            escaped = self.text[self.pos]
            self.pos += 1
            return escaped, True
        return char, False


def _parse_index(scanner: _Scanner, key_text: str) -> int:
    digits = ""
    while not scanner.done():
        char, escaped = scanner.next()
        if char == INDEX_CLOSE and not escaped:
            break
        digits += char
    else:
        raise OverrideParseError(f"unterminated index in key '{key_text}'")

    if not digits.isdigit():
        raise OverrideParseError(f"invalid index '{digits}' in key '{key_text}'")
    index = int(digits)
    if index > MAX_INDEX:
        raise OverrideParseError(f"index {index} exceeds maximum {MAX_INDEX} in key '{key_text}'")
    return index


def _parse_key(scanner: _Scanner) -> List[Segment]:
    """Read path segments up to the unescaped ``=``."""
    start = scanner.pos
    segments: List[Segment] = []
    name = ""
    # True right after "]", where only ".", "[" or "=" may follow
    after_index = False

    while not scanner.done():
        char, escaped = scanner.next()
        key_text = scanner.text[start:scanner.pos]

        if not escaped and char == KEY_VALUE_SEPARATOR:
            if name:
                segments.append(name)
            elif not after_index:
                raise OverrideParseError(f"empty key segment in '{key_text}'")
            return segments
        if not escaped and char == ASSIGNMENT_SEPARATOR:
            raise OverrideParseError(f"key '{key_text[:-1]}' has no value")
        if not escaped and char == MAPPING_SEPARATOR:
            if not name and not after_index:
                raise OverrideParseError(f"empty key segment in '{key_text}'")
            if name:
                segments.append(name)
            name = ""
            after_index = False
            continue
        if not escaped and char == INDEX_OPEN:
            if name:
                segments.append(name)
            elif not segments:
                raise OverrideParseError(f"index without key in '{key_text}'")
            name = ""
            segments.append(_parse_index(scanner, scanner.text[start:]))
            after_index = True
            continue

        if after_index:
            raise OverrideParseError(f"unexpected '{char}' after index in '{key_text}'")
        name += char

    raise OverrideParseError(f"key '{scanner.text[start:]}' has no value")


def _parse_value(scanner: _Scanner) -> Any:
    """Read a scalar or ``{a,b}`` list value and consume the trailing separator."""
    if not scanner.done() and scanner.peek() == LIST_OPEN:
        scanner.pos += 1
        items: List[Any] = []
        current = ""
        closed = False
        while not scanner.done():
            char, escaped = scanner.next()
            if not escaped and char == LIST_CLOSE:
                closed = True
                break
            if not escaped and char == ASSIGNMENT_SEPARATOR:
                items.append(parse_yaml_scalar(current))
                current = ""
                continue
            current += char
        if not closed:
            raise OverrideParseError("unterminated list value")
        if current or items:
            items.append(parse_yaml_scalar(current))

        if not scanner.done():
            char, escaped = scanner.next()
            if escaped or char != ASSIGNMENT_SEPARATOR:
                raise OverrideParseError(f"unexpected '{char}' after list value")
        return items

    raw = ""
    while not scanner.done():
        char, escaped = scanner.next()
        if not escaped and char == ASSIGNMENT_SEPARATOR:
            break
        raw += char
    return parse_yaml_scalar(raw)


def _describe(segments: List[Segment]) -> str:
    path = ""
    for segment in segments:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path = f"{path}.{segment}" if path else segment
    return path


def _empty_container(segment: Segment) -> Union[Dict[str, Any], List[Any]]:
    return [] if isinstance(segment, int) else {}


def _check_replaceable(existing: Any, value: Any, segments: List[Segment]) -> None:
    if isinstance(existing, dict) and not isinstance(value, dict):
        raise OverrideParseError(f"'{_describe(segments)}' already holds a mapping")
    if isinstance(existing, list) and not isinstance(value, list):
        raise OverrideParseError(f"'{_describe(segments)}' already holds a sequence")


def _assign(tree: Dict[str, Any], segments: List[Segment], value: Any) -> None:
    node: Union[Dict[str, Any], List[Any]] = tree

    for depth, segment in enumerate(segments):
        is_last = depth == len(segments) - 1

        if isinstance(segment, int):
            if not isinstance(node, list):
                raise OverrideParseError(
                    f"'{_describe(segments[:depth])}' is not a sequence in '{_describe(segments)}'"
                )
            while len(node) <= segment:
                node.append(None)
            if is_last:
                _check_replaceable(node[segment], value, segments)
                node[segment] = value
                return
            child = node[segment]
            if child is None:
                child = _empty_container(segments[depth + 1])
                node[segment] = child
        else:
            if not isinstance(node, dict):
                raise OverrideParseError(
                    f"'{_describe(segments[:depth])}' is not a mapping in '{_describe(segments)}'"
                )
            if is_last:
                _check_replaceable(node.get(segment), value, segments)
                node[segment] = value
                return
            child = node.get(segment)
            if child is None:
                child = _empty_container(segments[depth + 1])
                node[segment] = child

        if not isinstance(child, (dict, list)):
            raise OverrideParseError(
                f"'{_describe(segments[:depth + 1])}' already holds a value in '{_describe(segments)}'"
            )
        node = child


def parse_overrides(text: str) -> Dict[str, Any]:
    """
    Parse a flattened override expression into a sparse config mapping.

    Args:
        text: Expression such as ``"server[0].port=2008,server[0].common.enabled=false"``.

    Returns:
        Nested dict/list tree, e.g. ``{"server": [{"port": 2008, "common": {"enabled": False}}]}``.
        Empty input yields an empty dict.

    Raises:
        OverrideParseError: If the expression is malformed.
    """
    tree: Dict[str, Any] = {}
    if not text:
        return tree

    scanner = _Scanner(text)
    while not scanner.done():
        segments = _parse_key(scanner)
        if not segments:
            raise OverrideParseError(f"empty key in '{text}'")
        value = _parse_value(scanner)
        _assign(tree, segments, value)

    return tree
