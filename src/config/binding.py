"""Decode generic config trees into typed config objects."""

from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import BindingError
from .tree import generalize_keys

T = TypeVar("T")


def decode(tree: Any, target: Type[T]) -> T:
    """
    Decode a generic config tree into ``target``.

    ``target`` may be a dataclass, a pydantic model or any annotated type
    pydantic can validate (``Dict[str, int]``, ``List[Server]``...). Mapping
    keys are converted to strings first; keys unknown to the target are ignored.

    Args:
        tree: Generic tree, usually a merged boot config mapping.
        target: Type to decode into.

    Returns:
        Instance of ``target``.

    Raises:
        BindingError: If the tree doesn't fit the target type.
    """
    # pydantic would read a string as a forward reference
    if isinstance(target, str):
        raise BindingError(f"Unsupported decode target {target!r}")

    try:
        adapter = TypeAdapter(target)
    except (TypeError, NameError) as e:
        raise BindingError(f"Unsupported decode target {target!r}: {e}") from e

    try:
        return adapter.validate_python(generalize_keys(tree))
    except ValidationError as e:
        raise BindingError(f"Failed to decode config into {getattr(target, '__name__', target)}: {e}") from e
