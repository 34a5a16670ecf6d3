"""Config trees: loading, command-line overriding, merging and binding."""

from .errors import ConfigError, BootConfigError, OverrideParseError, BindingError
from .tree import GenericNode, NodeKind, kind_of, same_kind, generalize_keys
from .merging import override_map, override_sequence, override_tree
from .overrides import MAX_INDEX, parse_overrides
from .binding import decode
from .boot import (
    BootFlags,
    parse_boot_flags,
    get_boot_config_path,
    get_boot_config_overrides,
    get_boot_config_original,
    unmarshal_boot_config,
)

__all__ = [
    "ConfigError",
    "BootConfigError",
    "OverrideParseError",
    "BindingError",
    "GenericNode",
    "NodeKind",
    "kind_of",
    "same_kind",
    "generalize_keys",
    "override_map",
    "override_sequence",
    "override_tree",
    "MAX_INDEX",
    "parse_overrides",
    "decode",
    "BootFlags",
    "parse_boot_flags",
    "get_boot_config_path",
    "get_boot_config_overrides",
    "get_boot_config_original",
    "unmarshal_boot_config",
]
