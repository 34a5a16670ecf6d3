"""Process information reports (basic info, configs, memory)."""

from .basic_info import (
    BasicInfo,
    format_duration_short,
    basic_info_to_struct,
    basic_info_to_json,
    basic_info_to_json_pretty,
    basic_info_to_bytes,
    basic_info_to_map,
    basic_info_to_fields,
)
from .config_info import (
    ConfigInfo,
    config_info_to_struct,
    config_info_to_json,
    config_info_to_json_pretty,
    config_info_to_bytes,
    config_info_to_map,
    config_info_to_fields,
)
from .mem_stats import (
    MemStats,
    mem_stats_to_struct,
    mem_stats_to_json,
    mem_stats_to_json_pretty,
    mem_stats_to_bytes,
    mem_stats_to_map,
    mem_stats_to_fields,
)

__all__ = [
    "BasicInfo",
    "format_duration_short",
    "basic_info_to_struct",
    "basic_info_to_json",
    "basic_info_to_json_pretty",
    "basic_info_to_bytes",
    "basic_info_to_map",
    "basic_info_to_fields",
    "ConfigInfo",
    "config_info_to_struct",
    "config_info_to_json",
    "config_info_to_json_pretty",
    "config_info_to_bytes",
    "config_info_to_map",
    "config_info_to_fields",
    "MemStats",
    "mem_stats_to_struct",
    "mem_stats_to_json",
    "mem_stats_to_json_pretty",
    "mem_stats_to_bytes",
    "mem_stats_to_map",
    "mem_stats_to_fields",
]
