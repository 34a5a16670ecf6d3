"""Memory and garbage collector statistics of the running process."""

from __future__ import annotations

import gc
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from common.shared.conversions import (
    convert_struct_to_bytes,
    convert_struct_to_fields,
    convert_struct_to_json,
    convert_struct_to_json_pretty,
    convert_struct_to_map,
)

try:
    import resource
except ImportError:  # Windows
    resource = None


@dataclass
class MemStats:
    max_rss_byte: int
    gc_count_total: int
    gc_collected_total: int
    gc_uncollectable_total: int
    tracked_objects: int
    gc_threshold: List[int] = field(default_factory=list)


def _max_rss_byte() -> int:
    if resource is None:
        return 0
    max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # ru_maxrss is in bytes on macOS, kilobytes elsewhere
    return max_rss if sys.platform == "darwin" else max_rss * 1024


def mem_stats_to_struct() -> MemStats:
    stats = gc.get_stats()
    return MemStats(
        max_rss_byte=_max_rss_byte(),
        gc_count_total=sum(generation["collections"] for generation in stats),
        gc_collected_total=sum(generation["collected"] for generation in stats),
        gc_uncollectable_total=sum(generation["uncollectable"] for generation in stats),
        tracked_objects=len(gc.get_objects()),
        gc_threshold=list(gc.get_threshold()),
    )


def mem_stats_to_json() -> str:
    return convert_struct_to_json(mem_stats_to_struct())


def mem_stats_to_json_pretty() -> str:
    return convert_struct_to_json_pretty(mem_stats_to_struct())


def mem_stats_to_bytes() -> bytes:
    return convert_struct_to_bytes(mem_stats_to_struct())


def mem_stats_to_map() -> Dict[str, Any]:
    return convert_struct_to_map(mem_stats_to_struct())


def mem_stats_to_fields() -> List[Tuple[str, Any]]:
    return convert_struct_to_fields(mem_stats_to_struct())
