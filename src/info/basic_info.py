"""Basic information about the running process."""

from __future__ import annotations

import getpass
import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, List, Tuple

from common.shared.conversions import (
    convert_struct_to_bytes,
    convert_struct_to_fields,
    convert_struct_to_json,
    convert_struct_to_json_pretty,
    convert_struct_to_map,
)
from context.app_context import AppContext

UNKNOWN = "unknown"

_DURATION_UNITS = (
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


@dataclass
class BasicInfo:
    uid: str
    gid: str
    username: str
    start_time: str
    up_time_sec: int
    up_time_str: str
    application_name: str
    region: str
    az: str
    realm: str
    domain: str


def format_duration_short(duration: timedelta) -> str:
    """Format a duration with its largest unit only, e.g. ``2 hours``."""
    seconds = int(duration.total_seconds())
    for unit, unit_seconds in _DURATION_UNITS:
        if seconds >= unit_seconds:
            count = seconds // unit_seconds
            return f"{count} {unit}{'s' if count > 1 else ''}"
    return "0 seconds"


def _user_ids() -> Tuple[str, str, str]:
    try:
        username = getpass.getuser()
    except (KeyError, OSError):
        username = UNKNOWN
    # os.getuid / os.getgid are missing on Windows
    uid = str(os.getuid()) if hasattr(os, "getuid") else UNKNOWN
    gid = str(os.getgid()) if hasattr(os, "getgid") else UNKNOWN
    return uid, gid, username


def basic_info_to_struct(ctx: AppContext) -> BasicInfo:
    uid, gid, username = _user_ids()
    up_time = ctx.up_time()
    return BasicInfo(
        uid=uid,
        gid=gid,
        username=username,
        start_time=ctx.start_time.isoformat(timespec="seconds"),
        up_time_sec=int(up_time.total_seconds()),
        up_time_str=format_duration_short(up_time),
        application_name=ctx.application_name,
        realm=os.getenv("REALM", ""),
        region=os.getenv("REGION", ""),
        az=os.getenv("AZ", ""),
        domain=os.getenv("DOMAIN", ""),
    )


def basic_info_to_json(ctx: AppContext) -> str:
    return convert_struct_to_json(basic_info_to_struct(ctx))


def basic_info_to_json_pretty(ctx: AppContext) -> str:
    return convert_struct_to_json_pretty(basic_info_to_struct(ctx))


def basic_info_to_bytes(ctx: AppContext) -> bytes:
    return convert_struct_to_bytes(basic_info_to_struct(ctx))


def basic_info_to_map(ctx: AppContext) -> Dict[str, Any]:
    return convert_struct_to_map(basic_info_to_struct(ctx))


def basic_info_to_fields(ctx: AppContext) -> List[Tuple[str, Any]]:
    return convert_struct_to_fields(basic_info_to_struct(ctx))
