"""Configs registered in an application context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from common.shared.conversions import (
    convert_struct_to_bytes,
    convert_struct_to_json,
    convert_struct_to_json_pretty,
)
from context.app_context import AppContext


@dataclass
class ConfigInfo:
    name: str
    raw: str


def config_info_to_struct(ctx: AppContext) -> List[ConfigInfo]:
    return [ConfigInfo(name=name, raw=str(config)) for name, config in ctx.list_configs().items()]


def config_info_to_json(ctx: AppContext) -> str:
    return convert_struct_to_json(config_info_to_struct(ctx))


def config_info_to_json_pretty(ctx: AppContext) -> str:
    return convert_struct_to_json_pretty(config_info_to_struct(ctx))


def config_info_to_bytes(ctx: AppContext) -> bytes:
    return convert_struct_to_bytes(config_info_to_struct(ctx))


def config_info_to_map(ctx: AppContext) -> Dict[str, Any]:
    """Configs keyed by name."""
    return {info.name: info.raw for info in config_info_to_struct(ctx)}


def config_info_to_fields(ctx: AppContext) -> List[Tuple[str, Any]]:
    return [(info.name, info.raw) for info in config_info_to_struct(ctx)]
