"""
@meta
name: shared_argument_parsing
type: utility
domain: shared
responsibility:
  - Provide shared argument parsing utilities for service entry points
  - Add boot config arguments (config path, inline overrides)
inputs:
  - ArgumentParser instances
outputs:
  - Configured parsers
tags:
  - utility
  - shared
  - cli
lifecycle:
  status: active
"""

"""Shared argument parsing utilities for service entry points."""

import argparse

BOOT_CONFIG_PATH_FLAG = "--boot-config"
BOOT_CONFIG_OVERRIDE_FLAG = "--set"


def add_boot_config_path_argument(parser: argparse.ArgumentParser) -> None:
    """Add --boot-config argument to parser."""
    parser.add_argument(
        BOOT_CONFIG_PATH_FLAG,
        dest="boot_config_path",
        type=str,
        default="",
        help="Path to boot config file, relative paths are joined with the working directory",
    )


def add_boot_config_override_argument(parser: argparse.ArgumentParser) -> None:
    """
    Add --set argument to parser.

    Receives flattened boot config keys and overrides them in the loaded boot
    config, e.g. ``--set "server[0].port=2008,server[0].common.enabled=false"``:

    - comma (,) separates key/value sections
    - [index] accesses sequences
    - equal sign (=) separates key and value
    - dot (.) accesses mappings
    """
    parser.add_argument(
        BOOT_CONFIG_OVERRIDE_FLAG,
        dest="boot_config_overrides",
        type=str,
        default="",
        help="Set values on the command line (separate values with commas: key1=val1,key2=val2)",
    )


def add_boot_arguments(parser: argparse.ArgumentParser) -> None:
    """Add all boot config arguments to parser."""
    add_boot_config_path_argument(parser)
    add_boot_config_override_argument(parser)
