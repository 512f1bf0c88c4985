#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Runtime configuration for Disk Space Optimizer.

A :class:`Config` is built once at startup from defaults, an optional TOML
file passed with ``--config`` and the command-line flags, then handed to the
dispatcher. The file is only ever read.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore

from diskoptimizer.constants import (
    DEFAULT_LOG_TOOL, DEFAULT_PACKAGE_MANAGER, DEFAULT_PACKAGE_QUERY,
    DEFAULT_VACUUM_DAYS
)
from diskoptimizer.logging_setup import logger

CONFIG_SECTION = "optimizer"


@dataclass(frozen=True)
class Config:
    package_manager: str = DEFAULT_PACKAGE_MANAGER
    package_query: str = DEFAULT_PACKAGE_QUERY
    log_tool: str = DEFAULT_LOG_TOOL
    default_vacuum_days: int = DEFAULT_VACUUM_DAYS
    use_sudo: bool = True
    assume_yes: bool = False
    dry_run: bool = False

    def with_overrides(self, **overrides: Any) -> "Config":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def default_config() -> Dict[str, Any]:
    """Return default configuration."""
    return {f.name: f.default for f in fields(Config)}


def _check_type(key: str, value: Any) -> bool:
    expected = type(default_config()[key])
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    return isinstance(value, expected)


def config_from_mapping(values: Dict[str, Any]) -> Config:
    """Build a Config from a mapping, dropping unknown or mistyped keys."""
    known = default_config()
    accepted = {}
    for key, value in values.items():
        if key not in known:
            logger.warning(f"Ignoring unknown config key: {key}")
            continue
        if not _check_type(key, value):
            logger.warning(f"Ignoring config key {key} with invalid value {value!r}")
            continue
        accepted[key] = value
    return Config(**accepted)


def load_config(path: Optional[str]) -> Config:
    """Load configuration from a TOML file or return defaults."""
    if not path:
        return Config()

    config_path = Path(path).expanduser()
    if not config_path.exists():
        logger.error(f"Config file not found: {config_path}, using defaults")
        return Config()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.error(f"Error loading config: {e}")
        return Config()

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        logger.error(f"[{CONFIG_SECTION}] in {config_path} is not a table, using defaults")
        return Config()
    logger.debug(f"Loaded config from {config_path}")
    return config_from_mapping(section)
