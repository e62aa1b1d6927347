from __future__ import annotations

"""Public configuration API for MrmReader."""

from MrmReader.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    merge_config_dicts,
    parse_config_dict,
)
from MrmReader.config.display import DisplayConfig
from MrmReader.config.output import OutputConfig
from MrmReader.config.runtime import RuntimeConfig
from MrmReader.config.search import SearchConfig

__all__ = [
    "RuntimeConfig",
    "SearchConfig",
    "DisplayConfig",
    "OutputConfig",
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "merge_config_dicts",
    "parse_config_dict",
]
