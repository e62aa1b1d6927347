from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from MrmReader.config.display import DisplayConfig, check_display, load_display
from MrmReader.config.output import OutputConfig, check_output, load_output
from MrmReader.config.runtime import RuntimeConfig, check_runtime, load_runtime
from MrmReader.config.search import SearchConfig, check_search, load_search

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    search: SearchConfig
    display: DisplayConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    search = load_search(raw)
    display = load_display(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_search(search)
    check_display(display)
    check_output(output)

    return AppConfig(
        runtime=runtime,
        search=search,
        display=display,
        output=output,
    )


def load_config(
    config_path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    default_path: Path = DEFAULT_CONFIG_PATH,
) -> AppConfig:
    """Load config by layering defaults, an optional file and overrides.

    Args:
        config_path: Optional user YAML file merged over the defaults.
        overrides: Optional mapping (e.g. from CLI flags) merged last.
        default_path: YAML file holding the default values.

    Returns:
        Validated application configuration.
    """
    merged = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path is not None and config_path != default_path:
        merged = merge_config_dicts(merged, parse_yaml(config_path.read_text(encoding="utf-8")))
    if overrides:
        merged = merge_config_dicts(merged, overrides)
    return parse_config_dict(merged)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
