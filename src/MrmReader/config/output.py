"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from MrmReader.config.common import (
    expect_str,
    expect_str_list,
    get_required_value,
    get_section,
)

_ALLOWED_FORMATS = {"console", "text"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    base_dir: str
    formats: tuple[str, ...]


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed output configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "output", required=True)
    formats = expect_str_list(get_required_value(section, "formats", "output.formats"), "output.formats")
    return OutputConfig(
        base_dir=expect_str(get_required_value(section, "base_dir", "output.base_dir"), "output.base_dir"),
        formats=tuple(dict.fromkeys(item.strip().lower() for item in formats)),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Args:
        config: Parsed output configuration.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")

    unknown = set(config.formats) - _ALLOWED_FORMATS
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {sorted(unknown)}")

    if "text" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
