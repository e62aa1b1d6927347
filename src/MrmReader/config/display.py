"""Display domain configuration (frame width, colors, glyphs)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from MrmReader.config.common import expect_bool, expect_choice, expect_int, get_required_value, get_section
from MrmReader.core.models import FRAME_STYLES, DisplayOptions, Palette

_MIN_WIDTH = 20


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    """Store validated display settings."""

    width: int
    title_only: bool
    color: bool
    frame: str

    def to_options(self) -> DisplayOptions:
        """Build the DisplayOptions threaded through the renderers."""
        return DisplayOptions(
            title_only=self.title_only,
            display_width=self.width,
            palette=Palette() if self.color else Palette.plain(),
            frame=FRAME_STYLES[self.frame],
        )


def load_display(raw: Mapping[str, Any]) -> DisplayConfig:
    """Load display domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or the frame name is unknown.
    """
    section = get_section(raw, "display", required=True)
    return DisplayConfig(
        width=expect_int(get_required_value(section, "width", "display.width"), "display.width"),
        title_only=expect_bool(
            get_required_value(section, "title_only", "display.title_only"),
            "display.title_only",
        ),
        color=expect_bool(get_required_value(section, "color", "display.color"), "display.color"),
        frame=expect_choice(section.get("frame", "classic"), FRAME_STYLES, "display.frame"),
    )


def check_display(config: DisplayConfig) -> None:
    """Validate display domain constraints.

    Raises:
        ValueError: If values violate display constraints.
    """
    if config.width < _MIN_WIDTH:
        raise ValueError(f"display.width must be at least {_MIN_WIDTH}")
