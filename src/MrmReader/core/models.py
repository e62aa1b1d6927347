from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Optional

import click

ABSTRACT_UNAVAILABLE = "Abstract not available"


@dataclass(frozen=True, slots=True)
class PaperRecord:
    """One journal article as fetched from the metadata API.

    Strings are kept raw (markup and entities included); cleaning happens
    at render time.

    Attributes:
        title: Raw article title.
        url: Landing page URL.
        publication_date: Pre-formatted date (YYYY-MM-DD, YYYY-MM or YYYY).
        abstract: Raw abstract text, or None when the API has none.
    """

    title: str
    url: str
    publication_date: str
    abstract: Optional[str] = None

    @property
    def has_abstract(self) -> bool:
        """Whether an abstract section should be rendered for this record."""
        return bool(self.abstract) and self.abstract != ABSTRACT_UNAVAILABLE


@dataclass(frozen=True, slots=True)
class Palette:
    """ANSI styling applied to date and section labels.

    Attributes:
        enabled: When False, `date` and `label` return text unchanged.
        date_color: click color name for the publication date.
        label_color: click color name for the section labels.
    """

    enabled: bool = True
    date_color: str = "green"
    label_color: str = "yellow"

    @classmethod
    def plain(cls) -> Palette:
        return cls(enabled=False)

    def date(self, text: str) -> str:
        if not self.enabled:
            return text
        return click.style(text, fg=self.date_color)

    def label(self, text: str) -> str:
        if not self.enabled:
            return text
        return click.style(text, fg=self.label_color, bold=True)


@dataclass(frozen=True, slots=True)
class FrameStyle:
    """Glyph set used to draw a frame. Every glyph is one column wide."""

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


CLASSIC_FRAME = FrameStyle("┌", "┐", "└", "┘", "_", "|")
BOX_FRAME = FrameStyle("┌", "┐", "└", "┘", "─", "│")

FRAME_STYLES: dict[str, FrameStyle] = {
    "classic": CLASSIC_FRAME,
    "box": BOX_FRAME,
}


@dataclass(frozen=True, slots=True)
class DisplayOptions:
    """Rendering options for one run.

    Attributes:
        title_only: Omit the abstract section.
        display_width: Visible column width of every framed line.
        palette: Styling for dates and labels.
        frame: Glyphs for the frame border.
    """

    title_only: bool = False
    display_width: int = 100
    palette: Palette = field(default_factory=Palette)
    frame: FrameStyle = CLASSIC_FRAME

    @property
    def content_width(self) -> int:
        """Columns available inside the frame (borders and padding removed)."""
        return self.display_width - 4
