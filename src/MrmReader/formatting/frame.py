"""Fixed-width frame drawing."""

from __future__ import annotations

from typing import Sequence

from MrmReader.core.models import CLASSIC_FRAME, FrameStyle
from MrmReader.formatting.ansi import visible_width


def render_frame(lines: Sequence[str], width: int, style: FrameStyle = CLASSIC_FRAME) -> list[str]:
    """Draw a border around content lines.

    Content lines keep their escape sequences but are padded by visible
    width, so each framed line spans exactly ``width`` columns. A line wider
    than ``width - 4`` is emitted unpadded and pushes the right border out.

    Args:
        lines: Pre-wrapped content lines.
        width: Total visible width of each framed line.
        style: Border glyphs.

    Returns:
        Framed lines, top and bottom borders included.
    """
    fill = style.horizontal * (width - 2)
    blank = f"{style.vertical}{' ' * (width - 2)}{style.vertical}"

    framed = [f"{style.top_left}{fill}{style.top_right}"]
    for line in lines:
        if not line:
            framed.append(blank)
            continue
        padding = max(0, width - 4 - visible_width(line))
        framed.append(f"{style.vertical} {line}{' ' * padding} {style.vertical}")
    framed.append(f"{style.bottom_left}{fill}{style.bottom_right}")
    return framed
