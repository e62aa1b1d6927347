"""ANSI-aware width measurement.

Color and erase-line escape sequences occupy no terminal columns, so every
width computation in the rendering pipeline goes through `visible_width`.
"""

from __future__ import annotations

import re

_ANSI_CSI_RE = re.compile(r"\x1b\[[0-9;]*[mK]")


def strip_ansi(text: str) -> str:
    """Remove ANSI color/reset sequences from text.

    Args:
        text: String that may contain escape sequences.

    Returns:
        The printable characters only.
    """
    return _ANSI_CSI_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return the number of columns text occupies when printed."""
    return len(strip_ansi(text))
