"""Greedy word wrapping with ANSI-aware width accounting."""

from __future__ import annotations

import re

from MrmReader.formatting.ansi import visible_width

# Only plain spaces and tabs separate words; non-breaking spaces stay inside.
_WORD_SEP_RE = re.compile(r"[ \t]+")


def wrap_text(text: str, prefix: str, max_width: int) -> list[str]:
    """Wrap text to a visible column budget.

    Each ``\\n``-separated line of ``text`` is wrapped on its own, so
    paragraph breaks survive: an empty input line yields one empty output
    line. Words are never split; a word wider than the budget gets a line of
    its own.

    Args:
        text: Text to wrap, possibly containing newlines.
        prefix: String prepended to every non-empty output line.
        max_width: Visible width budget including the prefix.

    Returns:
        Wrapped lines.
    """
    budget = max_width - visible_width(prefix)
    out: list[str] = []

    for input_line in text.split("\n"):
        if not input_line:
            out.append("")
            continue

        line = ""
        line_width = 0
        for word in _WORD_SEP_RE.split(input_line):
            if not word:
                continue
            word_width = visible_width(word)
            if line and line_width + 1 + word_width > budget:
                out.append(prefix + line)
                line, line_width = word, word_width
            elif line:
                line = f"{line} {word}"
                line_width += 1 + word_width
            else:
                line, line_width = word, word_width

        if line:
            out.append(prefix + line)

    return out
