"""Section labelling for structured abstracts."""

from __future__ import annotations

from typing import Final

_ABSTRACT_PREFIX = "Abstract"

# Keywords are replaced wherever they occur, including inside other words.
_SECTION_BREAKS: Final[tuple[tuple[str, str], ...]] = (
    ("Purpose", "\n[Purpose]:"),
    ("Methods", "\n\n[Methods]:"),
    ("Results", "\n\n[Results]:"),
    ("Conclusion", "\n\n[Conclusion]:"),
)


def segment_abstract(cleaned: str) -> str:
    """Insert labelled line breaks before the usual abstract sections.

    Args:
        cleaned: Abstract text already passed through `clean_text`.

    Returns:
        Abstract with ``[Purpose]:``, ``[Methods]:``, ``[Results]:`` and
        ``[Conclusion]:`` labels on their own paragraphs.
    """
    text = cleaned
    if text.startswith(_ABSTRACT_PREFIX):
        text = text[len(_ABSTRACT_PREFIX):]

    for keyword, replacement in _SECTION_BREAKS:
        text = text.replace(keyword, replacement)

    if text.startswith("\n[Purpose]"):
        text = text[1:]
    return text
