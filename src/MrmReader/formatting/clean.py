"""Markup and entity cleanup for Crossref title/abstract strings."""

from __future__ import annotations

import re
from typing import Final

_SCP_TAG_RE = re.compile(r"</?scp>")
_SUB_RE = re.compile(r"<sub>([^<]+)</sub>")
_SUP_RE = re.compile(r"<sup>([^<]+)</sup>")
_TAG_RE = re.compile(r"<[^>]+>")

_ENTITIES: Final[dict[str, str]] = {
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&quot;": '"',
    "&apos;": "'",
    "&minus;": "-",
    "&hyphen;": "-",
    "&ndash;": "-",
    "&#8208;": "-",
    "&#8209;": "-",
    "&#8210;": "-",
    "&#8211;": "-",
    "&mdash;": "—",
    "&#8212;": "—",
}
_ENTITY_RE = re.compile("|".join(re.escape(entity) for entity in _ENTITIES))


def clean_text(raw: str) -> str:
    """Turn API markup into plain text.

    Small caps tags are dropped, subscripts become ``_X`` and superscripts
    ``^X``, any other tag is removed, then a fixed set of HTML entities is
    decoded in a single pass. Unknown entities are left untouched.

    Args:
        raw: Title or abstract string as returned by the API.

    Returns:
        Cleaned plain text.
    """
    if not raw:
        return ""
    text = _SCP_TAG_RE.sub("", raw)
    text = _SUB_RE.sub(r"_\1", text)
    text = _SUP_RE.sub(r"^\1", text)
    text = _TAG_RE.sub("", text)
    return _ENTITY_RE.sub(lambda match: _ENTITIES[match.group(0)], text)
