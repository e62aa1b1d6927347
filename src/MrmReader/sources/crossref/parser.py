"""Crossref payload parser."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from dateutil import parser as dt_parser

from MrmReader.core.models import PaperRecord

UNKNOWN_DATE = "-"


def parse_crossref_items(items: Sequence[Any]) -> list[PaperRecord]:
    """Parse Crossref work items into PaperRecord objects.

    Title and abstract are kept raw; markup is cleaned at render time.
    """
    papers: list[PaperRecord] = []

    for item in items:
        if not isinstance(item, Mapping):
            continue
        title = _first_non_empty_text(item.get("title")) or "Untitled"
        abstract = _safe_str(item.get("abstract")) or None
        papers.append(
            PaperRecord(
                title=title,
                url=_extract_url(item),
                publication_date=format_publication_date(item.get("published-online")),
                abstract=abstract,
            )
        )

    return papers


def format_publication_date(section: Any) -> str:
    """Format a Crossref date section as YYYY[-MM[-DD]].

    ``date-parts`` is preferred; ``date-time`` is used as a fallback.

    Args:
        section: The ``published-online`` mapping of a work item.

    Returns:
        Formatted date, or ``"-"`` when nothing usable is present.
    """
    if not isinstance(section, Mapping):
        return UNKNOWN_DATE

    formatted = _format_date_parts(section.get("date-parts"))
    if formatted:
        return formatted

    date_time = _safe_str(section.get("date-time"))
    if date_time:
        try:
            return dt_parser.isoparse(date_time).strftime("%Y-%m-%d")
        except (TypeError, ValueError):
            return UNKNOWN_DATE
    return UNKNOWN_DATE


def _format_date_parts(raw_value: Any) -> str:
    """Join the first Crossref date-parts entry with dashes."""
    if not isinstance(raw_value, list) or not raw_value:
        return ""

    first_parts = raw_value[0]
    if not isinstance(first_parts, list) or not first_parts:
        return ""

    formatted: list[str] = []
    for idx, part in enumerate(first_parts[:3]):
        if isinstance(part, bool) or not isinstance(part, int):
            break
        formatted.append(f"{part:04d}" if idx == 0 else f"{part:02d}")
    return "-".join(formatted)


def _extract_url(item: Mapping[str, Any]) -> str:
    """Return the landing URL, falling back to a DOI link."""
    url = _safe_str(item.get("URL"))
    if url:
        return url
    doi = _safe_str(item.get("DOI"))
    return f"https://doi.org/{doi}" if doi else ""


def _first_non_empty_text(value: Any) -> str:
    """Return first non-empty string from value/list value."""
    if isinstance(value, list):
        for item in value:
            text = _safe_str(item)
            if text:
                return text
        return ""
    return _safe_str(value)


def _safe_str(value: Any) -> str:
    """Convert scalar value to stripped string."""
    if isinstance(value, str):
        return value.strip()
    return ""
