"""Search domain configuration (journal, request size, search term)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

from MrmReader.config.common import (
    expect_float,
    expect_int,
    expect_str,
    get_required_value,
    get_section,
)

_ISSN_RE = re.compile(r"^\d{4}-\d{3}[\dX]$")
# Crossref caps ``rows`` at 1000.
_MAX_ROWS = 1000


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated journal and request settings."""

    journal_issn: str
    journal_name: str
    max_results: int
    timeout: float
    query: str


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed search configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "search", required=True)
    return SearchConfig(
        journal_issn=expect_str(
            get_required_value(section, "journal_issn", "search.journal_issn"),
            "search.journal_issn",
        ).strip().upper(),
        journal_name=expect_str(
            get_required_value(section, "journal_name", "search.journal_name"),
            "search.journal_name",
        ).strip(),
        max_results=expect_int(get_required_value(section, "max_results", "search.max_results"), "search.max_results"),
        timeout=expect_float(get_required_value(section, "timeout", "search.timeout"), "search.timeout"),
        query=expect_str(section.get("query") or "", "search.query").strip(),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Args:
        config: Parsed search configuration.

    Raises:
        ValueError: If values violate search constraints.
    """
    if not _ISSN_RE.match(config.journal_issn):
        raise ValueError(f"search.journal_issn must look like NNNN-NNNN, got {config.journal_issn!r}")
    if not config.journal_name:
        raise ValueError("search.journal_name must not be empty")
    if not 1 <= config.max_results <= _MAX_ROWS:
        raise ValueError(f"search.max_results must be between 1 and {_MAX_ROWS}")
    if config.timeout <= 0:
        raise ValueError("search.timeout must be positive")
