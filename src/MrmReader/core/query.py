from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WorksQuery:
    """Request for the latest works of one journal.

    Attributes:
        journal_issn: ISSN identifying the journal on Crossref.
        rows: Number of works to request.
        term: Optional free-text search term.
        include_abstract: Whether abstracts should be requested at all.
    """

    journal_issn: str
    rows: int
    term: str | None = None
    include_abstract: bool = True
