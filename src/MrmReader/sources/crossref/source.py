"""Crossref source adapter."""

from __future__ import annotations

from dataclasses import dataclass

from MrmReader.core.models import PaperRecord
from MrmReader.core.query import WorksQuery
from MrmReader.sources.crossref.client import CrossrefApiClient
from MrmReader.sources.crossref.parser import parse_crossref_items


@dataclass(slots=True)
class CrossrefSource:
    """Crossref-backed source returning the latest papers of one journal."""

    client: CrossrefApiClient
    journal_issn: str

    def latest(self, *, max_results: int, term: str | None = None, include_abstract: bool = True) -> list[PaperRecord]:
        """Fetch the most recently published papers.

        Args:
            max_results: Maximum number of works requested.
            term: Optional search term.
            include_abstract: Whether abstracts should be requested.

        Returns:
            Papers ordered newest first, as returned by Crossref.
        """
        query = WorksQuery(
            journal_issn=self.journal_issn,
            rows=max_results,
            term=term,
            include_abstract=include_abstract,
        )
        items = self.client.fetch_journal_works(query)
        return parse_crossref_items(items)

    def close(self) -> None:
        """Close resources held by the Crossref source adapter.
        """
        self.client.close()
