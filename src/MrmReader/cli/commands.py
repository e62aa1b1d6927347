"""Command implementations for the mrm CLI.

Encapsulates business logic for fetching and displaying papers, separated
from CLI parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from MrmReader.config import AppConfig
from MrmReader.renderers import OutputWriter
from MrmReader.sources.crossref.source import CrossrefSource
from MrmReader.utils.log import log


@dataclass(slots=True)
class LatestPapersCommand:
    """Fetch the latest papers of the configured journal and write them out."""

    config: AppConfig
    source: CrossrefSource
    output_writer: OutputWriter

    def execute(self) -> int:
        """Fetch papers once and hand them to the output writer.

        Returns:
            Number of papers written.
        """
        search = self.config.search
        log.info("Fetching latest papers from %s...", search.journal_name)
        if search.query:
            log.info("Searching for: %s", search.query)

        papers = self.source.latest(
            max_results=search.max_results,
            term=search.query or None,
            include_abstract=not self.config.display.title_only,
        )
        log.info("Fetched %d papers", len(papers))
        if not papers:
            log.warning("No papers found")
            return 0

        self.output_writer.write_papers(papers)
        return len(papers)
