"""Factory functions for CLI component creation.

Centralizes component instantiation to reduce coupling between CLI and
implementations. Enables easy substitution for testing.
"""

from __future__ import annotations

from MrmReader.config import AppConfig
from MrmReader.sources.crossref.client import CrossrefApiClient
from MrmReader.sources.crossref.source import CrossrefSource
from MrmReader.utils.log import log


class SourceFactory:
    """Factory for creating paper sources."""

    @staticmethod
    def create_crossref_source(config: AppConfig) -> CrossrefSource:
        """Create a Crossref source bound to the configured journal.

        Args:
            config: Application configuration.

        Returns:
            Configured CrossrefSource instance.
        """
        client = CrossrefApiClient(timeout=config.search.timeout)
        if client.mailto:
            log.debug("Crossref polite pool enabled: mailto=%s", client.mailto)
        return CrossrefSource(client=client, journal_issn=config.search.journal_issn)
