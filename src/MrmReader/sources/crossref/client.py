"""Crossref API client."""

from __future__ import annotations

import os
from typing import Any

import requests

from MrmReader.core.query import WorksQuery
from MrmReader.utils.log import log

CROSSREF_JOURNAL_WORKS_URL = "https://api.crossref.org/journals/{issn}/works"
DEFAULT_TIMEOUT = 30.0
MAILTO_ENV = "CROSSREF_MAILTO"

HEADERS = {
    "User-Agent": "mrm-reader/0.1 (terminal journal reader)",
    "Accept": "application/json",
}

_BASE_FIELDS = ("title", "URL", "published-online")


class CrossrefApiClient:
    """Low-level HTTP client for the Crossref REST API."""

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT, mailto: str | None = None) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            timeout: Request timeout in seconds.
            mailto: Contact address for Crossref's polite pool. Falls back to
                the ``CROSSREF_MAILTO`` environment variable.
        """
        self.timeout = timeout
        raw_mailto = mailto if mailto is not None else os.environ.get(MAILTO_ENV, "")
        self.mailto = raw_mailto.strip() or None
        self._session = requests.Session()

    def close(self) -> None:
        """Close the underlying HTTP session.
        """
        self._session.close()

    def fetch_journal_works(self, query: WorksQuery) -> list[dict[str, Any]]:
        """Fetch the latest work items of one journal.

        A single request is issued; errors are not retried.

        Args:
            query: Journal, row count and optional search term.

        Returns:
            List of Crossref work item mappings.

        Raises:
            requests.RequestException: On network failure or non-2xx status.
        """
        url = CROSSREF_JOURNAL_WORKS_URL.format(issn=query.journal_issn)
        params = build_params(query, mailto=self.mailto)
        log.debug("Crossref request url=%s params=%s", url, params)

        response = self._session.get(url, params=params, headers=HEADERS, timeout=self.timeout)
        response.raise_for_status()

        payload = response.json()
        message = payload.get("message", {}) if isinstance(payload, dict) else {}
        items = message.get("items", []) if isinstance(message, dict) else []
        if not isinstance(items, list):
            return []
        return [item for item in items if isinstance(item, dict)]


def build_params(query: WorksQuery, *, mailto: str | None = None) -> dict[str, str]:
    """Build query-string parameters for the journal works endpoint.

    Args:
        query: Works request.
        mailto: Optional polite-pool contact address.

    Returns:
        Parameter mapping for ``requests``.
    """
    fields = list(_BASE_FIELDS)
    if query.include_abstract:
        fields.insert(1, "abstract")

    params = {
        "sort": "published-online",
        "order": "desc",
        "select": ",".join(fields),
        "rows": str(query.rows),
    }
    term = (query.term or "").strip()
    if term:
        params["query"] = term
    if mailto:
        params["mailto"] = mailto
    return params
