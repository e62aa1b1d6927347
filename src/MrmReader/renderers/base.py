"""Base classes for output writers.

Provides abstraction for writing framed papers to the terminal or files.
Separates control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from MrmReader.core.models import PaperRecord


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_papers(self, papers: Sequence[PaperRecord]) -> None:
        """Write one batch of fetched papers.

        Args:
            papers: Papers in display order.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'mrm').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_papers(self, papers: Sequence[PaperRecord]) -> None:
        """Send papers to all writers."""
        for writer in self.writers:
            writer.write_papers(papers)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
