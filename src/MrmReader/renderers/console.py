"""Console text output renderers.

Turns a `PaperRecord` into a framed block of text lines and provides the
ConsoleOutputWriter implementation for command output.
"""

from __future__ import annotations

from typing import Iterable

import click

from MrmReader.core.models import DisplayOptions, PaperRecord
from MrmReader.formatting import clean_text, render_frame, segment_abstract, wrap_text
from MrmReader.renderers.base import OutputWriter

_INDENT = "  "


def format_paper(paper: PaperRecord, options: DisplayOptions) -> list[str]:
    """Render one paper as a framed block.

    Args:
        paper: Paper with raw title and abstract.
        options: Display options for this run.

    Returns:
        Framed lines, each ``options.display_width`` columns wide.
    """
    palette = options.palette
    width = options.content_width

    lines: list[str] = [palette.date(paper.publication_date), ""]

    lines.append(palette.label("Title:"))
    lines.extend(wrap_text(clean_text(paper.title), _INDENT, width))
    lines.append("")

    lines.append(palette.label("URL:"))
    lines.extend(wrap_text(paper.url, _INDENT, width))

    if not options.title_only and paper.has_abstract:
        lines.append("")
        lines.append(palette.label("Abstract:"))
        abstract = segment_abstract(clean_text(paper.abstract or ""))
        lines.extend(wrap_text(abstract, _INDENT, width))

    return render_frame(lines, options.display_width, options.frame)


def format_papers(papers: Iterable[PaperRecord], options: DisplayOptions) -> list[list[str]]:
    """Render papers in input order."""
    return [format_paper(paper, options) for paper in papers]


def render_text(papers: Iterable[PaperRecord], options: DisplayOptions) -> str:
    """Render papers into one printable string.

    Each block is followed by a blank separator line.

    Args:
        papers: Iterable of papers.
        options: Display options for this run.

    Returns:
        A formatted string ready to be printed.
    """
    chunks: list[str] = []
    for block in format_papers(papers, options):
        chunks.append("\n".join(block))
        chunks.append("")
    return "\n".join(chunks) + "\n" if chunks else ""


class ConsoleOutputWriter(OutputWriter):
    """Write framed papers to stdout."""

    def __init__(self, options: DisplayOptions) -> None:
        self.options = options

    def write_papers(self, papers: Iterable[PaperRecord]) -> None:
        """Print every paper followed by a blank line.

        Args:
            papers: Papers in display order.
        """
        for block in format_papers(papers, self.options):
            for line in block:
                click.echo(line)
            click.echo("")

    def finalize(self, action: str) -> None:
        """No-op for console output."""
